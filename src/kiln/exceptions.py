"""Exceptions for the Kiln unit generator and runtime.

Exception Hierarchy:
TemplateError (base)
├── GeneratorError              # Caller contract violated during generation
│   ├── InvalidUnitNameError    # Class name empty or not an identifier
│   └── DuplicateBlockError     # Two static blocks share (layer, name)
└── TemplateRuntimeError        # Render-time error in a generated unit
    └── BlockNotFoundError      # Block name/layer missing from Blocks

Every error carries a searchable ``ErrorCode`` and can render itself as a
compact terminal diagnostic via ``format_compact()``.

Example:
    ```
    K-GEN-002: Block 'content' is defined twice in layer 0
      Location: {block content} on line 12
      Hint: Rename one of the blocks or move it to its own layer
    ```

"""

from __future__ import annotations

from difflib import get_close_matches
from enum import Enum
from typing import Any

from kiln.utils import terminal


class ErrorCode(Enum):
    """Searchable error codes.

    Format: K-{CATEGORY}-{NUMBER}
    Categories: GEN (generator), RUN (runtime)
    """

    INVALID_UNIT_NAME = "K-GEN-001"
    DUPLICATE_BLOCK = "K-GEN-002"

    BLOCK_NOT_FOUND = "K-RUN-001"
    RUNTIME_ERROR = "K-RUN-002"

    @property
    def category(self) -> str:
        """Error category ('generator' or 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "GEN": "generator",
            "RUN": "runtime",
        }.get(prefix, "unknown")


class TemplateError(Exception):
    """Base exception for all Kiln errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-screen diagnostic without traceback noise."""
        header = str(self)
        if self.code and self.code.value not in header:
            return terminal.format_error_header(self.code.value, header)
        return header


class GeneratorError(TemplateError):
    """A caller handed the generator inputs it cannot turn into a unit.

    Generation is deterministic, so these are never retried: the same
    inputs would fail the same way.
    """

    def __init__(
        self,
        message: str,
        *,
        location: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.location = location
        self.suggestion = suggestion
        super().__init__(message)

    def format_compact(self) -> str:
        parts = [
            terminal.format_error_header(
                self.code.value if self.code else None,
                self.message,
            )
        ]
        if self.location:
            parts.append(f"  Location: {terminal.location(self.location)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class InvalidUnitNameError(GeneratorError):
    """The unit's class name is missing or cannot be a Python class name.

    Example:
            >>> TemplateGenerator().generate(PrintContext(), "", "")
        InvalidUnitNameError: Invalid unit name ''

    """

    code: ErrorCode | None = ErrorCode.INVALID_UNIT_NAME

    def __init__(self, name: Any):
        self.name = name
        if not name:
            hint = "Pass a non-empty class name, e.g. 'Template_3f2a'"
        else:
            hint = "Class names must be identifiers and not Python keywords"
        super().__init__(f"Invalid unit name {name!r}", suggestion=hint)


class DuplicateBlockError(GeneratorError):
    """Two static blocks resolve to the same (layer, name) metadata key.

    The runtime could only ever reach one of them, so the generator refuses
    to pick a winner.
    """

    code: ErrorCode | None = ErrorCode.DUPLICATE_BLOCK

    def __init__(self, name: str, layer: Any, location: str | None = None):
        self.name = name
        self.layer = layer
        super().__init__(
            f"Block '{name}' is defined twice in layer {layer!r}",
            location=location,
            suggestion="Rename one of the blocks or move it to its own layer",
        )


class TemplateRuntimeError(TemplateError):
    """Error raised by the runtime while rendering a generated unit.

    Attributes:
        message: Error description
        template_name: Class name of the rendering unit
        suggestion: Actionable fix suggestion

    """

    code: ErrorCode | None = ErrorCode.RUNTIME_ERROR

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.template_name = template_name
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Runtime Error: {self.message}"]
        if self.template_name:
            parts.append(f"  Location: {terminal.location(self.template_name)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Suggestion:')} {self.suggestion}")
        return "\n".join(parts)

    def format_compact(self) -> str:
        parts = [
            terminal.format_error_header(
                self.code.value if self.code else None,
                self.message,
            )
        ]
        if self.template_name:
            parts.append(f"  Location: {terminal.location(self.template_name)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class BlockNotFoundError(TemplateRuntimeError):
    """No block of that name is registered in the requested layer.

    If ``available`` is given, a "Did you mean?" suggestion is added when a
    close match exists.
    """

    code: ErrorCode | None = ErrorCode.BLOCK_NOT_FOUND

    def __init__(
        self,
        name: str,
        layer: Any,
        *,
        available: frozenset[str] = frozenset(),
        template_name: str | None = None,
    ):
        self.name = name
        self.layer = layer
        suggestion = None
        matches = get_close_matches(name, sorted(available), n=1, cutoff=0.6)
        if matches:
            suggestion = f"Did you mean '{terminal.suggestion(matches[0])}'?"
        elif available:
            suggestion = f"Available blocks: {', '.join(sorted(available))}"
        super().__init__(
            f"Block '{name}' not found in layer {layer!r}",
            template_name=template_name,
            suggestion=suggestion,
        )
