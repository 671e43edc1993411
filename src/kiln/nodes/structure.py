"""Block structure nodes consumed by the generator.

These are the structured inputs the upstream printer hands over alongside the
printed root body. Content is already printed Python statement text; nothing
here is parsed again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from kiln.context import ContentType

# Inheritance layers. Integers count embedding depth (0 is the template's own
# top level); strings name special layers resolved by the runtime.
Layer = int | str | None

LAYER_TOP = 0
LAYER_SNIPPET = "snippet"
LAYER_LOCAL = "local"


@dataclass(frozen=True, slots=True)
class Tag:
    """Template construct a block was defined by, e.g. the {block} tag."""

    name: str
    lineno: int
    notation: str = ""

    @property
    def location(self) -> str:
        """Human readable source position, used in method comments."""
        return f"on line {self.lineno}"


@dataclass(frozen=True, slots=True)
class Param:
    """Declared parameter: variable name plus printed default expression."""

    var: str
    expr: str = "None"


@dataclass(frozen=True, slots=True)
class Block:
    """Named content region compiled into its own method.

    Attributes:
        name: Block name (for dynamic blocks, the printed name expression)
        method: Target method name in the generated class
        layer: Inheritance layer, or None when not part of the static table
        context: Content type active where the block was defined
        content: Printed body text
        parameters: Declared parameters, in positional order
        tag: Originating construct, for diagnostics
        dynamic: True when the name is only known at render time

    """

    name: str
    method: str
    layer: Layer = LAYER_TOP
    context: ContentType = ContentType.HTML
    content: str = ""
    parameters: Sequence[Param] = ()
    tag: Tag = Tag("block", 0)
    dynamic: bool = False

    @property
    def is_embedded(self) -> bool:
        """True for a block nested inside an embedded sub-template.

        Such blocks read their scope from the runtime's variable stack
        instead of the call-time parameters.
        """
        layer = self.layer
        return (
            self.tag.name == "block"
            and isinstance(layer, int)
            and not isinstance(layer, bool)
            and layer != LAYER_TOP
        )

    def describe(self) -> str:
        """Diagnostic text for the defining construct: ``{block content} on line 4``.

        The tag's own notation wins; otherwise it is rebuilt from the tag
        and block names.
        """
        notation = self.tag.notation or f"{{{self.tag.name} {self.name}}}"
        return f"{notation} {self.tag.location}"
