"""Kiln generator core: assembles one template unit.

The TemplateGenerator turns an already-printed template body plus the
print context (root parameters, initialization code, content type, blocks)
into the source of a Python module holding one template class.

Pipeline:
1. **main**: root parameter bindings + printed body + scope snapshot
2. **prepare**: root parameter bindings + initialization (if any)
3. **constants**: ``ContentType`` (non-HTML units) and ``Blocks``
4. **blocks**: one method per block (see ``BlockCompilationMixin``)
5. **serialize**: constants, properties, methods inside the class
6. **finish**: merge literal emissions, reformat

Generated unit:

    ```python
    # kiln: strict

    from kiln import runtime as rt


    # page.kiln
    class Template_page(rt.Template):
        Blocks = {
            0: {
                'content': 'block_content',
            },
        }

        def main(self) -> dict:
            ctx = {}
            ctx.update(self.params)
            rt.emit('<main>')
            ...
            return dict(ctx)

        # {block content} on line 3
        def block_content(self, _kiln_args: dict) -> None:
            rt.emit('Hello')
    ```

Determinism:
The output depends only on the inputs: members keep registration order,
literals are serialized by ``dump()``, and nothing reads clocks, paths or
hash-ordered collections. The same template always compiles to the same
bytes, which upstream build caches rely on.

Thread-Safety:
A generator instance accumulates members while generating and is meant to
be used for one unit and discarded. Independent instances share no state.

"""

from __future__ import annotations

import keyword
import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from kiln.compiler.blocks import BlockCompilationMixin
from kiln.compiler.config import DEFAULT_CONFIG, GeneratorConfig
from kiln.compiler.params import SCOPE, build_params
from kiln.compiler.passes import optimize_emit, reformat_code
from kiln.compiler.registry import MemberRegistry, Method
from kiln.context import DEFAULT_CONTENT_TYPE
from kiln.exceptions import InvalidUnitNameError
from kiln.utils.lines import dedent, indent
from kiln.utils.literals import dump

if TYPE_CHECKING:
    from kiln.context import PrintContext

logger = logging.getLogger(__name__)

STRICT_MARKER = "# kiln: strict"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class TemplateGenerator(BlockCompilationMixin, MemberRegistry):
    """Assemble printed template code into a Python template class.

    Extensions may register extra members on the generator before
    ``generate()`` serializes the unit:

            >>> generator = TemplateGenerator()
            >>> generator.add_property("layout", "base.kiln")
            >>> code = generator.generate(PrintContext(), "rt.emit('hi')", "Template_hi")

    Attributes:
        config: GeneratorConfig shaping the emitted text

    """

    def __init__(self, config: GeneratorConfig = DEFAULT_CONFIG) -> None:
        super().__init__()
        self.config = config

    def generate(
        self,
        context: PrintContext,
        content: str,
        class_name: str,
        comment: str | None = None,
        *,
        strict_mode: bool = False,
    ) -> str:
        """Generate unit source.

        Args:
            context: Print context filled by the printer
            content: Printed root body
            class_name: Name of the generated class
            comment: Optional unit comment, e.g. the template's source path
            strict_mode: Emit the strict-mode marker line

        Returns:
            Python module source defining ``class_name``

        Raises:
            InvalidUnitNameError: If ``class_name`` is empty or not a usable
                class name
            DuplicateBlockError: If two static blocks share (layer, name)
        """
        if (
            not isinstance(class_name, str)
            or not class_name.isidentifier()
            or keyword.iskeyword(class_name)
        ):
            raise InvalidUnitNameError(class_name)

        logger.debug(f"Generating unit {class_name} with {len(context.blocks)} block(s)")

        extract_params = build_params(context.params_extraction, "self.params")
        self.add_method(
            "main",
            _join_statements(
                f"{SCOPE} = {{}}",
                extract_params,
                content,
                f"return dict({SCOPE})",
            ),
            "",
            "dict",
        )

        if context.initialization:
            self.add_method(
                "prepare",
                _join_statements(f"{SCOPE} = {{}}", extract_params, context.initialization),
                "",
                "None",
            )

        content_type = context.get_content_type()
        if content_type != DEFAULT_CONTENT_TYPE:
            self.add_constant("ContentType", content_type)

        self._generate_blocks(context.blocks, context)

        code = self._serialize(class_name, comment, strict_mode)
        if self.config.optimize_emit:
            code = optimize_emit(code, self.config.emit_call)
        if self.config.reformat:
            code = reformat_code(code)

        logger.debug(f"Generated unit {class_name}: {len(code)} characters")
        return code

    def _serialize(self, class_name: str, comment: str | None, strict_mode: bool) -> str:
        """Lay out the module: header, class statement, member groups."""
        config = self.config

        groups: list[str] = []
        constants = [self._format_attribute(n, v) for n, v in self.get_constants().items()]
        if constants:
            groups.append("\n".join(constants))
        properties = self.get_properties()
        if properties:
            groups.append(self._format_properties(properties))
        groups.extend(
            self._format_method(method)
            for method in self.get_methods().values()
            if method is not None
        )

        parts: list[str] = []
        if strict_mode:
            parts.append(f"{STRICT_MARKER}\n\n")
        parts.append(f"{config.import_line}\n\n\n")
        if comment is not None:
            parts.append(self._format_comment(comment, "") + "\n")
        parts.append(f"class {class_name}({config.base_reference}):\n")
        parts.append("\n\n".join(groups) + "\n")
        return "".join(parts)

    def _format_attribute(self, name: str, value: Any) -> str:
        return indent(f"{name} = {dump(value, self.config.indent)}", self.config.indent)

    def _format_properties(self, properties: Mapping[str, Any]) -> str:
        """Render properties as instance attributes set in ``__init__``.

        Each instance evaluates the literals again, so mutable values are
        never shared between instances.
        """
        assignments = [
            f"self.{name} = {dump(value, self.config.indent)}"
            for name, value in properties.items()
        ]
        body = "\n".join(["super().__init__(*args, **kwargs)", *assignments])
        return self._format_method(Method("__init__", body, "*args, **kwargs", "None"))

    def _format_method(self, method: Method) -> str:
        prefix = self.config.indent
        lines: list[str] = []
        if method.comment is not None:
            lines.append(self._format_comment(method.comment, prefix))

        params = "self" + (f", {method.arguments}" if method.arguments else "")
        returns = f" -> {method.returns}" if method.returns else ""
        lines.append(f"{prefix}def {method.name}({params}){returns}:")
        lines.append(indent(method.body or "pass", prefix * 2))
        return "\n".join(lines)

    @staticmethod
    def _format_comment(text: str, margin: str) -> str:
        """Render text as ``#`` comment lines at ``margin``.

        Line breaks are the only way out of a ``#`` comment, so each one is
        continued with a fresh comment prefix. NUL is not allowed in source
        at all and is written as its escape.
        """
        text = text.replace("\x00", "\\x00")
        prefix = f"{margin}# "
        return prefix + _LINE_BREAK.sub("\n" + prefix, text)


def _join_statements(*chunks: str) -> str:
    """Join statement chunks, each dedented to column 0, skipping empty ones."""
    return "\n".join(
        chunk for chunk in (dedent(c).strip() for c in chunks) if chunk
    )
