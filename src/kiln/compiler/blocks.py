"""Block compilation for the unit generator.

Each block becomes one method of the generated class:

    ```python
    # {block content} on line 4
    def block_content(self, _kiln_args: dict) -> None:
        ctx = dict(self.params)
        ctx['title'] = _kiln_args[0] if 0 in _kiln_args else ...
        del _kiln_args

        rt.emit('<h1>')
        ...
    ```

Static blocks are also recorded in the ``Blocks`` constant, keyed by layer
then name, which the runtime uses to resolve inheritance overrides.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from kiln.compiler.params import SCOPE, build_params
from kiln.exceptions import DuplicateBlockError
from kiln.utils.lines import dedent

if TYPE_CHECKING:
    from kiln.context import PrintContext
    from kiln.nodes import Block

logger = logging.getLogger(__name__)

# Reserved name of the block arguments dict; never a template variable,
# since template variables live inside the scope dict.
ARGS = "_kiln_args"


class BlockCompilationMixin:
    """Mixin compiling blocks into methods and inheritance metadata.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From MemberRegistry
        def add_method(
            self,
            name: str,
            body: str,
            arguments: str = "",
            returns: str = "",
            comment: str | None = None,
        ) -> None: ...

        def add_constant(self, name: str, value: Any) -> None: ...

    def _generate_blocks(self, blocks: Sequence[Block], context: PrintContext) -> None:
        """Compile every block, then register ``Blocks`` if any is static."""
        root_type = context.get_content_type()
        meta: dict[Any, dict[str, Any]] = {}

        for block in blocks:
            if not block.dynamic:
                layer_meta = meta.setdefault(block.layer, {})
                if block.name in layer_meta:
                    raise DuplicateBlockError(block.name, block.layer, block.describe())
                layer_meta[block.name] = (
                    block.method
                    if block.context == root_type
                    else (block.method, block.context)
                )

            self.add_method(
                block.method,
                self._block_body(block),
                f"{ARGS}: dict",
                "None",
                block.describe(),
            )
            logger.debug(
                f"Compiled block {block.name!r} (layer {block.layer!r}) into {block.method}()"
            )

        if meta:
            self.add_constant("Blocks", meta)

    def _block_body(self, block: Block) -> str:
        """Prefix block content with scope setup when it uses the scope.

        The check is a plain substring scan for the scope name. It may set up
        a scope the content never reads (e.g. the name inside a string
        literal), but never skips one that is needed.
        """
        content = dedent(block.content).strip()
        if SCOPE not in content:
            return content

        if block.dynamic:
            scope = f"{SCOPE} = {{}}"
        elif block.is_embedded:
            scope = f"{SCOPE} = dict(self.embedded_scope())"
        else:
            scope = f"{SCOPE} = dict(self.params)"

        return "\n".join(
            [
                scope,
                build_params(block.parameters, ARGS),
                f"del {ARGS}",
                "",
                content,
            ]
        )
