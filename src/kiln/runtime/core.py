"""Kiln runtime Template: base class of every generated unit.

Generated units subclass ``Template`` and fill in ``main()`` and, when the
template has one-time setup code, ``prepare()``. Blocks are plain methods
located through the ``Blocks`` class constant:

    ```python
    Blocks = {
        0: {'content': 'block_content', 'script': ('block_script', 'js')},
    }
    ```

A bare method name means the block renders in the unit's own content type;
a pair carries the block's content type when it differs.

Example:
    >>> unit = load_unit(TemplateGenerator().generate(ctx, body, "Page"), "Page")
    >>> unit({"title": "Home"}).render()
    '<h1>Home</h1>'

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from kiln.context import DEFAULT_CONTENT_TYPE, ContentType
from kiln.exceptions import BlockNotFoundError, TemplateRuntimeError
from kiln.nodes import LAYER_TOP, Layer
from kiln.runtime.render_context import get_render_context, render_context


class Template:
    """Base class for generated template units.

    Attributes:
        params: Call-time parameters (positional ones keyed by index)
        var_stack: Scopes of embedded sub-templates, innermost last
        scope: Local scope returned by the last ``main()`` run
        name: Unit name for error messages

    """

    ContentType: str = DEFAULT_CONTENT_TYPE.value
    Blocks: Mapping[Layer, Mapping[str, Any]] = {}

    def __init__(self, params: Mapping[Any, Any] | None = None, *, name: str | None = None):
        self.params: dict[Any, Any] = dict(params or {})
        self.var_stack: list[dict[str, Any]] = []
        self.scope: dict[str, Any] | None = None
        self.name = name or type(self).__name__

    def main(self) -> dict[str, Any]:
        raise NotImplementedError(f"{type(self).__name__} does not define main()")

    def prepare(self) -> None:
        """One-time initialization; generated when the template has any."""

    def render(self) -> str:
        """Run ``prepare()`` and ``main()`` and return the emitted text."""
        with render_context(self.name) as render_ctx:
            self.prepare()
            self.scope = self.main()
            return render_ctx.getvalue()

    def get_content_type(self) -> ContentType:
        return ContentType(self.ContentType)

    def get_block_content_type(self, name: str, layer: Layer = LAYER_TOP) -> ContentType:
        entry = self._block_entry(name, layer)
        if isinstance(entry, str):
            return self.get_content_type()
        return ContentType(entry[1])

    def has_block(self, name: str, layer: Layer = LAYER_TOP) -> bool:
        return name in self.Blocks.get(layer, {})

    def call_block(
        self,
        name: str,
        args: Mapping[Any, Any] | None = None,
        layer: Layer = LAYER_TOP,
    ) -> None:
        """Run a block inside the current render, emitting into its buffer."""
        entry = self._block_entry(name, layer)
        method = getattr(self, entry if isinstance(entry, str) else entry[0])
        render_ctx = get_render_context()
        if render_ctx is None:
            method(dict(args or {}))
            return
        render_ctx.block_stack.append(name)
        try:
            method(dict(args or {}))
        finally:
            render_ctx.block_stack.pop()

    def render_block(self, name: str, *args: Any, layer: Layer = LAYER_TOP, **kwargs: Any) -> str:
        """Render one block on its own and return its text.

        Positional arguments are passed under their index, keyword
        arguments under their name, matching how generated blocks bind
        their declared parameters.

        Raises:
            BlockNotFoundError: If the block is not registered in ``layer``
        """
        block_args: dict[Any, Any] = dict(enumerate(args))
        block_args.update(kwargs)
        with render_context(self.name) as render_ctx:
            self.call_block(name, block_args, layer)
            return render_ctx.getvalue()

    @contextmanager
    def embedded(self, variables: Mapping[str, Any]) -> Iterator[None]:
        """Expose ``variables`` to embedded blocks for the duration of the block."""
        self.var_stack.append(dict(variables))
        try:
            yield
        finally:
            self.var_stack.pop()

    def embedded_scope(self) -> dict[str, Any]:
        """Variables of the innermost embedded sub-template.

        Raises:
            TemplateRuntimeError: If no ``embedded()`` scope is active
        """
        if not self.var_stack:
            raise TemplateRuntimeError(
                "Embedded block rendered outside an embedded scope",
                template_name=self.name,
                suggestion="Render it inside 'with template.embedded(variables):'",
            )
        return self.var_stack[-1]

    def _block_entry(self, name: str, layer: Layer) -> Any:
        layer_blocks = self.Blocks.get(layer, {})
        if name not in layer_blocks:
            raise BlockNotFoundError(
                name,
                layer,
                available=frozenset(layer_blocks),
                template_name=self.name,
            )
        return layer_blocks[name]
