"""Per-render state for generated units.

Generated code writes output through ``rt.emit()``, a plain module function.
The buffer it appends to lives in a ContextVar-held RenderContext, so
template instances and user scope dicts never carry render state.

Thread Safety:
    ContextVars are thread-local by design; every thread or async task
    renders into its own buffer.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field


@dataclass
class RenderContext:
    """Output buffer plus diagnostics for one render call.

    Attributes:
        template_name: Rendering unit, for error messages
        buffer: Emitted chunks, joined when the render finishes
        block_stack: Names of blocks currently executing, outermost first

    """

    template_name: str | None = None
    buffer: list[str] = field(default_factory=list)
    block_stack: list[str] = field(default_factory=list)

    def getvalue(self) -> str:
        return "".join(self.buffer)


_render_context: ContextVar[RenderContext | None] = ContextVar(
    "kiln_render_context",
    default=None,
)


def get_render_context() -> RenderContext | None:
    """Get current render context (None if not in render)."""
    return _render_context.get()


def get_render_context_required() -> RenderContext:
    """Get current render context, raise if not in render.

    Raises:
        RuntimeError: If not in a render context
    """
    ctx = _render_context.get()
    if ctx is None:
        raise RuntimeError("Not in a render context")
    return ctx


@contextmanager
def render_context(template_name: str | None = None) -> Iterator[RenderContext]:
    """Make a fresh RenderContext current for the duration of the block.

    Nested uses capture output separately and restore the outer buffer on
    exit.

    Example:
        with render_context("Template_page") as ctx:
            emit("Hello")
        ctx.getvalue()  # 'Hello'
    """
    ctx = RenderContext(template_name=template_name)
    token: Token[RenderContext | None] = _render_context.set(ctx)
    try:
        yield ctx
    finally:
        _render_context.reset(token)


def emit(text: str) -> None:
    """Append output to the current render buffer."""
    get_render_context_required().buffer.append(text)
