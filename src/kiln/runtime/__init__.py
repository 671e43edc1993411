"""Kiln runtime: what generated units import as ``rt``.

Every unit starts with ``from kiln import runtime as rt``, subclasses
``rt.Template`` and writes output through ``rt.emit()``.

"""

from kiln.context import ContentType
from kiln.nodes import LAYER_LOCAL, LAYER_SNIPPET, LAYER_TOP
from kiln.runtime.core import Template
from kiln.runtime.loader import load_unit
from kiln.runtime.render_context import (
    RenderContext,
    emit,
    get_render_context,
    get_render_context_required,
    render_context,
)

__all__ = [
    "LAYER_LOCAL",
    "LAYER_SNIPPET",
    "LAYER_TOP",
    "ContentType",
    "RenderContext",
    "Template",
    "emit",
    "get_render_context",
    "get_render_context_required",
    "load_unit",
    "render_context",
]
