"""Structured generator inputs: blocks, their tags and parameters."""

from __future__ import annotations

from kiln.nodes.structure import (
    LAYER_LOCAL,
    LAYER_SNIPPET,
    LAYER_TOP,
    Block,
    Layer,
    Param,
    Tag,
)

__all__ = [
    "LAYER_LOCAL",
    "LAYER_SNIPPET",
    "LAYER_TOP",
    "Block",
    "Layer",
    "Param",
    "Tag",
]
