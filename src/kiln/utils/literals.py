"""Deterministic Python literal serialization for generated class members.

``dump()`` turns constant and property values into source text that
evaluates back to an equal value. Output depends only on the value (dicts
keep insertion order), so identical inputs always produce identical units.

Non-empty dicts and lists are written one entry per line with trailing
commas; tuples stay on one line:

    >>> print(dump({0: {"content": "block_content", "title": ("block_title", "js")}}))
    {
        0: {
            'content': 'block_content',
            'title': ('block_title', 'js'),
        },
    }

"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

INDENT = "    "


def dump(value: Any, indent: str = INDENT) -> str:
    """Serialize a value as Python literal source.

    Args:
        value: None, bool, int, finite float, str, Enum (dumped by value),
            or tuple/list/dict built from these
        indent: Indentation added per nesting level

    Returns:
        Literal source text. Nested lines are indented relative to column 0;
        callers indent the whole text to its final position.

    Raises:
        TypeError: If the value (or a nested one) has no literal form
        ValueError: If a float is NaN or infinite
    """
    return _dump(value, indent, 0)


def _dump(value: Any, indent: str, level: int) -> str:
    if value is None or isinstance(value, (bool, int, str)):
        if isinstance(value, Enum):
            return _dump(value.value, indent, level)
        return repr(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot dump non-finite float {value!r}")
        return repr(value)

    if isinstance(value, Enum):
        return _dump(value.value, indent, level)

    if isinstance(value, tuple):
        items = [_dump(item, indent, level) for item in value]
        if len(items) == 1:
            return f"({items[0]},)"
        return f"({', '.join(items)})"

    if isinstance(value, list):
        if not value:
            return "[]"
        inner = indent * (level + 1)
        lines = [f"{inner}{_dump(item, indent, level + 1)}," for item in value]
        return "[\n" + "\n".join(lines) + f"\n{indent * level}]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        inner = indent * (level + 1)
        lines = [
            f"{inner}{_dump(key, indent, level + 1)}: {_dump(item, indent, level + 1)},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(lines) + f"\n{indent * level}}}"

    raise TypeError(f"Cannot dump value of type {type(value).__name__} as a literal")
