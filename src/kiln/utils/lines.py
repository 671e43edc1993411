"""Line-based indentation helpers for printed code.

``textwrap`` splits on every ``str.splitlines()`` boundary, including form
feeds, ``\\x1c``-``\\x1e``, ``\\x85`` and U+2028/U+2029. Python source only
ends lines at ``\\n`` (``\\r`` is normalized earlier), so such characters may
sit inside a single-line string literal. These helpers split on ``\\n`` only
and leave literal contents alone.
"""

from __future__ import annotations


def dedent(text: str) -> str:
    """Remove the common leading spaces/tabs of all non-blank lines.

    Lines holding only spaces and tabs become empty and do not count
    towards the margin.
    """
    lines = text.split("\n")
    margin: str | None = None
    for line in lines:
        stripped = line.lstrip(" \t")
        if not stripped:
            continue
        lead = line[: len(line) - len(stripped)]
        if margin is None:
            margin = lead
            continue
        size = 0
        for a, b in zip(margin, lead):
            if a != b:
                break
            size += 1
        margin = margin[:size]

    cut = len(margin or "")
    return "\n".join(line[cut:] if line.lstrip(" \t") else "" for line in lines)


def indent(text: str, prefix: str) -> str:
    """Prefix every non-blank line of ``text`` with ``prefix``."""
    return "\n".join(prefix + line if line.strip(" \t") else line for line in text.split("\n"))
