"""Finishing passes over assembled unit source.

Both passes are plain text-to-text transforms run once, after assembly,
with no knowledge of template semantics:

1. ``optimize_emit``: merge adjacent literal ``emit`` calls
2. ``reformat_code``: canonical whitespace layout

Each pass is idempotent: running it on its own output changes nothing.

Both work line by line, so they assume the printer kept every string
literal on a single line (``repr()`` always does).
"""

from __future__ import annotations

import ast

EMIT = "rt.emit"


def optimize_emit(code: str, emit: str = EMIT) -> str:
    """Merge runs of adjacent literal emissions into a single call.

    Only lines that hold exactly one ``emit(<str literal>)`` call (an
    optional trailing ``;`` allowed) take part, and only when consecutive
    lines share the same indentation, i.e. the same suite:

        >>> print(optimize_emit("rt.emit('<p>')\\nrt.emit('hi')\\nrt.emit(x)"))
        rt.emit('<p>hi')
        rt.emit(x)

    Single emissions are left byte-for-byte unchanged.
    """
    result: list[str] = []
    run: list[str] = []
    run_values: list[str] = []
    run_indent = ""

    def flush() -> None:
        if len(run) == 1:
            result.append(run[0])
        elif run:
            result.append(f"{run_indent}{emit}({''.join(run_values)!r})")
        run.clear()
        run_values.clear()

    for line in code.split("\n"):
        value = _emitted_literal(line, emit)
        if value is None:
            flush()
            result.append(line)
            continue

        indent = line[: len(line) - len(line.lstrip())]
        if run and indent != run_indent:
            flush()
        run_indent = indent
        run.append(line)
        run_values.append(value)

    flush()
    return "\n".join(result)


def _emitted_literal(line: str, emit: str) -> str | None:
    """Return the literal a line emits, or None if it is anything else."""
    stripped = line.strip()
    if not stripped.startswith(f"{emit}("):
        return None
    try:
        module = ast.parse(stripped)
    except SyntaxError:
        # A call split over several lines; not a candidate
        return None

    if len(module.body) != 1 or not isinstance(module.body[0], ast.Expr):
        return None
    call = module.body[0].value
    if (
        not isinstance(call, ast.Call)
        or ast.unparse(call.func) != emit
        or len(call.args) != 1
        or call.keywords
    ):
        return None
    # Trailing comments would be lost by merging
    if call.end_lineno != 1 or call.end_col_offset != len(stripped.rstrip("; \t")):
        return None

    arg = call.args[0]
    if isinstance(arg, ast.Constant) and isinstance(arg.value, str):
        return arg.value
    return None


def reformat_code(code: str) -> str:
    """Normalize whitespace deterministically.

    - line endings become ``\\n``
    - tabs in leading indentation expand to four spaces
    - trailing whitespace is removed
    - blank-line runs shrink to two before unindented lines, one elsewhere
    - leading blank lines are dropped; the text ends with one newline
    """
    code = code.replace("\r\n", "\n").replace("\r", "\n")

    result: list[str] = []
    blanks = 0
    for raw in code.split("\n"):
        stripped = raw.lstrip(" \t")
        lead = raw[: len(raw) - len(stripped)]
        if "\t" in lead:
            lead = lead.expandtabs(4)
        line = (lead + stripped).rstrip()

        if not line:
            blanks += 1
            continue
        if result:
            limit = 1 if line.startswith(" ") else 2
            result.extend([""] * min(blanks, limit))
        blanks = 0
        result.append(line)

    if not result:
        return ""
    return "\n".join(result) + "\n"
