"""Parameter binding: declared parameters to scope assignments.

Generated code keeps template variables in a local dict named ``ctx``.
Each declared parameter is bound from an arguments container, trying the
positional index first, then the parameter name, then the printed default:

    ```python
    ctx['title'] = _kiln_args[0] if 0 in _kiln_args else _kiln_args['title'] if 'title' in _kiln_args else 'Untitled'
    ```

Callers may therefore pass either ordered or named arguments. Defaults are
evaluated only when both lookups miss. With no declarations at all, the
whole container is merged into the scope instead.
"""

from __future__ import annotations

import ast
from collections.abc import Sequence

from kiln.nodes import Param

SCOPE = "ctx"


def build_params(params: Sequence[Param], container: str, scope: str = SCOPE) -> str:
    """Build binding statements for ``params`` read from ``container``.

    Args:
        params: Declared parameters; their order defines positional indexes
        container: Expression naming the arguments dict
        scope: Name of the scope dict receiving the bindings

    Returns:
        Newline-separated statements, one per parameter in input order, or a
        single bulk ``update`` statement when ``params`` is empty.
    """
    if not params:
        return f"{scope}.update({container})"

    lines = []
    for index, param in enumerate(params):
        key = repr(param.var)
        lines.append(
            f"{scope}[{key}] = {container}[{index}] if {index} in {container}"
            f" else {container}[{key}] if {key} in {container}"
            f" else {_default(param.expr)}"
        )
    return "\n".join(lines)


def _default(expr: str) -> str:
    """Parenthesize defaults that would change meaning in the else branch.

    A bare tuple (``1, 2``) would swallow the whole conditional expression.
    """
    expr = expr.strip()
    try:
        node = ast.parse(expr, mode="eval").body
    except SyntaxError:
        # Left for the unit's own compile step to report with its location
        return expr
    if isinstance(node, (ast.Tuple, ast.NamedExpr)):
        return f"({expr})"
    return expr
