"""Loading generated unit source into a template class."""

from __future__ import annotations

from typing import Any

from kiln.exceptions import TemplateRuntimeError
from kiln.runtime.core import Template


def load_unit(source: str, class_name: str, filename: str = "<unit>") -> type[Template]:
    """Execute generated unit source and return its template class.

    The source runs in a fresh namespace; nothing is cached and no module
    is registered in ``sys.modules``.

    Args:
        source: Output of ``TemplateGenerator.generate()``
        class_name: Class name the unit was generated with
        filename: Name used in tracebacks

    Raises:
        SyntaxError: If the source does not compile
        TemplateRuntimeError: If the source defines no such Template subclass
    """
    code = compile(source, filename, "exec")
    namespace: dict[str, Any] = {"__name__": f"kiln.units.{class_name}"}
    exec(code, namespace)  # noqa: S102

    unit = namespace.get(class_name)
    if not isinstance(unit, type) or not issubclass(unit, Template):
        raise TemplateRuntimeError(
            f"Unit source does not define template class '{class_name}'",
            template_name=filename,
            suggestion="Load with the class name passed to generate()",
        )
    return unit
