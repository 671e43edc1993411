"""Member registry: the methods, properties and constants of one unit.

The registry is the generator's extension seam. Custom tag compilers call
``add_method``/``add_property``/``add_constant`` on the same generator the
core uses; every ``add_*`` overwrites an existing member of that name, so
the last write wins.

Two method names are reserved slots that exist from construction:
``main`` (the render body) and ``prepare`` (one-time initialization). An
unset slot holds None and is skipped at serialization.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from kiln.utils.lines import dedent

RESERVED_METHODS = ("main", "prepare")


@dataclass(frozen=True, slots=True)
class Method:
    """A generated method.

    Attributes:
        name: Method name, unique within the unit
        body: Dedented, trimmed statement text (may be empty)
        arguments: Parameter declarations after ``self`` (may be empty)
        returns: Return annotation (may be empty)
        comment: Diagnostic comment emitted above the definition

    """

    name: str
    body: str
    arguments: str = ""
    returns: str = ""
    comment: str | None = None


class MemberRegistry:
    """Accumulates unit members in registration order."""

    def __init__(self) -> None:
        self._methods: dict[str, Method | None] = dict.fromkeys(RESERVED_METHODS)
        self._properties: dict[str, Any] = {}
        self._constants: dict[str, Any] = {}

    def add_method(
        self,
        name: str,
        body: str,
        arguments: str = "",
        returns: str = "",
        comment: str | None = None,
    ) -> None:
        """Add (or replace) a method of the generated class."""
        body = dedent(body).strip()
        self._methods[name] = Method(name, body, arguments, returns, comment)

    def get_methods(self) -> Mapping[str, Method | None]:
        """All method slots, including unset reserved ones (None)."""
        return MappingProxyType(self._methods)

    def add_property(self, name: str, value: Any) -> None:
        """Add (or replace) a public attribute, set per instance with a fresh value."""
        self._properties[name] = value

    def get_properties(self) -> Mapping[str, Any]:
        return MappingProxyType(self._properties)

    def add_constant(self, name: str, value: Any) -> None:
        """Add (or replace) a constant class attribute."""
        self._constants[name] = value

    def get_constants(self) -> Mapping[str, Any]:
        return MappingProxyType(self._constants)
