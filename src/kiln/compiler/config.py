"""Generator configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings that shape generated unit text.

    Attributes:
        runtime_module: Module imported by every unit
        runtime_alias: Name the runtime module is bound to inside the unit
        base_class: Runtime class every unit extends
        indent: One level of indentation
        optimize_emit: Merge adjacent literal ``emit`` calls
        reformat: Run the canonical reformatting pass

    Example:
            >>> config = GeneratorConfig(reformat=False)
            >>> generator = TemplateGenerator(config=config)

    """

    runtime_module: str = "kiln.runtime"
    runtime_alias: str = "rt"
    base_class: str = "Template"
    indent: str = "    "
    optimize_emit: bool = True
    reformat: bool = True

    @property
    def import_line(self) -> str:
        package, _, module = self.runtime_module.rpartition(".")
        if not package:
            return f"import {module} as {self.runtime_alias}"
        return f"from {package} import {module} as {self.runtime_alias}"

    @property
    def base_reference(self) -> str:
        return f"{self.runtime_alias}.{self.base_class}"

    @property
    def emit_call(self) -> str:
        """Callable used by printed content for literal output."""
        return f"{self.runtime_alias}.emit"


DEFAULT_CONFIG = GeneratorConfig()
