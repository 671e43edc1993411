"""Kiln unit generator.

Assembles printed template code into Python template classes.

Modules:
- core: TemplateGenerator, the unit assembler
- blocks: block methods and inheritance metadata
- params: parameter binding statements
- registry: method/property/constant registry (extension seam)
- passes: emit merging and canonical reformatting
- config: GeneratorConfig

"""

from __future__ import annotations

from kiln.compiler.config import DEFAULT_CONFIG, GeneratorConfig
from kiln.compiler.core import TemplateGenerator
from kiln.compiler.params import build_params
from kiln.compiler.passes import optimize_emit, reformat_code
from kiln.compiler.registry import RESERVED_METHODS, MemberRegistry, Method

__all__ = [
    "DEFAULT_CONFIG",
    "RESERVED_METHODS",
    "GeneratorConfig",
    "MemberRegistry",
    "Method",
    "TemplateGenerator",
    "build_params",
    "optimize_emit",
    "reformat_code",
]
