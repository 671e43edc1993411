"""Kiln: final assembly stage for compiled Python templates.

Kiln takes a template body that an upstream printer has already turned into
Python statement text, together with the template's parameters and blocks,
and assembles one self-contained module defining a template class.

Quickstart:
    >>> from kiln import PrintContext, TemplateGenerator, load_unit
    >>> source = TemplateGenerator().generate(
    ...     PrintContext(), "rt.emit('Hello, ')\\nrt.emit(str(ctx['name']))", "Hello"
    ... )
    >>> load_unit(source, "Hello")({"name": "World"}).render()
    'Hello, World'

Architecture:
Template Source → Lexer → Parser → Printer → **Kiln** → module source → exec()

Only the last stage lives here. Kiln never sees template syntax: it
consumes printed statements and structured block/parameter metadata.

Generation stages:
1. **Parameter binding**: declared parameters to ``ctx`` assignments
2. **Blocks**: one method per block plus the ``Blocks`` inheritance table
3. **Registry**: methods, properties and constants, open to extensions
4. **Assembly**: header, class statement, ordered members
5. **Finishing**: merge literal ``emit`` calls, canonical reformatting

Determinism:
Identical inputs always produce byte-identical source, so compiled units
can be cached by content.

"""

from kiln.compiler import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    MemberRegistry,
    Method,
    TemplateGenerator,
    build_params,
    optimize_emit,
    reformat_code,
)
from kiln.context import ContentType, PrintContext
from kiln.exceptions import (
    BlockNotFoundError,
    DuplicateBlockError,
    ErrorCode,
    GeneratorError,
    InvalidUnitNameError,
    TemplateError,
    TemplateRuntimeError,
)
from kiln.nodes import LAYER_LOCAL, LAYER_SNIPPET, LAYER_TOP, Block, Param, Tag
from kiln.runtime import Template, emit, load_unit
from kiln.utils.literals import dump

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "LAYER_LOCAL",
    "LAYER_SNIPPET",
    "LAYER_TOP",
    "Block",
    "BlockNotFoundError",
    "ContentType",
    "DuplicateBlockError",
    "ErrorCode",
    "GeneratorConfig",
    "GeneratorError",
    "InvalidUnitNameError",
    "MemberRegistry",
    "Method",
    "Param",
    "PrintContext",
    "Tag",
    "Template",
    "TemplateError",
    "TemplateGenerator",
    "TemplateRuntimeError",
    "__version__",
    "build_params",
    "dump",
    "emit",
    "load_unit",
    "optimize_emit",
    "reformat_code",
]
