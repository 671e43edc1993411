"""Print context shared between the upstream printer and the generator.

The printer fills a PrintContext while turning the template AST into Python
statement text; the generator reads it once, in ``TemplateGenerator.generate``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kiln.nodes import Block, Param


class ContentType(Enum):
    """Output content categories, each with its own escaping rules.

    HTML is the default; units rendering anything else record their
    category in a ``ContentType`` constant.
    """

    TEXT = "text"
    HTML = "html"
    XML = "xml"
    JS = "js"
    CSS = "css"
    ICAL = "ical"


DEFAULT_CONTENT_TYPE = ContentType.HTML


@dataclass
class PrintContext:
    """State collected while printing one template.

    Attributes:
        params_extraction: Root parameter declarations, in positional order
        initialization: Statement text run once in ``prepare()``
        content_type: Content type active for the root body
        blocks: Blocks in definition order

    """

    params_extraction: list[Param] = field(default_factory=list)
    initialization: str = ""
    content_type: ContentType = DEFAULT_CONTENT_TYPE
    blocks: list[Block] = field(default_factory=list)

    def get_content_type(self) -> ContentType:
        return self.content_type

    def add_block(self, block: Block) -> None:
        """Record a printed block; order is preserved in the generated unit."""
        self.blocks.append(block)
