"""Document assembler.

Turns the segmenter's raw blocks into typed blocks, running the inline
formatter over every text field except code lines, and attaches the
presentation hints of each block.

Paragraph lines are joined with one space before formatting, so a
soft-wrapped paragraph becomes one logical line. Surrounding spaces are
kept and collapsed by the whitespace pass. List and quote items are
formatted one by one.

Thread Safety:
    An Assembler reads a frozen ParseConfig and keeps no state between
    blocks. Create one per parse or share one per thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from tinta.config import ParseConfig, get_parse_config
from tinta.document import Document
from tinta.hints import block_hints
from tinta.lexer import RawBlock, SegmentState
from tinta.nodes import (
    Block,
    CheckedItem,
    CheckedList,
    Code,
    Headline,
    OrderedList,
    Paragraph,
    Quote,
    QuoteLine,
    Runs,
    UnorderedList,
)
from tinta.parsing.inline import InlineFormatter
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


class Assembler:
    """Builds a Document from raw blocks.

    Usage:
        >>> Assembler().assemble(segment("# Title\\n\\nbody"))
        Document(blocks=(Headline(level=1, ...), Paragraph(...)), ...)

    """

    __slots__ = ("_config",)

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config = config if config is not None else get_parse_config()

    def assemble(self, raw_blocks: Iterable[RawBlock]) -> Document:
        blocks = tuple(self.build_block(raw) for raw in raw_blocks)
        hints = tuple(block_hints(block) for block in blocks)
        logger.debug("Assembled %d blocks", len(blocks))
        return Document(blocks=blocks, hints=hints, styles=self._config.styles)

    def build_block(self, raw: RawBlock) -> Block:
        """Format one raw block into its typed variant."""
        lines = raw.lines
        match raw.kind:
            case SegmentState.HEADLINE:
                return Headline(level=raw.level, runs=self._format(lines[0]))
            case SegmentState.PARAGRAPH:
                return Paragraph(self._format(" ".join(lines)))
            case SegmentState.CODE:
                return Code(lines=lines, language=raw.language)
            case SegmentState.UNORDERED_LIST:
                return UnorderedList(tuple(self._format(line) for line in lines))
            case SegmentState.ORDERED_LIST:
                return OrderedList(tuple(self._format(line) for line in lines))
            case SegmentState.CHECKED_LIST:
                return CheckedList(
                    tuple(
                        CheckedItem(checked=bool(mark), runs=self._format(line))
                        for mark, line in zip(raw.marks, lines, strict=True)
                    )
                )
            case SegmentState.QUOTE:
                return Quote(
                    tuple(
                        QuoteLine(level=mark, runs=self._format(line))
                        for mark, line in zip(raw.marks, lines, strict=True)
                    )
                )
        raise AssertionError(f"no block for segment state {raw.kind.name}")

    def _format(self, text: str) -> Runs:
        return InlineFormatter(self._config).format(text)


def assemble(raw_blocks: Iterable[RawBlock], config: ParseConfig | None = None) -> Document:
    """Assemble raw blocks with the active (or given) configuration."""
    return Assembler(config).assemble(raw_blocks)


__all__ = ["Assembler", "assemble"]
