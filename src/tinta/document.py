"""The parsed Document and its flat text projection.

A Document is an ordered tuple of blocks plus one BlockHints per block and
the style sheet in effect when it was parsed. Its plain-text projection
concatenates all run text in order:

    U+2029  between blocks
    U+2028  between list and quote items, and between code lines

Item prefixes ("● ", "1. ") live in the hints and never in the text.

Offsets are ``str`` indices (code points).

Thread Safety:
    Document is frozen. The projection is computed lazily on first use; the
    computation is deterministic, so concurrent first calls produce equal
    values and either may be kept.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tinta.hints import BlockHints
from tinta.images import ImageRef
from tinta.nodes import (
    Block,
    CheckedList,
    Code,
    Headline,
    OrderedList,
    Paragraph,
    Quote,
    UnorderedList,
    item_runs,
)
from tinta.parsing.charsets import LINE_SEPARATOR, PARAGRAPH_SEPARATOR
from tinta.runs import PLAIN, Style
from tinta.styles import StyleRole, StyleSheet

CODE_STYLE = Style(monospace=True)


@dataclass(frozen=True, slots=True)
class Span:
    """A run (or separator) placed in the document's plain text.

    ``item`` is the list/quote item the span belongs to; separators between
    items belong to the item they follow.
    """

    start: int
    end: int
    text: str
    style: Style
    block: int
    item: int | None = None


@dataclass(frozen=True, slots=True)
class Attributes:
    """Effective attributes at one offset.

    Attributes:
        style: Run formatting flags
        role: Base style role of the enclosing block
        block: Index of the enclosing block
        item: Index of the enclosing list/quote item, if any
        presentation: Attribute bag resolved from the document's style sheet

    """

    style: Style
    role: StyleRole
    block: int
    item: int | None = None
    presentation: Mapping[str, Any] = field(default_factory=dict, compare=False)


def _constant_key(span: Span) -> tuple[Style, int, int | None]:
    return span.style, span.block, span.item


@dataclass(frozen=True, slots=True)
class _Layout:
    text: str
    spans: tuple[Span, ...]
    starts: tuple[int, ...]


def _build_layout(blocks: tuple[Block, ...]) -> _Layout:
    pieces: list[str] = []
    spans: list[Span] = []
    offset = 0

    def emit(text: str, style: Style, block: int, item: int | None) -> None:
        nonlocal offset
        if not text:
            return
        spans.append(Span(offset, offset + len(text), text, style, block, item))
        pieces.append(text)
        offset += len(text)

    for index, block in enumerate(blocks):
        if index:
            emit(PARAGRAPH_SEPARATOR, PLAIN, index - 1, None)
        match block:
            case Headline(runs=runs) | Paragraph(runs=runs):
                for run in runs:
                    emit(run.text, run.style, index, None)
            case Code(lines=lines):
                for number, line in enumerate(lines):
                    if number:
                        emit(LINE_SEPARATOR, CODE_STYLE, index, None)
                    emit(line, CODE_STYLE, index, None)
            case UnorderedList() | OrderedList() | CheckedList() | Quote():
                for item, runs in enumerate(item_runs(block)):
                    if item:
                        emit(LINE_SEPARATOR, PLAIN, index, item - 1)
                    for run in runs:
                        emit(run.text, run.style, index, item)

    return _Layout(
        text="".join(pieces),
        spans=tuple(spans),
        starts=tuple(span.start for span in spans),
    )


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed document.

    Usage:
        >>> doc = parse("# Hi\\n\\nSee #12")
        >>> doc.plain_text()
        'Hi\\u2029See #12'
        >>> attrs, (start, end) = doc.attributes_at(7)
        >>> attrs.style.link, (start, end)
        ('issue/12', (7, 10))

    """

    blocks: tuple[Block, ...] = ()
    hints: tuple[BlockHints, ...] = ()
    styles: StyleSheet = field(default_factory=StyleSheet.default)
    _layout_cache: _Layout | None = field(default=None, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        assert len(self.blocks) == len(self.hints), "one BlockHints per block"

    @property
    def _layout(self) -> _Layout:
        if self._layout_cache is not None:
            return self._layout_cache
        layout = _build_layout(self.blocks)
        # Idempotent write to the cache field of a frozen instance
        object.__setattr__(self, "_layout_cache", layout)
        return layout

    def plain_text(self) -> str:
        """Concatenated run text with block and item separators."""
        return self._layout.text

    def spans(self) -> tuple[Span, ...]:
        """Every run and separator, in text order, with its offsets."""
        return self._layout.spans

    def attributes_at(self, offset: int) -> tuple[Attributes, tuple[int, int]]:
        """Effective attributes at ``offset`` and the range they hold over.

        The range is maximal: neighbouring spans with equal style in the same
        block and item are merged into it.

        Raises:
            IndexError: ``offset`` is outside ``0 <= offset < len(self)``.
        """
        layout = self._layout
        if not 0 <= offset < len(layout.text):
            raise IndexError(f"offset {offset} out of range for length {len(layout.text)}")

        spans = layout.spans
        index = bisect_right(layout.starts, offset) - 1
        span = spans[index]
        key = _constant_key(span)

        first = index
        while first > 0 and _constant_key(spans[first - 1]) == key:
            first -= 1
        last = index
        while last + 1 < len(spans) and _constant_key(spans[last + 1]) == key:
            last += 1

        role = self.hints[span.block].role
        attributes = Attributes(
            style=span.style,
            role=role,
            block=span.block,
            item=span.item,
            presentation=self.styles.resolve(role, span.style),
        )
        return attributes, (spans[first].start, spans[last].end)

    def images(self) -> tuple[ImageRef, ...]:
        """All image placeholders, in document order."""
        return tuple(span.style.image for span in self._layout.spans if span.style.image is not None)

    def __len__(self) -> int:
        return len(self._layout.text)


__all__ = ["CODE_STYLE", "Attributes", "Document", "Span"]
