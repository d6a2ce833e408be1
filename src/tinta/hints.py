"""Block-level presentation hints.

Hints are recommendations computed from a block's variant and position
only. A rendering surface may apply them as-is, reinterpret them or ignore
them; the core never reads them back.

Spacing values (points):
    Paragraph       8 after, 2 between lines
    Code            8 after, 0 between lines
    Headline        8 after, 0 between lines
    Lists           6 after, 4 between lines, 8 indent
    Quote           6 after, 2 between lines, 8 indent per level

Thread Safety:
    All hint values are frozen.

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.nodes import (
    Block,
    CheckedList,
    Code,
    Headline,
    OrderedList,
    Paragraph,
    Quote,
    UnorderedList,
)
from tinta.styles import StyleRole, headline_role

UNORDERED_PREFIX = "● "
CHECKED_PREFIX = "☑ "
UNCHECKED_PREFIX = "☐ "
QUOTE_PREFIX = "│ "

_LIST_INDENT = 8


@dataclass(frozen=True, slots=True)
class ItemHints:
    """Hints for one list or quote item.

    Attributes:
        prefix: Text a surface shows before the item (never in plain text)
        marker: Canonical source marker the segmenter removed
        first: Item is the first of its block
        last: Item is the last of its block
        level: Nesting level (quotes); 1 for list items
        indent: Suggested head indent

    """

    prefix: str
    marker: str
    first: bool
    last: bool
    level: int = 1
    indent: int = 0


@dataclass(frozen=True, slots=True)
class BlockHints:
    """Hints for one block."""

    role: StyleRole
    paragraph_spacing: int
    line_spacing: int
    head_indent: int = 0
    item_hints: tuple[ItemHints, ...] = ()


def _items(
    prefixes: list[tuple[str, str]],
    *,
    indent: int,
    levels: list[int] | None = None,
) -> tuple[ItemHints, ...]:
    count = len(prefixes)
    if levels is None:
        levels = [1] * count
    return tuple(
        ItemHints(
            prefix=prefix,
            marker=marker,
            first=index == 0,
            last=index == count - 1,
            level=level,
            indent=indent * level,
        )
        for index, ((prefix, marker), level) in enumerate(zip(prefixes, levels, strict=True))
    )


def block_hints(block: Block) -> BlockHints:
    """Compute the hints for ``block``."""
    match block:
        case Headline(level=level):
            return BlockHints(headline_role(level), paragraph_spacing=8, line_spacing=0)
        case Paragraph():
            return BlockHints(StyleRole.NORMAL, paragraph_spacing=8, line_spacing=2)
        case Code():
            return BlockHints(StyleRole.MONOSPACE, paragraph_spacing=8, line_spacing=0)
        case UnorderedList(items=items):
            prefixes = [(UNORDERED_PREFIX, "- ")] * len(items)
            return BlockHints(
                StyleRole.NORMAL,
                paragraph_spacing=6,
                line_spacing=4,
                head_indent=_LIST_INDENT,
                item_hints=_items(prefixes, indent=_LIST_INDENT),
            )
        case OrderedList(items=items):
            prefixes = [(f"{n}. ", f"{n}. ") for n in range(1, len(items) + 1)]
            return BlockHints(
                StyleRole.NORMAL,
                paragraph_spacing=6,
                line_spacing=4,
                head_indent=_LIST_INDENT,
                item_hints=_items(prefixes, indent=_LIST_INDENT),
            )
        case CheckedList(items=checked):
            prefixes = [
                (CHECKED_PREFIX, "- [x] ") if item.checked else (UNCHECKED_PREFIX, "- [ ] ")
                for item in checked
            ]
            return BlockHints(
                StyleRole.NORMAL,
                paragraph_spacing=6,
                line_spacing=4,
                head_indent=_LIST_INDENT,
                item_hints=_items(prefixes, indent=_LIST_INDENT),
            )
        case Quote(items=lines):
            levels = [line.level for line in lines]
            prefixes = [(QUOTE_PREFIX * level, ">" * level + " ") for level in levels]
            return BlockHints(
                StyleRole.QUOTE,
                paragraph_spacing=6,
                line_spacing=2,
                head_indent=_LIST_INDENT,
                item_hints=_items(prefixes, indent=_LIST_INDENT, levels=levels),
            )
    raise AssertionError(f"unknown block {block!r}")


__all__ = [
    "CHECKED_PREFIX",
    "QUOTE_PREFIX",
    "UNCHECKED_PREFIX",
    "UNORDERED_PREFIX",
    "BlockHints",
    "ItemHints",
    "block_hints",
]
