"""Typed block nodes for Tinta.

All blocks are frozen dataclasses with slots, so a Document can be shared
across threads and matched structurally:

    match block:
        case Headline(level=1, runs=runs): ...
        case CheckedList(items=items): ...

Block Hierarchy:
Block
├── Headline       (level 1-4, runs)
├── Paragraph      (runs)
├── Code           (raw lines, never inline-formatted)
├── UnorderedList  (items: runs per item)
├── OrderedList    (items: runs per item, numbered from 1)
├── CheckedList    (items: CheckedItem)
└── Quote          (items: QuoteLine)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.runs import Run, runs_text

Runs = tuple[Run, ...]


@dataclass(frozen=True, slots=True)
class Headline:
    """Single-line heading.

    Markdown: ``## Title ##``
    """

    level: int
    runs: Runs

    @property
    def text(self) -> str:
        return runs_text(self.runs)


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Soft-wrapped lines joined into one formatted run list."""

    runs: Runs

    @property
    def text(self) -> str:
        return runs_text(self.runs)


@dataclass(frozen=True, slots=True)
class Code:
    """Fenced code block.

    Markdown: ```` ```python ```` ... ```` ``` ````

    ``lines`` are carried verbatim. ``language`` is the info string after
    the opening fence and never affects formatting.
    """

    lines: tuple[str, ...]
    language: str = ""


@dataclass(frozen=True, slots=True)
class UnorderedList:
    """``*``, ``+`` or ``-`` items, markers removed."""

    items: tuple[Runs, ...]


@dataclass(frozen=True, slots=True)
class OrderedList:
    """``1.`` items, markers removed. Numbering is positional."""

    items: tuple[Runs, ...]


@dataclass(frozen=True, slots=True)
class CheckedItem:
    checked: bool
    runs: Runs


@dataclass(frozen=True, slots=True)
class CheckedList:
    """``- [ ]`` / ``- [x]`` task items."""

    items: tuple[CheckedItem, ...]


@dataclass(frozen=True, slots=True)
class QuoteLine:
    level: int
    runs: Runs

    def __post_init__(self) -> None:
        assert self.level >= 1, f"quote level {self.level}"


@dataclass(frozen=True, slots=True)
class Quote:
    """Consecutive ``>`` lines; each line is its own item."""

    items: tuple[QuoteLine, ...]


Block = Headline | Paragraph | Code | UnorderedList | OrderedList | CheckedList | Quote


def item_runs(block: Block) -> tuple[Runs, ...]:
    """Run lists of a list or quote block, one per item (empty otherwise)."""
    match block:
        case UnorderedList(items=items) | OrderedList(items=items):
            return items
        case CheckedList(items=checked):
            return tuple(item.runs for item in checked)
        case Quote(items=lines):
            return tuple(line.runs for line in lines)
        case _:
            return ()


__all__ = [
    "Block",
    "CheckedItem",
    "CheckedList",
    "Code",
    "Headline",
    "OrderedList",
    "Paragraph",
    "Quote",
    "QuoteLine",
    "Runs",
    "UnorderedList",
    "item_runs",
]
