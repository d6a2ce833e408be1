"""Styled runs and the attributed working buffer.

A ``Run`` is a maximal span of text sharing one ``Style``. Block content in
a Document is a tuple of runs that covers the block's text exactly once,
left to right, with no empty runs.

``AttributedText`` is the mutable buffer each inline pass works on. Passes
search its plain ``text`` with a compiled pattern and splice styled
replacements back in, so attributes applied by earlier passes survive
later ones.

Thread Safety:
    Style and Run are frozen. AttributedText is local to one block's
    formatting and never escapes the inline pipeline.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinta.images import ImageRef


@dataclass(frozen=True, slots=True)
class Style:
    """Formatting attributes of a run.

    Attributes:
        bold: ``**x**`` / ``__x__``
        italic: ``*x*`` / ``_x_``
        monospace: code spans and code blocks
        strikethrough: ``~~x~~``
        link: Link target, if the run is (part of) a link
        image: Image placeholder handle, if the run is an image

    """

    bold: bool = False
    italic: bool = False
    monospace: bool = False
    strikethrough: bool = False
    link: str | None = None
    image: ImageRef | None = None

    def merged(self, **changes: object) -> Style:
        """Return a copy with the given attributes changed."""
        if not changes:
            return self
        return replace(self, **changes)  # type: ignore[arg-type]


PLAIN = Style()


@dataclass(frozen=True, slots=True)
class Run:
    """Text plus the style that applies to all of it."""

    text: str
    style: Style = PLAIN

    def __len__(self) -> int:
        return len(self.text)


def coalesce(runs: Iterable[Run]) -> tuple[Run, ...]:
    """Drop empty runs and merge neighbours with equal styles."""
    out: list[Run] = []
    for run in runs:
        if not run.text:
            continue
        if out and out[-1].style == run.style:
            out[-1] = Run(out[-1].text + run.text, run.style)
        else:
            out.append(run)
    return tuple(out)


def runs_text(runs: Iterable[Run]) -> str:
    """Concatenate run text."""
    return "".join(run.text for run in runs)


class AttributedText:
    """Mutable run buffer with plain-text search.

    Usage:
        >>> buf = AttributedText("a **b** c")
        >>> m = buf.search(re.compile(r"\\*\\*(.+?)\\*\\*"))
        >>> buf.replace(m.start(), m.end(), [Run("b", Style(bold=True))])
        >>> buf.text
        'a b c'

    """

    __slots__ = ("_runs", "_text")

    def __init__(self, text: str = "", style: Style = PLAIN) -> None:
        self._runs: list[Run] = [Run(text, style)] if text else []
        self._text: str | None = text

    @classmethod
    def from_runs(cls, runs: Iterable[Run]) -> AttributedText:
        buf = cls()
        buf._runs = [run for run in runs if run.text]
        buf._text = None
        return buf

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = runs_text(self._runs)
        return self._text

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)

    def search(self, pattern: re.Pattern[str], pos: int = 0) -> re.Match[str] | None:
        """Search the plain text from ``pos``. Lookbehinds may see before ``pos``."""
        return pattern.search(self.text, pos)

    def style_at(self, index: int) -> Style:
        """Style of the character at ``index`` (PLAIN for an empty buffer)."""
        offset = 0
        for run in self._runs:
            if index < offset + len(run.text):
                return run.style
            offset += len(run.text)
        return self._runs[-1].style if self._runs else PLAIN

    def slice(self, start: int, end: int) -> list[Run]:
        """Runs covering ``text[start:end]``, split at the boundaries."""
        out: list[Run] = []
        offset = 0
        for run in self._runs:
            run_end = offset + len(run.text)
            if run_end > start and offset < end:
                lo = max(start, offset) - offset
                hi = min(end, run_end) - offset
                out.append(Run(run.text[lo:hi], run.style))
            if run_end >= end:
                break
            offset = run_end
        return out

    def replace(self, start: int, end: int, runs: Iterable[Run]) -> None:
        """Splice ``runs`` in place of ``text[start:end]``."""
        assert 0 <= start <= end <= len(self), f"bad range {start}..{end}"
        head = self.slice(0, start)
        tail = self.slice(end, len(self))
        self._runs = [*head, *(r for r in runs if r.text), *tail]
        self._text = None

    def apply(self, start: int, end: int, **changes: object) -> None:
        """Change style attributes over ``text[start:end]``."""
        if start >= end:
            return
        middle = [Run(r.text, r.style.merged(**changes)) for r in self.slice(start, end)]
        self.replace(start, end, middle)

    def any_style(self, start: int, end: int, predicate: Callable[[Style], bool]) -> bool:
        """True if any run overlapping ``text[start:end]`` satisfies ``predicate``."""
        return any(predicate(run.style) for run in self.slice(start, end))

    def map_text(self, fn: Callable[[str], str]) -> None:
        """Rewrite each run's text independently, keeping its style."""
        self._runs = [Run(fn(run.text), run.style) for run in self._runs]
        self._runs = [run for run in self._runs if run.text]
        self._text = None

    def to_runs(self) -> tuple[Run, ...]:
        return coalesce(self._runs)

    def __repr__(self) -> str:
        return f"AttributedText({self._runs!r})"


__all__ = [
    "PLAIN",
    "AttributedText",
    "Run",
    "Style",
    "coalesce",
    "runs_text",
]
