"""Editable text host over a parsed Document.

TextStorage is the thin mutation surface an editing view needs: literal
inserts, deletes and attribute changes over the Document's flat run
sequence. It never re-parses; edited text is taken literally.

Inserted text inherits the style of the character before the insertion
point, or of the character after it when inserting at offset 0.

Usage:
    >>> storage = TextStorage(parse("Hello **world**"))
    >>> unsubscribe = storage.subscribe(print)
    >>> _ = storage.insert(11, "!")
    EditEvent(kind=<EditKind.INSERT: 'insert'>, start=11, end=11, delta=1)
    >>> storage.attributes_at(11)[0].bold
    True

Thread Safety:
    Edits are serialized by a lock. Subscribers are called after the lock
    is released, on the editing thread.

"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tinta.document import Document
from tinta.errors import EditError
from tinta.runs import PLAIN, AttributedText, Run, Style
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


class EditKind(Enum):
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"
    STYLE = "style"


@dataclass(frozen=True, slots=True)
class EditEvent:
    """One completed edit.

    Attributes:
        kind: What happened
        start: Start offset of the edited range, before the edit
        end: End offset of the edited range, before the edit
        delta: Change in text length

    """

    kind: EditKind
    start: int
    end: int
    delta: int


EditCallback = Callable[[EditEvent], None]


class TextStorage:
    """Mutable run sequence seeded from a Document."""

    __slots__ = ("_buffer", "_lock", "_subscribers")

    def __init__(self, document: Document | None = None) -> None:
        spans = document.spans() if document is not None else ()
        self._buffer = AttributedText.from_runs(Run(span.text, span.style) for span in spans)
        self._subscribers: list[EditCallback] = []
        self._lock = threading.Lock()

    @property
    def text(self) -> str:
        return self._buffer.text

    def __len__(self) -> int:
        return len(self._buffer)

    def runs(self) -> tuple[Run, ...]:
        return self._buffer.to_runs()

    def attributes_at(self, offset: int) -> tuple[Style, tuple[int, int]]:
        """Style at ``offset`` and the maximal range sharing it.

        Raises:
            IndexError: ``offset`` is outside the text.
        """
        with self._lock:
            if not 0 <= offset < len(self._buffer):
                raise IndexError(f"offset {offset} out of range for length {len(self._buffer)}")
            start = 0
            for run in self._buffer.to_runs():
                end = start + len(run)
                if offset < end:
                    return run.style, (start, end)
                start = end
        raise AssertionError("offset inside text but not inside any run")

    def replace(self, start: int, end: int, text: str) -> EditEvent:
        """Replace ``text[start:end]`` with ``text``, inheriting the nearby style."""
        return self._edit(EditKind.REPLACE, start, end, text)

    def insert(self, offset: int, text: str) -> EditEvent:
        return self._edit(EditKind.INSERT, offset, offset, text)

    def delete(self, start: int, end: int) -> EditEvent:
        return self._edit(EditKind.DELETE, start, end, "")

    def set_style(self, start: int, end: int, **changes: object) -> EditEvent:
        """Change style attributes over ``text[start:end]``."""
        with self._lock:
            self._check(start, end)
            self._buffer.apply(start, end, **changes)
        return self._publish(EditEvent(EditKind.STYLE, start, end, 0))

    def subscribe(self, callback: EditCallback) -> Callable[[], None]:
        """Call ``callback`` after every edit.

        Returns:
            A function that removes the subscription.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _edit(self, kind: EditKind, start: int, end: int, text: str) -> EditEvent:
        with self._lock:
            self._check(start, end)
            style = self._inherited_style(start)
            self._buffer.replace(start, end, [Run(text, style)])
        return self._publish(EditEvent(kind, start, end, len(text) - (end - start)))

    def _inherited_style(self, offset: int) -> Style:
        if not len(self._buffer):
            return PLAIN
        return self._buffer.style_at(offset - 1 if offset > 0 else 0)

    def _check(self, start: int, end: int) -> None:
        length = len(self._buffer)
        if not 0 <= start <= end <= length:
            raise EditError(start, end, length)

    def _publish(self, event: EditEvent) -> EditEvent:
        with self._lock:
            subscribers = list(self._subscribers)
        logger.debug("%s %d..%d (%+d)", event.kind.value, event.start, event.end, event.delta)
        for callback in subscribers:
            callback(event)
        return event


__all__ = ["EditCallback", "EditEvent", "EditKind", "TextStorage"]
