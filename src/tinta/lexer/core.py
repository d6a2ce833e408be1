"""Line-oriented block segmenter.

Groups raw lines into typed blocks with a small state machine. Each line is
classified against the current state; a line that ends the current block
flushes it and is re-evaluated from ``NONE`` without consuming more input.

Priority when classifying from ``NONE``:
    fence > heading > checked item > ordered item > unordered item
    > quote > blank > paragraph

Checked items are tested before unordered items because ``- [x] a`` also
has the unordered shape.

Thread Safety:
Segmenter instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from tinta.lexer.classifiers import (
    extract_checked_item,
    extract_fence_info,
    extract_heading,
    extract_ordered_item,
    extract_quote_line,
    extract_unordered_item,
    is_blank,
    is_checked_item,
    is_fence_delimiter,
    is_heading,
    is_ordered_item,
    is_quote_line,
    is_unordered_item,
)
from tinta.lexer.modes import SegmentState
from tinta.lexer.segments import RawBlock
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

# A line is evaluated at most: once in the current block state, once in NONE,
# once in the state NONE picked for it.
_MAX_EVALUATIONS = 3

# Appended to the input so that any open block is flushed.
_TRAILER = ("", "")


class Segmenter:
    """Block segmentation state machine.

    Usage:
        >>> blocks = Segmenter("# Title\\n\\nSome *text*\\n- a\\n- b").segment()
        >>> [b.kind.name for b in blocks]
        ['HEADLINE', 'PARAGRAPH', 'UNORDERED_LIST']

    Thread Safety:
        Segmenter instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_state",
        "_lines",
        "_marks",
        "_language",
        "_blocks",
        "_lineno",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._state = SegmentState.NONE
        self._lines: list[str] = []
        self._marks: list[int] = []
        self._language = ""
        self._blocks: list[RawBlock] = []
        self._lineno = 0

    def segment(self) -> list[RawBlock]:
        """Segment the whole source.

        Returns:
            Raw blocks in source order.
        """
        for line in self._source.splitlines():
            self._lineno += 1
            self._feed(line)

        # An unterminated fence runs to end of input.
        if self._state is SegmentState.CODE:
            self._flush()

        for line in _TRAILER:
            self._lineno += 1
            self._feed(line)

        assert self._state is SegmentState.NONE, f"block left open: {self._state}"
        return self._blocks

    def _feed(self, line: str) -> None:
        evaluations = 0
        handled = False
        while not handled:
            evaluations += 1
            assert evaluations <= _MAX_EVALUATIONS, (
                f"line {self._lineno} re-evaluated {evaluations} times in {self._state}"
            )
            handled = self._step(line)

    def _step(self, line: str) -> bool:
        """Evaluate one line in the current state.

        Returns:
            True if the line was consumed, False if it must be re-evaluated
            in the (new) current state.
        """
        match self._state:
            case SegmentState.NONE:
                return self._step_none(line)
            case SegmentState.CODE:
                if is_fence_delimiter(line):
                    self._flush()
                else:
                    self._lines.append(line)
                return True
            case SegmentState.PARAGRAPH:
                return self._step_paragraph(line)
            case SegmentState.ORDERED_LIST:
                if is_ordered_item(line):
                    self._lines.append(extract_ordered_item(line))
                    return True
            case SegmentState.UNORDERED_LIST:
                if is_unordered_item(line) and not is_checked_item(line):
                    self._lines.append(extract_unordered_item(line))
                    return True
            case SegmentState.CHECKED_LIST:
                if is_checked_item(line):
                    checked, text = extract_checked_item(line)
                    self._lines.append(text)
                    self._marks.append(checked)
                    return True
            case SegmentState.QUOTE:
                if is_quote_line(line):
                    level, text = extract_quote_line(line)
                    self._lines.append(text)
                    self._marks.append(level)
                    return True
            case SegmentState.HEADLINE:
                raise AssertionError("HEADLINE is never a held state")

        # Not an item of the open list/quote: close it and retry from NONE.
        self._flush()
        return False

    def _step_none(self, line: str) -> bool:
        if is_fence_delimiter(line):
            self._language = extract_fence_info(line)
            self._enter(SegmentState.CODE)
            return True
        if is_heading(line):
            self._emit_headline(line)
            return True
        if is_checked_item(line):
            self._enter(SegmentState.CHECKED_LIST)
            return False
        if is_ordered_item(line):
            self._enter(SegmentState.ORDERED_LIST)
            return False
        if is_unordered_item(line):
            self._enter(SegmentState.UNORDERED_LIST)
            return False
        if is_quote_line(line):
            self._enter(SegmentState.QUOTE)
            return False
        if is_blank(line):
            return True
        self._enter(SegmentState.PARAGRAPH)
        return False

    def _step_paragraph(self, line: str) -> bool:
        if is_fence_delimiter(line):
            self._flush()
            self._language = extract_fence_info(line)
            self._enter(SegmentState.CODE)
            return True
        if is_heading(line):
            self._flush()
            self._emit_headline(line)
            return True
        if is_blank(line):
            self._flush()
            return True
        if (
            is_checked_item(line)
            or is_ordered_item(line)
            or is_unordered_item(line)
            or is_quote_line(line)
        ):
            self._flush()
            return False
        self._lines.append(line)
        return True

    def _enter(self, state: SegmentState) -> None:
        logger.debug("line %d: %s -> %s", self._lineno, self._state.name, state.name)
        self._state = state

    def _emit_headline(self, line: str) -> None:
        level, title = extract_heading(line)
        self._blocks.append(RawBlock(SegmentState.HEADLINE, (title,), level=level))

    def _flush(self) -> None:
        """Close the open block and return to NONE."""
        state = self._state
        assert state is not SegmentState.NONE, "flush with no open block"
        # Only a code block may legitimately be empty (```` ``` ```` twice).
        assert self._lines or state is SegmentState.CODE, (
            f"flush of empty {state.name} block at line {self._lineno}"
        )
        self._blocks.append(
            RawBlock(
                state,
                tuple(self._lines),
                marks=tuple(self._marks),
                language=self._language if state is SegmentState.CODE else "",
            )
        )
        self._lines = []
        self._marks = []
        self._language = ""
        logger.debug("line %d: %s -> NONE", self._lineno, state.name)
        self._state = SegmentState.NONE


def segment(source: str) -> list[RawBlock]:
    """Segment ``source`` into raw blocks."""
    return Segmenter(source).segment()
