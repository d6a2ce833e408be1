"""Raw block values produced by the segmenter.

A RawBlock still holds unformatted markup text. The inline pipeline turns
its text fields into run lists; code lines are final as they stand.

Thread Safety:
RawBlock is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.lexer.modes import SegmentState


@dataclass(frozen=True, slots=True)
class RawBlock:
    """One segmented block before inline formatting.

    Attributes:
        kind: Segment state the block was accumulated in (never NONE)
        lines: Paragraph lines, code lines, list/quote item texts, or the
            single headline title
        level: Headline level (1-4); 0 for other kinds
        marks: Per-item extra data, aligned with ``lines``: checked flags
            for CHECKED_LIST, nesting levels for QUOTE, empty otherwise
        language: Info string of a code fence

    """

    kind: SegmentState
    lines: tuple[str, ...]
    level: int = 0
    marks: tuple[int, ...] = ()
    language: str = ""

    def __post_init__(self) -> None:
        assert self.kind is not SegmentState.NONE, "RawBlock cannot be NONE"
        assert not self.marks or len(self.marks) == len(self.lines)
