"""Property-based tests for segmenter invariants using Hypothesis.

The segmenter must terminate on any input, never emit an empty non-code
block, and never lose a non-blank line outside code.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tinta.lexer import SegmentState, segment

MARKUP_LINES = st.lists(
    st.sampled_from(
        [
            "",
            "   ",
            "text",
            "# Head",
            "####",
            "```",
            "```py",
            "- a",
            "* b",
            "- [x] c",
            "- [ ] d",
            "1. e",
            "> f",
            ">> g",
            ">",
            "##### h",
        ]
    ),
    max_size=40,
)


class TestSegmenterInvariants:
    """Invariants that hold for every input."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_terminates_on_any_text(self, source: str) -> None:
        blocks = segment(source)
        assert all(block.kind is not SegmentState.NONE for block in blocks)

    @given(MARKUP_LINES)
    @settings(max_examples=300)
    def test_no_empty_blocks_except_code(self, lines: list[str]) -> None:
        for block in segment("\n".join(lines)):
            if block.kind is not SegmentState.CODE:
                assert block.lines, f"empty {block.kind.name}"

    @given(MARKUP_LINES)
    @settings(max_examples=300)
    def test_marks_align_with_items(self, lines: list[str]) -> None:
        for block in segment("\n".join(lines)):
            if block.kind in (SegmentState.CHECKED_LIST, SegmentState.QUOTE):
                assert len(block.marks) == len(block.lines)
            else:
                assert block.marks == ()

    @given(st.lists(st.sampled_from(["text", "- a", "1. b", "> c", "# d", ""]), max_size=30))
    @settings(max_examples=200)
    def test_every_nonblank_line_lands_in_one_block(self, lines: list[str]) -> None:
        """Without fences, each non-blank line produces exactly one stored line."""
        blocks = segment("\n".join(lines))
        stored = sum(len(block.lines) for block in blocks)
        assert stored == sum(1 for line in lines if line.strip())

    @given(st.lists(st.sampled_from(["- a", "- [x] b", "* c", "1. d", "- [ ] e"]), min_size=1))
    def test_adjacent_blocks_differ_in_kind(self, lines: list[str]) -> None:
        """Consecutive item lines of one kind always share a block."""
        blocks = segment("\n".join(lines))
        for left, right in zip(blocks, blocks[1:]):
            assert left.kind is not right.kind
