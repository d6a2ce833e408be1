"""Property-based tests for whole-document parsing using Hypothesis."""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from tinta import CheckedList, Code, OrderedList, Quote, UnorderedList, parse
from tinta.nodes import item_runs
from tinta.parsing.charsets import is_private_use
from tinta.runs import runs_text

LINES = st.lists(
    st.one_of(
        st.sampled_from(
            [
                "",
                "# head",
                "```",
                "- item **b**",
                "- [x] done",
                "1. one",
                "> quote",
                ">> deeper",
                "<!-- c -->",
                "`code`",
                "text http://x.com",
                "![i](a.png)",
                "`x` &#xE002;&#xE101;&#xE003;",
            ]
        ),
        st.text(alphabet=st.characters(blacklist_categories=("Co", "Cs")), max_size=20),
    ),
    max_size=25,
).map("\n".join)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def item_count(block: object) -> int:
    return len(item_runs(block))  # type: ignore[arg-type]


class TestDocumentProperties:
    """Invariants that hold for every input."""

    @given(LINES)
    @settings(max_examples=300)
    def test_one_hint_per_block(self, source: str) -> None:
        doc = parse(source)
        assert len(doc.hints) == len(doc.blocks)
        for block, hints in zip(doc.blocks, doc.hints, strict=True):
            assert len(hints.item_hints) == item_count(block)

    @given(LINES)
    @settings(max_examples=300)
    def test_separator_counts(self, source: str) -> None:
        doc = parse(source)
        text = doc.plain_text()
        blocks = doc.blocks
        paragraph_breaks = max(len(blocks) - 1, 0)
        line_breaks = sum(
            item_count(block) - 1
            for block in blocks
            if isinstance(block, UnorderedList | OrderedList | CheckedList | Quote)
        )
        line_breaks += sum(
            max(len(block.lines) - 1, 0) for block in blocks if isinstance(block, Code)
        )
        assert text.count("\u2029") == paragraph_breaks
        assert text.count("\u2028") == line_breaks

    @given(LINES)
    @settings(max_examples=300)
    def test_no_private_use_in_text(self, source: str) -> None:
        assert not any(is_private_use(char) for char in parse(source).plain_text())

    @given(LINES.filter(lambda s: "&" not in s and "\\" not in s))
    @settings(max_examples=300)
    def test_comments_only_in_code_blocks(self, source: str) -> None:
        for block in parse(source).blocks:
            if isinstance(block, Code):
                continue
            texts = [runs_text(runs) for runs in item_runs(block)] or [block.text]
            for text in texts:
                assert _COMMENT_RE.search(text) is None

    @given(LINES)
    @settings(max_examples=200)
    def test_attributes_defined_everywhere(self, source: str) -> None:
        doc = parse(source)
        for offset in range(0, len(doc), 7):
            attrs, (start, end) = doc.attributes_at(offset)
            assert start <= offset < end
            assert 0 <= attrs.block < len(doc.blocks)
