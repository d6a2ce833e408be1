"""Tests for styles, runs and the attributed working buffer."""

import re

import pytest

from tinta.runs import PLAIN, AttributedText, Run, Style, coalesce, runs_text

BOLD = Style(bold=True)


class TestStyle:
    """Frozen formatting flags."""

    def test_plain_is_default(self) -> None:
        assert PLAIN == Style()
        assert BOLD != PLAIN

    def test_merged(self) -> None:
        assert PLAIN.merged(bold=True, link="u") == Style(bold=True, link="u")

    def test_merged_without_changes_is_identity(self) -> None:
        assert BOLD.merged() is BOLD

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            PLAIN.bold = True  # type: ignore[misc]


class TestCoalesce:
    """Run normalization."""

    def test_drops_empty_runs(self) -> None:
        assert coalesce([Run(""), Run("a"), Run("", BOLD)]) == (Run("a"),)

    def test_merges_equal_neighbours(self) -> None:
        assert coalesce([Run("a"), Run("b"), Run("c", BOLD), Run("d", BOLD)]) == (
            Run("ab"),
            Run("cd", BOLD),
        )

    def test_merges_across_dropped_run(self) -> None:
        assert coalesce([Run("a"), Run("", BOLD), Run("b")]) == (Run("ab"),)

    def test_runs_text(self) -> None:
        assert runs_text([Run("a"), Run("b", BOLD)]) == "ab"


class TestAttributedText:
    """The mutable buffer inline passes work on."""

    def test_empty(self) -> None:
        buf = AttributedText()
        assert buf.text == ""
        assert buf.to_runs() == ()
        assert buf.style_at(0) is PLAIN

    def test_slice_splits_runs(self) -> None:
        buf = AttributedText.from_runs([Run("abc"), Run("def", BOLD)])
        assert buf.slice(1, 5) == [Run("bc"), Run("de", BOLD)]

    def test_replace(self) -> None:
        buf = AttributedText("a **b** c")
        match = buf.search(re.compile(r"\*\*(.+?)\*\*"))
        assert match is not None
        buf.replace(match.start(), match.end(), [Run("b", BOLD)])
        assert buf.text == "a b c"
        assert buf.to_runs() == (Run("a "), Run("b", BOLD), Run(" c"))

    def test_apply(self) -> None:
        buf = AttributedText("abcd")
        buf.apply(1, 3, italic=True)
        assert buf.to_runs() == (Run("a"), Run("bc", Style(italic=True)), Run("d"))

    def test_apply_empty_range_is_noop(self) -> None:
        buf = AttributedText("ab")
        buf.apply(1, 1, bold=True)
        assert buf.to_runs() == (Run("ab"),)

    def test_any_style(self) -> None:
        buf = AttributedText.from_runs([Run("ab"), Run("cd", BOLD)])
        assert buf.any_style(1, 3, lambda style: style.bold)
        assert not buf.any_style(0, 2, lambda style: style.bold)

    def test_map_text_drops_emptied_runs(self) -> None:
        buf = AttributedText.from_runs([Run("x"), Run("y", BOLD)])
        buf.map_text(lambda text: text.replace("x", ""))
        assert buf.to_runs() == (Run("y", BOLD),)

    def test_style_at_past_end_uses_last_run(self) -> None:
        buf = AttributedText.from_runs([Run("a"), Run("b", BOLD)])
        assert buf.style_at(5) == BOLD

    def test_bad_range_asserts(self) -> None:
        with pytest.raises(AssertionError):
            AttributedText("ab").replace(2, 1, [])
