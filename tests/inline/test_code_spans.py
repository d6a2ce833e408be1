"""Tests for monospace span parking and reinsertion."""

from tinta.parsing.inline import format_inline
from tinta.runs import Run, Style, runs_text

MONO = Style(monospace=True)


class TestCodeSpans:
    """Backtick spans are opaque to every other pass."""

    def test_content_not_formatted(self) -> None:
        assert format_inline("`*x*`") == (Run("*x*", MONO),)

    def test_surrounding_text_plain(self) -> None:
        assert format_inline("a `b` c") == (Run("a "), Run("b", MONO), Run(" c"))

    def test_takes_surrounding_emphasis(self) -> None:
        assert format_inline("**a `b` c**") == (
            Run("a ", Style(bold=True)),
            Run("b", Style(bold=True, monospace=True)),
            Run(" c", Style(bold=True)),
        )

    def test_backslashes_verbatim(self) -> None:
        assert format_inline(r"`a\*b`") == (Run(r"a\*b", MONO),)

    def test_empty_backticks_literal(self) -> None:
        assert format_inline("``") == (Run("``"),)

    def test_unterminated_backtick_literal(self) -> None:
        assert format_inline("a `b") == (Run("a `b"),)

    def test_spaces_not_collapsed(self) -> None:
        assert format_inline("`a   b`") == (Run("a   b", MONO),)

    def test_references_not_linked(self) -> None:
        runs = format_inline("see `#123` and `deadbeefcafe` and `http://x.com`")
        assert all(run.style.link is None for run in runs)
        assert runs_text(runs) == "see #123 and deadbeefcafe and http://x.com"

    def test_entities_and_emoji_not_decoded(self) -> None:
        assert format_inline("`&amp; :wave:`") == (Run("&amp; :wave:", MONO),)

    def test_several_spans(self) -> None:
        runs = format_inline("`a` and `b`")
        assert [run.text for run in runs if run.style.monospace] == ["a", "b"]

    def test_link_text_may_contain_code(self) -> None:
        (run,) = format_inline("[`x`](http://x.com)")
        assert run == Run("x", Style(monospace=True, link="http://x.com"))

    def test_code_in_link_target_resolved(self) -> None:
        (run,) = format_inline("[a](http://x.com/`y`)")
        assert run.style.link == "http://x.com/y"
