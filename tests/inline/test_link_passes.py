"""Tests for images, bracketed links and raw URLs."""

import pytest

from tinta.config import ParseConfig
from tinta.parsing.charsets import OBJECT_REPLACEMENT
from tinta.parsing.inline import format_inline, resolve_url
from tinta.runs import Run, Style, runs_text


def linked(runs: tuple[Run, ...]) -> list[tuple[str, str]]:
    return [(run.text, run.style.link) for run in runs if run.style.link is not None]


class TestResolveUrl:
    """Trimming and validation of link targets."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("http://x.com", "http://x.com"),
            ("  http://x.com \n", "http://x.com"),
            ("<http://x.com>", "http://x.com"),
            ("relative/path.png", "relative/path.png"),
        ],
    )
    def test_accepted(self, raw: str, expected: str) -> None:
        assert resolve_url(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "<>", "not a url", "http://x\x00", "http://[::1"])
    def test_rejected(self, raw: str) -> None:
        assert resolve_url(raw) is None


class TestImages:
    """``![alt](url)``."""

    def test_image_placeholder(self) -> None:
        (run,) = format_inline("![logo](http://x.com/a.png)")
        assert run.text == OBJECT_REPLACEMENT
        assert run.style.image is not None
        assert run.style.image.url == "http://x.com/a.png"
        assert run.style.image.alt == "logo"

    def test_each_image_has_its_own_identity(self) -> None:
        runs = format_inline("![a](x.png) ![a](x.png)")
        images = [run.style.image for run in runs if run.style.image is not None]
        assert len(images) == 2
        assert images[0].id != images[1].id

    def test_invalid_url_left_literal(self) -> None:
        assert runs_text(format_inline("![a](bad url)")) == "![a](bad url)"

    def test_image_inside_link(self) -> None:
        (run,) = format_inline("[![a](i.png)](http://x.com)")
        assert run.style.image is not None
        assert run.style.link == "http://x.com"


class TestBracketedLinks:
    """``[text](url)``."""

    def test_link(self) -> None:
        assert format_inline("[home](http://x.com)") == (Run("home", Style(link="http://x.com")),)

    def test_target_trimmed(self) -> None:
        assert linked(format_inline("[a]( <http://x.com> )")) == [("a", "http://x.com")]

    def test_text_keeps_formatting(self) -> None:
        (run,) = format_inline("[**b**](http://x.com)")
        assert run == Run("b", Style(bold=True, link="http://x.com"))

    def test_empty_text_shows_target(self) -> None:
        assert linked(format_inline("[](http://x.com)")) == [("http://x.com", "http://x.com")]

    def test_invalid_target_left_literal(self) -> None:
        assert format_inline("[a](b c)") == (Run("[a](b c)"),)

    def test_escaped_character_in_target(self) -> None:
        assert linked(format_inline(r"[a](http://x.com/\_y)")) == [("a", "http://x.com/_y")]

    def test_target_not_relinked_as_raw_url(self) -> None:
        runs = format_inline("[http://a.com](http://b.com)")
        assert linked(runs) == [("http://a.com", "http://b.com")]

    def test_fragment_and_digits_in_target(self) -> None:
        url = "http://stackoverflow.com/questions/1637332/static-const-vs-define/3835772#3835772"
        runs = format_inline(f"[Static Overflow]({url})")
        assert runs == (Run("Static Overflow", Style(link=url)),)


class TestRawLinks:
    """Bare ``http(s)://`` URLs."""

    def test_two_independent_links(self) -> None:
        runs = format_inline("http://a http://b")
        assert linked(runs) == [("http://a", "http://a"), ("http://b", "http://b")]
        assert runs_text(runs) == "http://a http://b"

    def test_trailing_punctuation_outside(self) -> None:
        runs = format_inline("see https://x.com/a.")
        assert linked(runs) == [("https://x.com/a", "https://x.com/a")]
        assert runs[-1] == Run(".")

    def test_unbalanced_paren_outside(self) -> None:
        runs = format_inline("(see http://x.com/a)")
        assert linked(runs) == [("http://x.com/a", "http://x.com/a")]
        assert runs_text(runs) == "(see http://x.com/a)"

    def test_balanced_paren_kept(self) -> None:
        url = "http://en.wikipedia.org/wiki/A_(b)"
        assert linked(format_inline(f"go {url}")) == [(url, url)]

    def test_after_open_paren_not_linked(self) -> None:
        assert linked(format_inline("(http://www.kalliope.org/suburl/")) == []

    def test_angle_brackets_stripped(self) -> None:
        runs = format_inline("<http://x.com>")
        assert runs == (Run("http://x.com", Style(link="http://x.com")),)

    def test_bare_scheme_not_linked(self) -> None:
        assert linked(format_inline("http:// nothing")) == []

    def test_trailing_set_is_configurable(self) -> None:
        config = ParseConfig(raw_link_trailing_punctuation="")
        runs = format_inline("x http://a.com.", config)
        assert linked(runs) == [("http://a.com.", "http://a.com.")]

    def test_code_span_ends_url(self) -> None:
        runs = format_inline("http://a.com`code`")
        assert linked(runs) == [("http://a.com", "http://a.com")]
        assert runs[-1] == Run("code", Style(monospace=True))
