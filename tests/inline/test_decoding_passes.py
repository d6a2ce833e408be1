"""Tests for character references, emoji and whitespace normalization."""

import pytest

from tinta.config import ParseConfig
from tinta.parsing.entities import decode_entity, decode_numeric
from tinta.parsing.inline import format_inline
from tinta.runs import Run, Style, runs_text


def text_of(source: str, config: ParseConfig | None = None) -> str:
    return runs_text(format_inline(source, config))


class TestCharacterReferences:
    """``&name;``, ``&#n;`` and ``&#xh;``."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("&amp;", "&"),
            ("&lt;b&gt;", "<b>"),
            ("&copy; 2024", "© 2024"),
            ("&#65;", "A"),
            ("&#x41;", "A"),
            ("&#X1F600;", "\U0001f600"),
        ],
    )
    def test_decoded(self, source: str, expected: str) -> None:
        assert text_of(source) == expected

    def test_unknown_name_kept(self) -> None:
        assert text_of("&bogus;") == "&bogus;"

    def test_missing_semicolon_kept(self) -> None:
        assert text_of("AT&T") == "AT&T"

    @pytest.mark.parametrize("source", ["&#0;", "&#xD800;", "&#x110000;"])
    def test_invalid_code_point_replaced(self, source: str) -> None:
        assert text_of(source) == "\ufffd"

    def test_decoded_once(self) -> None:
        assert text_of("&amp;lt;") == "&lt;"

    @pytest.mark.parametrize("source", ["&#xE000;&#xE012;&#xE001;", "&#57346;", "&#xF8FF;"])
    def test_private_use_reference_stays_literal(self, source: str) -> None:
        assert text_of(source) == source

    def test_private_use_reference_beside_code_span(self) -> None:
        runs = format_inline("`x` &#xE002;&#xE101;&#xE003;")
        assert runs_text(runs) == "x &#xE002;&#xE101;&#xE003;"
        assert runs[0] == Run("x", Style(monospace=True))

    def test_decoded_text_keeps_style(self) -> None:
        assert format_inline("**&amp;**") == (Run("&", Style(bold=True)),)

    def test_decoded_asterisks_do_not_emphasize(self) -> None:
        assert text_of("&#42;a&#42;") == "*a*"
        assert all(run.style == Style() for run in format_inline("&#42;a&#42;"))

    def test_disabled(self) -> None:
        assert text_of("&amp;", ParseConfig(decode_entities=False)) == "&amp;"

    def test_table_helpers(self) -> None:
        assert decode_entity("nbsp") == "\xa0"
        assert decode_entity("nope") is None
        assert decode_numeric("263a", hexadecimal=True) == "☺"
        assert decode_numeric("e000", hexadecimal=True) is None


class TestEmoji:
    """``:name:`` shortcodes."""

    def test_known_name(self) -> None:
        assert text_of("hi :wave:") == "hi \U0001f44b"

    def test_plus_one(self) -> None:
        assert text_of(":+1:") == "\U0001f44d"

    def test_unknown_name_kept(self) -> None:
        assert text_of(":not_an_emoji:") == ":not_an_emoji:"

    def test_uppercase_not_matched(self) -> None:
        assert text_of(":Wave:") == ":Wave:"

    def test_adjacent_colons(self) -> None:
        assert text_of(":smile:bar:") == "\U0001f604bar:"

    def test_time_of_day_untouched(self) -> None:
        assert text_of("at 10:30:15") == "at 10:30:15"

    def test_disabled(self) -> None:
        assert text_of(":wave:", ParseConfig(decode_emoji=False)) == ":wave:"


class TestWhitespace:
    """Space runs collapse to one space."""

    def test_collapsed(self) -> None:
        assert text_of("A  B   C") == "A B C"

    def test_single_spaces_untouched(self) -> None:
        assert text_of("A B C") == "A B C"

    def test_collapse_keeps_style(self) -> None:
        assert format_inline("**a   b**") == (Run("a b", Style(bold=True)),)

    def test_disabled(self) -> None:
        assert text_of("A  B", ParseConfig(collapse_whitespace=False)) == "A  B"
