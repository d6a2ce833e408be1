"""Tests for the plain-text reference renderer."""

from tinta import DocumentRenderer, PlainTextRenderer, parse, render


def check_protocol(renderer: DocumentRenderer, source: str) -> str:
    return renderer.render(parse(source))


class TestPlainTextRenderer:
    """Hints applied by a rendering surface."""

    def test_empty(self) -> None:
        assert render(parse("")) == ""

    def test_blocks_separated_by_blank_line(self) -> None:
        assert render(parse("# T\n\nbody")) == "T\n\nbody\n"

    def test_unordered_prefixes(self) -> None:
        assert render(parse("- a\n- b")) == "● a\n● b\n"

    def test_ordered_prefixes(self) -> None:
        assert render(parse("1. a\n5. b")) == "1. a\n2. b\n"

    def test_checked_prefixes(self) -> None:
        assert render(parse("- [x] a\n- [ ] b")) == "☑ a\n☐ b\n"

    def test_quote_prefixes(self) -> None:
        assert render(parse("> a\n>> b")) == "│ a\n│ │ b\n"

    def test_code_lines(self) -> None:
        assert render(parse("```\nx  =  1\ny\n```")) == "x  =  1\ny\n"

    def test_image_label(self) -> None:
        assert render(parse("![logo](a.png)")) == "[image: logo]\n"

    def test_custom_image_label(self) -> None:
        renderer = PlainTextRenderer(image_label="<{url}>")
        assert check_protocol(renderer, "![logo](a.png)") == "<a.png>\n"

    def test_inline_styles_dropped(self) -> None:
        assert render(parse("**b** _i_ [l](http://x.com)")) == "b i l\n"
