"""Inline formatter: the ordered pass pipeline for one block's text.

Pass order:
    1. strip HTML comments, hide backslash escapes
    2. park code spans
    3. images
    4. issue references
    5. links
    6. raw URLs
    7. commit references
    8. bold, italic, strikethrough
    9. character references, emoji
    10. whitespace normalization
    11. reinsert code spans, unescape

Earlier passes win: a span claimed by a link is not re-linked, parked code
is never formatted, escaped punctuation is never a delimiter.

Thread Safety:
    A formatter holds per-call state and is created per block. The pass
    patterns and tables it reads are immutable module constants.

"""

from __future__ import annotations

from tinta.config import ParseConfig, get_parse_config
from tinta.parsing.escapes import hide_escapes, strip_comments, unescape
from tinta.parsing.inline.code import CodeSpanMixin
from tinta.parsing.inline.decoding import TextDecodingMixin
from tinta.parsing.inline.emphasis import EmphasisMixin
from tinta.parsing.inline.links import LinkMixin
from tinta.parsing.inline.references import ReferenceMixin
from tinta.runs import PLAIN, AttributedText, Run, Style
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


class InlineFormatter(
    CodeSpanMixin,
    LinkMixin,
    ReferenceMixin,
    EmphasisMixin,
    TextDecodingMixin,
):
    """Formats one block's raw text into styled runs.

    Usage:
        >>> InlineFormatter().format("a **b**")
        (Run(text='a ', style=Style(...)), Run(text='b', style=Style(bold=True, ...)))

    """

    __slots__ = ("_code_spans", "_config")

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config = config if config is not None else get_parse_config()
        self._code_spans: list[str] = []

    def format(self, text: str, style: Style = PLAIN) -> tuple[Run, ...]:
        """Run every pass over ``text``.

        Args:
            text: Raw block (or item) text
            style: Base style of the text

        Returns:
            Coalesced runs covering the formatted text; empty for empty input.
        """
        config = self._config
        self._code_spans = []
        if config.strip_comments:
            text = strip_comments(text)
        if not text:
            return ()

        buf = AttributedText(hide_escapes(text), style)
        self._extract_code_spans(buf)
        self._format_images(buf)
        self._format_issue_refs(buf)
        self._format_links(buf)
        self._format_raw_links(buf)
        self._format_commit_refs(buf)
        self._format_bold(buf)
        self._format_italic(buf)
        self._format_strikethrough(buf)
        if config.decode_entities:
            self._decode_entities(buf)
        if config.decode_emoji:
            self._decode_emoji(buf)
        if config.collapse_whitespace:
            self._collapse_whitespace(buf)
        self._reinsert_code_spans(buf)
        buf.map_text(unescape)

        runs = buf.to_runs()
        if self._code_spans:
            logger.debug("Formatted %d chars with %d code spans", len(text), len(self._code_spans))
        return runs


def format_inline(text: str, config: ParseConfig | None = None) -> tuple[Run, ...]:
    """Format ``text`` with the active (or given) configuration."""
    return InlineFormatter(config).format(text)
