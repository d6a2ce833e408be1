"""
Tinta: lightweight markup to styled rich text.

Turns a block of markdown-like text into a Document: typed blocks
(headlines, paragraphs, code, lists, quotes) whose text is split into
styled runs (bold, italic, monospace, strikethrough, link, image).

Quick Start:
    >>> from tinta import parse
    >>> doc = parse("# Hello\\n\\nSee **#42** and deadbeefcafebabe")
    >>> doc.plain_text()
    'Hello\\u2029See #42 and deadbee'
    >>> attrs, span = doc.attributes_at(10)
    >>> attrs.style.bold, attrs.style.link
    (True, 'issue/42')

    >>> # Or use the reusable processor
    >>> from tinta import Markdown, ParseConfig
    >>> md = Markdown(config=ParseConfig(decode_emoji=False))
    >>> md(":wave:").plain_text()
    ':wave:'

Parsing is total: any string produces a Document. Malformed markup is kept
as literal text.

"""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from tinta.assembler import Assembler, assemble
from tinta.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tinta.document import Attributes, Document, Span
from tinta.errors import ConfigError, EditError, ImageError, StyleError, TintaError
from tinta.hints import BlockHints, ItemHints
from tinta.images import ImageCache, ImageEvent, ImageFetcher, ImageRef, ImageResolver
from tinta.lexer import RawBlock, Segmenter, segment
from tinta.nodes import (
    Block,
    CheckedItem,
    CheckedList,
    Code,
    Headline,
    OrderedList,
    Paragraph,
    Quote,
    QuoteLine,
    UnorderedList,
)
from tinta.parsing.inline import InlineFormatter, format_inline
from tinta.renderers import DocumentRenderer, PlainTextRenderer
from tinta.runs import PLAIN, Run, Style
from tinta.storage import EditEvent, TextStorage
from tinta.styles import StyleRole, StyleSheet, headline_role
from tinta.text import extract_text

__version__ = "0.1.0"

StyleOverrides = Mapping[StyleRole | str, Mapping[str, Any]]


def _build_config(
    styles: StyleOverrides | StyleSheet | None,
    config: ParseConfig | None,
) -> ParseConfig:
    base = config if config is not None else get_parse_config()
    if styles is None:
        return base
    sheet = styles if isinstance(styles, StyleSheet) else base.styles.with_overrides(styles)
    return replace(base, styles=sheet)


def _parse(source: str) -> Document:
    return Assembler().assemble(Segmenter(source).segment())


def parse(
    source: str,
    *,
    styles: StyleOverrides | StyleSheet | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse markup into a Document.

    Args:
        source: Markup text
        styles: Role -> attribute bag overrides (role members or names);
            unspecified roles keep the defaults
        config: Parse configuration (defaults to the active one)

    Returns:
        The parsed Document. Never raises for ``str`` input.

    Raises:
        StyleError: ``styles`` names an unknown role.

    Example:
        >>> doc = parse("- one\\n- two", styles={"bold": {"weight": 900}})
        >>> [hint.prefix for hint in doc.hints[0].item_hints]
        ['● ', '● ']

    """
    effective = _build_config(styles, config)
    with parse_config_context(effective):
        return _parse(source)


def render(document: Document) -> str:
    """Render a Document as plain text with item prefixes and line breaks."""
    return PlainTextRenderer().render(document)


class Markdown:
    """Reusable processor holding one frozen configuration.

    Usage:
        >>> md = Markdown(styles={"headline": {"size": 28}})
        >>> doc = md("# Title")
        >>> doc.blocks[0]
        Headline(level=1, runs=(Run(text='Title', ...),))

    Thread Safety:
        Uses ContextVar for the active configuration. Safe to use from
        several threads at once.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        styles: StyleOverrides | StyleSheet | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        self._config = _build_config(styles, config if config is not None else ParseConfig())

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> Document:
        return self.parse(source)

    def parse(self, source: str) -> Document:
        """Parse one source string with this processor's configuration."""
        with parse_config_context(self._config):
            return _parse(source)

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse several sources, setting the configuration once."""
        with parse_config_context(self._config):
            return [_parse(source) for source in sources]


__all__ = [
    "PLAIN",
    "Assembler",
    "Attributes",
    "Block",
    "BlockHints",
    "CheckedItem",
    "CheckedList",
    "Code",
    "ConfigError",
    "Document",
    "DocumentRenderer",
    "EditError",
    "EditEvent",
    "Headline",
    "ImageCache",
    "ImageError",
    "ImageEvent",
    "ImageFetcher",
    "ImageRef",
    "ImageResolver",
    "InlineFormatter",
    "ItemHints",
    "Markdown",
    "OrderedList",
    "Paragraph",
    "ParseConfig",
    "PlainTextRenderer",
    "Quote",
    "QuoteLine",
    "RawBlock",
    "Run",
    "Segmenter",
    "Span",
    "Style",
    "StyleError",
    "StyleRole",
    "StyleSheet",
    "TextStorage",
    "TintaError",
    "UnorderedList",
    "__version__",
    "assemble",
    "extract_text",
    "format_inline",
    "get_parse_config",
    "headline_role",
    "parse",
    "parse_config_context",
    "render",
    "reset_parse_config",
    "segment",
    "set_parse_config",
]
