"""Inline formatting subsystem.

Provides mixins for the passes that turn raw block text into styled runs:
- Code spans (`)
- Images, links and raw URLs
- Issue (#123) and commit (hex hash) references
- Bold, italic, strikethrough
- Character references, emoji shortcodes, whitespace

Architecture:
    Each pass searches the block's working buffer with one pattern and
    splices styled replacements back in (see ``scan.rescan``).

"""

from __future__ import annotations

from tinta.parsing.inline.code import CodeSpanMixin
from tinta.parsing.inline.core import InlineFormatter, format_inline
from tinta.parsing.inline.decoding import TextDecodingMixin
from tinta.parsing.inline.emphasis import EmphasisMixin
from tinta.parsing.inline.links import LinkMixin, resolve_url
from tinta.parsing.inline.references import ReferenceMixin, commit_pattern
from tinta.parsing.inline.scan import Replacement, rescan

__all__ = [
    "CodeSpanMixin",
    "EmphasisMixin",
    "InlineFormatter",
    "LinkMixin",
    "ReferenceMixin",
    "Replacement",
    "TextDecodingMixin",
    "commit_pattern",
    "format_inline",
    "rescan",
    "resolve_url",
]
