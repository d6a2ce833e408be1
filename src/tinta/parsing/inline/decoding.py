"""Text decoding passes: character references, emoji, whitespace.

These run after every structural pass. Decoded text resumes scanning after
itself, so ``&amp;lt;`` decodes once to ``&lt;`` and stays that way.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tinta.parsing.emoji import decode_emoji
from tinta.parsing.entities import decode_entity
from tinta.parsing.inline.scan import Replacement, rescan
from tinta.runs import Run

if TYPE_CHECKING:
    from tinta.runs import AttributedText

_ENTITY_RE = re.compile(r"&(#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")
_EMOJI_RE = re.compile(r":([a-z0-9_+\-]+):")
_SPACES_RE = re.compile(r" {2,}")


def _decoded(buf: AttributedText, match: re.Match[str], text: str | None) -> Replacement | None:
    if text is None:
        return None
    return Replacement(match.start(), match.end(), [Run(text, buf.style_at(match.start()))])


class TextDecodingMixin:
    """Entity, emoji and whitespace passes.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _decode_entities(self, buf: AttributedText) -> None:
        rescan(
            buf,
            _ENTITY_RE,
            lambda b, m: _decoded(b, m, decode_entity(m.group(1))),
            resume_after=True,
        )

    def _decode_emoji(self, buf: AttributedText) -> None:
        rescan(
            buf,
            _EMOJI_RE,
            lambda b, m: _decoded(b, m, decode_emoji(m.group(1))),
            resume_after=True,
        )

    def _collapse_whitespace(self, buf: AttributedText) -> None:
        rescan(buf, _SPACES_RE, lambda b, m: _decoded(b, m, " "), resume_after=True)
