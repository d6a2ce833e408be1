"""Bold, italic and strikethrough passes.

Bold runs before italic so ``**x**`` is never read as two italic markers.
Delimiters are paired left to right, shortest content first; there is no
nesting of the same delimiter.

Italic flanking:
    The opening delimiter is not preceded by a word character or another
    copy of itself and not followed by whitespace; the closing delimiter
    mirrors that. ``a_b_c`` therefore stays literal.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tinta.parsing.inline.scan import Replacement, rescan
from tinta.runs import Run

if TYPE_CHECKING:
    from tinta.runs import AttributedText

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*|(?<!\w)__(.+?)__(?!\w)")
_ITALIC_RE = re.compile(
    r"(?<![\w*])\*(?![\s*])(.+?)(?<![\s*])\*(?![\w*])"
    r"|(?<![\w_])_(?![\s_])(.+?)(?<![\s_])_(?![\w_])"
)
_STRIKETHROUGH_RE = re.compile(r"~~(.+?)~~")


def _content_span(match: re.Match[str]) -> tuple[int, int]:
    """Span of whichever alternative's content group matched."""
    for group in range(1, (match.re.groups or 0) + 1):
        if match.group(group) is not None:
            return match.span(group)
    raise AssertionError(f"no content group in {match.re.pattern!r}")


def _restyle(buf: AttributedText, match: re.Match[str], **changes: object) -> Replacement:
    start, end = _content_span(match)
    runs = [Run(r.text, r.style.merged(**changes)) for r in buf.slice(start, end)]
    return Replacement(match.start(), match.end(), runs)


class EmphasisMixin:
    """Delimiter-pair passes.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _format_bold(self, buf: AttributedText) -> None:
        rescan(buf, _BOLD_RE, lambda b, m: _restyle(b, m, bold=True))

    def _format_italic(self, buf: AttributedText) -> None:
        rescan(buf, _ITALIC_RE, lambda b, m: _restyle(b, m, italic=True))

    def _format_strikethrough(self, buf: AttributedText) -> None:
        rescan(buf, _STRIKETHROUGH_RE, lambda b, m: _restyle(b, m, strikethrough=True))
