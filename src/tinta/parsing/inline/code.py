"""Monospace spans.

Code spans are cut out of the buffer first and parked behind private-use
placeholders so no later pass can format their content. They come back
after whitespace normalization, still verbatim (backslashes included),
carrying the monospace flag on top of whatever surrounds them.

Thread Safety:
    Uses instance-local state only (``_code_spans``).

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tinta.parsing.charsets import (
    CODE_BASE,
    CODE_CLOSE,
    CODE_OPEN,
    PRIVATE_USE_LAST,
)
from tinta.parsing.escapes import restore_escapes, unescape
from tinta.parsing.inline.scan import Replacement, rescan
from tinta.runs import Run

if TYPE_CHECKING:
    from tinta.runs import AttributedText

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_CODE_PLACEHOLDER_RE = re.compile(
    f"{CODE_OPEN}([{chr(CODE_BASE)}-{chr(PRIVATE_USE_LAST)}]){CODE_CLOSE}"
)
_MAX_CODE_SPANS = PRIVATE_USE_LAST - CODE_BASE + 1


class CodeSpanMixin:
    """Extraction and reinsertion of monospace spans.

    Required Host Attributes:
        - _code_spans: list[str]

    """

    _code_spans: list[str]

    def _extract_code_spans(self, buf: AttributedText) -> None:
        rescan(buf, _CODE_SPAN_RE, self._park_code_span, resume_after=True)

    def _park_code_span(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        index = len(self._code_spans)
        if index >= _MAX_CODE_SPANS:
            return None
        self._code_spans.append(restore_escapes(match.group(1)))
        placeholder = f"{CODE_OPEN}{chr(CODE_BASE + index)}{CODE_CLOSE}"
        return Replacement(
            match.start(), match.end(), [Run(placeholder, buf.style_at(match.start()))]
        )

    def _reinsert_code_spans(self, buf: AttributedText) -> None:
        if self._code_spans:
            rescan(buf, _CODE_PLACEHOLDER_RE, self._unpark_code_span, resume_after=True)

    def _unpark_code_span(self, buf: AttributedText, match: re.Match[str]) -> Replacement:
        content = self._code_spans[ord(match.group(1)) - CODE_BASE]
        style = buf.style_at(match.start()).merged(monospace=True)
        return Replacement(match.start(), match.end(), [Run(content, style)])

    def _resolve_text(self, text: str) -> str:
        """Plain form of buffer text: code content back in, escapes made literal.

        Used for values that leave the buffer early, such as link targets
        and image alt text.
        """
        if self._code_spans:
            text = _CODE_PLACEHOLDER_RE.sub(
                lambda m: self._code_spans[ord(m.group(1)) - CODE_BASE], text
            )
        return unescape(text)
