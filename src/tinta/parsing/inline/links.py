"""Link and image passes.

Handles, in pipeline order:
- ``![alt](url)`` images, replaced by one U+FFFC run carrying an ImageRef
- ``[text](url)`` links, keeping the text's existing attributes
- bare ``http(s)://`` URLs and ``<http(s)://...>`` autolinks

A target that does not survive ``resolve_url`` leaves the markup literal.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from tinta.images import ImageRef
from tinta.parsing.charsets import CODE_CLOSE, CODE_OPEN, ESCAPE_OPEN, OBJECT_REPLACEMENT
from tinta.parsing.inline.scan import Replacement, rescan
from tinta.runs import Run

if TYPE_CHECKING:
    from tinta.config import ParseConfig
    from tinta.runs import AttributedText, Style

_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]*)\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")

_URL_BODY = rf"https?://[^\s<>{ESCAPE_OPEN}{CODE_OPEN}{CODE_CLOSE}]+"
_RAW_LINK_RE = re.compile(rf"<({_URL_BODY})>|(?<![(\[<])({_URL_BODY})")
_SCHEME_RE = re.compile(r"https?://", re.IGNORECASE)

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f\s]")


def resolve_url(raw: str) -> str | None:
    """Trim a link target and validate it.

    Surrounding whitespace, newlines and angle brackets are removed.

    Returns:
        The cleaned URL, or None when it is empty, contains whitespace or
        control characters, or cannot be split into URL components.
    """
    url = raw.strip()
    if url.startswith("<") and url.endswith(">"):
        url = url[1:-1].strip()
    if not url or _CONTROL_RE.search(url):
        return None
    try:
        urlsplit(url)
    except ValueError:
        return None
    return url


def _is_linked(style: Style) -> bool:
    return style.link is not None


class LinkMixin:
    """Image, link and raw-URL passes.

    Required Host Attributes:
        - _config: ParseConfig

    Required Host Methods:
        - _resolve_text(text) -> str

    """

    _config: ParseConfig

    def _format_images(self, buf: AttributedText) -> None:
        rescan(buf, _IMAGE_RE, self._image)

    def _image(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        url = resolve_url(self._resolve_text(match.group(2)))
        if url is None:
            return None
        image = ImageRef.create(url, self._resolve_text(match.group(1)))
        style = buf.style_at(match.start()).merged(image=image)
        return Replacement(match.start(), match.end(), [Run(OBJECT_REPLACEMENT, style)])

    def _format_links(self, buf: AttributedText) -> None:
        rescan(buf, _LINK_RE, self._link)

    def _link(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        url = resolve_url(self._resolve_text(match.group(2)))
        if url is None:
            return None
        start, end = match.span(1)
        if start == end:
            # [](url): show the target as written
            raw = match.group(2)
            start = match.start(2) + len(raw) - len(raw.lstrip())
            end = match.end(2) - (len(raw) - len(raw.rstrip()))
        runs = [Run(r.text, r.style.merged(link=url)) for r in buf.slice(start, end)]
        return Replacement(match.start(), match.end(), runs)

    def _format_raw_links(self, buf: AttributedText) -> None:
        rescan(buf, _RAW_LINK_RE, self._raw_link, resume_after=True)

    def _raw_link(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        if match.group(1) is not None:
            # <url>: brackets dropped, no trailing trim
            start, end = match.span(1)
            outer_start, outer_end = match.span()
        else:
            start, end = match.span(2)
            end = start + len(self._trim_trailing(match.group(2)))
            outer_start, outer_end = start, end

        visible = buf.text[start:end]
        scheme = _SCHEME_RE.match(visible)
        if scheme is None or scheme.end() == len(visible):
            return None
        if buf.any_style(outer_start, outer_end, _is_linked):
            return None
        url = resolve_url(self._resolve_text(visible))
        if url is None:
            return None
        runs = [Run(r.text, r.style.merged(link=url)) for r in buf.slice(start, end)]
        return Replacement(outer_start, outer_end, runs)

    def _trim_trailing(self, url: str) -> str:
        """Leave trailing punctuation and unbalanced ``)`` outside the URL."""
        punctuation = self._config.raw_link_trailing_punctuation
        while url:
            last = url[-1]
            if last in punctuation:
                url = url[:-1]
            elif last == ")" and url.count(")") > url.count("("):
                url = url[:-1]
            else:
                break
        return url
