"""Issue and commit reference passes.

``#123`` becomes a link to the configured issue target and keeps its
visible text. A bare hex run of commit-hash length becomes a link to the
configured commit target, shown shortened. Neither pass touches text that
an earlier pass already linked.

"""

from __future__ import annotations

import re
from functools import cache
from typing import TYPE_CHECKING

from tinta.parsing.inline.scan import Replacement, rescan
from tinta.runs import Run

if TYPE_CHECKING:
    from tinta.config import ParseConfig
    from tinta.runs import AttributedText, Style

# Left edge: start of text or a character that is not a word character,
# slash or opening bracket. ``&`` is excluded too so ``&#123;`` stays an
# entity.
_ISSUE_RE = re.compile(r"(?<![\w/\[&])#(\d+)(?!\w)")


@cache
def commit_pattern(min_length: int, max_length: int) -> re.Pattern[str]:
    """Pattern for a standalone hex run of ``min_length..max_length`` digits."""
    return re.compile(rf"(?<![\w/\[#])([0-9a-fA-F]{{{min_length},{max_length}}})(?!\w)")


def _is_linked(style: Style) -> bool:
    return style.link is not None


class ReferenceMixin:
    """Issue and commit reference passes.

    Required Host Attributes:
        - _config: ParseConfig

    """

    _config: ParseConfig

    def _format_issue_refs(self, buf: AttributedText) -> None:
        rescan(buf, _ISSUE_RE, self._issue_ref, resume_after=True)

    def _issue_ref(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        start, end = match.span()
        if buf.any_style(start, end, _is_linked):
            return None
        target = self._config.issue_link_format.format(number=match.group(1))
        runs = [Run(r.text, r.style.merged(link=target)) for r in buf.slice(start, end)]
        return Replacement(start, end, runs)

    def _format_commit_refs(self, buf: AttributedText) -> None:
        config = self._config
        pattern = commit_pattern(config.commit_min_length, config.commit_max_length)
        rescan(buf, pattern, self._commit_ref, resume_after=True)

    def _commit_ref(self, buf: AttributedText, match: re.Match[str]) -> Replacement | None:
        start, end = match.span()
        if buf.any_style(start, end, _is_linked):
            return None
        sha = match.group(1)
        target = self._config.commit_link_format.format(sha=sha)
        style = buf.style_at(start).merged(link=target)
        return Replacement(start, end, [Run(sha[: self._config.commit_display_length], style)])
