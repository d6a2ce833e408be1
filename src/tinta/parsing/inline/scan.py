"""Search-and-splice driver shared by every inline pass.

A pass is a compiled pattern plus a handler. The driver searches the
buffer's plain text, asks the handler for a replacement, splices it in and
searches again from where the match began, so text produced by one
replacement can take part in the next match of the same pass. A handler
declines a match by returning None; the match stays literal and the search
resumes one character later.

Passes whose output would match their own pattern again (links keep their
visible text, decoded entities may spell another entity) resume after the
replacement instead.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import NamedTuple

from tinta.runs import AttributedText, Run


class Replacement(NamedTuple):
    """Runs to splice over ``text[start:end]``."""

    start: int
    end: int
    runs: Sequence[Run]


Handler = Callable[[AttributedText, re.Match[str]], Replacement | None]


def rescan(
    buf: AttributedText,
    pattern: re.Pattern[str],
    handler: Handler,
    *,
    resume_after: bool = False,
) -> int:
    """Apply one pass until the pattern has no accepted match left.

    Args:
        buf: Buffer to rewrite in place
        pattern: Pattern searched in ``buf.text``
        handler: Builds the replacement for a match, or declines with None
        resume_after: Continue after the replacement rather than at its start

    Returns:
        Number of replacements made.
    """
    pos = 0
    count = 0
    while True:
        match = buf.search(pattern, pos)
        if match is None:
            return count
        replacement = handler(buf, match)
        if replacement is None:
            pos = match.start() + 1
            continue
        start, end, runs = replacement
        # Every replacement shrinks the text or resumes past itself.
        before = len(buf)
        buf.replace(start, end, runs)
        count += 1
        if resume_after:
            pos = start + sum(len(run) for run in runs)
        else:
            assert len(buf) < before, f"{pattern.pattern!r} replacement did not shrink text"
            pos = min(start, match.start())
