"""Heading line classifier."""

from __future__ import annotations

import re

# 1-4 '#' then whitespace. Five or more hashes are ordinary text.
_HEADING_RE = re.compile(r"^#{1,4}\s")
_HEADING_EXTRACT_RE = re.compile(r"^(#{1,4})\s*(.*?)\s*#*\s*$")


def is_heading(line: str) -> bool:
    """True if the line opens with 1-4 ``#`` followed by whitespace."""
    return _HEADING_RE.match(line) is not None


def extract_heading(line: str) -> tuple[int, str]:
    """Split a heading line into (level, title).

    Leading hashes, surrounding whitespace and any trailing run of ``#`` are
    removed: ``"###   Title   ### "`` gives ``(3, "Title")``. A heading whose
    title is empty after trimming yields ``(1, "")``.

    Args:
        line: A line for which is_heading() is true

    Returns:
        Tuple of (level, title)
    """
    match = _HEADING_EXTRACT_RE.match(line)
    if match is None or not match.group(2):
        return 1, ""
    return len(match.group(1)), match.group(2)
