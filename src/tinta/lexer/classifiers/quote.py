"""Block quote line classifier."""

from __future__ import annotations

import re

_QUOTE_EXTRACT_RE = re.compile(r"^(>+)\s*(.*?)\s*$", re.DOTALL)


def is_quote_line(line: str) -> bool:
    return line.startswith(">")


def extract_quote_line(line: str) -> tuple[int, str]:
    """Return (nesting level, text) for a quote line.

    The level is the number of leading ``>``; the text is trimmed of
    surrounding whitespace. ``"  >> hi"`` is not a quote line (markers must
    start the line); anything that fails to match yields ``(1, "")``.
    """
    match = _QUOTE_EXTRACT_RE.match(line)
    if match is None:
        return 1, ""
    return len(match.group(1)), match.group(2)
