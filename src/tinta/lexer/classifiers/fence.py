"""Fenced code delimiter classifier.

The delimiter is context-free: the same test opens and closes a code block.
The segmenter decides which from its current state.
"""

from __future__ import annotations

FENCE = "```"


def is_fence_delimiter(line: str) -> bool:
    return line.startswith(FENCE)


def extract_fence_info(line: str) -> str:
    """Info string after an opening fence (``python`` in ````` ```python `````)."""
    return line[len(FENCE) :].strip().strip("`").strip()
