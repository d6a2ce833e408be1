"""Blank line classifier."""

from __future__ import annotations


def is_blank(line: str) -> bool:
    """Empty or whitespace-only."""
    return not line.strip()
