"""List item classifiers: ordered, unordered and checked.

A checked item (``- [x] done``) also has the shape of an unordered item.
Callers must test is_checked_item() first; is_unordered_item() alone does
not exclude checked lines.
"""

from __future__ import annotations

import re

_ORDERED_RE = re.compile(r"^\d+\.\s")
_ORDERED_EXTRACT_RE = re.compile(r"^\d+\.\s*(.*)$", re.DOTALL)

_UNORDERED_RE = re.compile(r"^[*+\-]\s")
_UNORDERED_EXTRACT_RE = re.compile(r"^[*+\-]\s*(.*)$", re.DOTALL)

_CHECKED_RE = re.compile(r"^- \[([ xX])\]\s")
_CHECKED_EXTRACT_RE = re.compile(r"^- \[([ xX])\]\s*(.*)$", re.DOTALL)


def is_ordered_item(line: str) -> bool:
    """``<digits>.`` followed by whitespace."""
    return _ORDERED_RE.match(line) is not None


def extract_ordered_item(line: str) -> str:
    """Text after the ordered marker and its whitespace."""
    match = _ORDERED_EXTRACT_RE.match(line)
    assert match is not None, f"not an ordered item: {line!r}"
    return match.group(1)


def is_unordered_item(line: str) -> bool:
    """``*``, ``+`` or ``-`` followed by whitespace."""
    return _UNORDERED_RE.match(line) is not None


def extract_unordered_item(line: str) -> str:
    match = _UNORDERED_EXTRACT_RE.match(line)
    assert match is not None, f"not an unordered item: {line!r}"
    return match.group(1)


def is_checked_item(line: str) -> bool:
    """``- [ ]``, ``- [x]`` or ``- [X]`` followed by whitespace."""
    return _CHECKED_RE.match(line) is not None


def extract_checked_item(line: str) -> tuple[bool, str]:
    """Return (checked, text) for a checked-list line."""
    match = _CHECKED_EXTRACT_RE.match(line)
    assert match is not None, f"not a checked item: {line!r}"
    return match.group(1) in "xX", match.group(2)
