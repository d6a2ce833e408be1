"""Segmenter states.

This module defines the finite state machine states for the block
segmenter.
"""

from __future__ import annotations

from enum import Enum, auto


class SegmentState(Enum):
    """Block segmenter states.

    The segmenter switches between states based on the current line:
    - NONE: Between blocks, classifying the next line
    - PARAGRAPH: Accumulating soft-wrapped paragraph lines
    - CODE: Inside a fenced code block (only a closing fence matters)
    - HEADLINE: Single-line block, emitted immediately, never held
    - ORDERED_LIST / UNORDERED_LIST / CHECKED_LIST: Accumulating items
    - QUOTE: Accumulating quote lines

    """

    NONE = auto()
    PARAGRAPH = auto()
    CODE = auto()
    HEADLINE = auto()
    ORDERED_LIST = auto()
    UNORDERED_LIST = auto()
    CHECKED_LIST = auto()
    QUOTE = auto()
