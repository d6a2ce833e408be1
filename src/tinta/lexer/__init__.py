"""Line-oriented block segmenter for Tinta.

Architecture:
lexer/
├── __init__.py          # Re-exports Segmenter, SegmentState, RawBlock
├── core.py              # Segmenter state machine
├── modes.py             # SegmentState enum
├── segments.py          # RawBlock value
└── classifiers/         # Pure per-line predicates and extractors
    ├── blank.py
    ├── fence.py
    ├── heading.py
    ├── list.py          # ordered, unordered, checked
    └── quote.py

Usage:
    >>> from tinta.lexer import segment
    >>> for block in segment("# Hello\\n\\nWorld"):
    ...     print(block.kind.name, block.lines)
    HEADLINE ('Hello',)
    PARAGRAPH ('World',)

"""

from tinta.lexer.core import Segmenter, segment
from tinta.lexer.modes import SegmentState
from tinta.lexer.segments import RawBlock

__all__ = ["RawBlock", "SegmentState", "Segmenter", "segment"]
