"""Line classifiers for the Tinta block segmenter.

Each classifier is a pure predicate/extractor pair over one line of text.
None of them look at neighbouring lines; context lives in the segmenter.
"""

from tinta.lexer.classifiers.blank import is_blank
from tinta.lexer.classifiers.fence import extract_fence_info, is_fence_delimiter
from tinta.lexer.classifiers.heading import extract_heading, is_heading
from tinta.lexer.classifiers.list import (
    extract_checked_item,
    extract_ordered_item,
    extract_unordered_item,
    is_checked_item,
    is_ordered_item,
    is_unordered_item,
)
from tinta.lexer.classifiers.quote import extract_quote_line, is_quote_line

__all__ = [
    "extract_checked_item",
    "extract_fence_info",
    "extract_heading",
    "extract_ordered_item",
    "extract_quote_line",
    "extract_unordered_item",
    "is_blank",
    "is_checked_item",
    "is_fence_delimiter",
    "is_heading",
    "is_ordered_item",
    "is_quote_line",
    "is_unordered_item",
]
