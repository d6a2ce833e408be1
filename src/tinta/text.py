"""Extract readable text from Tinta blocks and documents.

Unlike ``Document.plain_text()``, which keeps offsets aligned with the runs,
this is meant for excerpts, search indexing and previews: images become
their alt text and items are separated by newlines.

Example:
    >>> from tinta import parse, extract_text
    >>> extract_text(parse("# Hello **World**\\n\\n![logo](a.png)"))
    'Hello World\\nlogo'
"""

from __future__ import annotations

from tinta.document import Document
from tinta.nodes import (
    Block,
    CheckedList,
    Code,
    Headline,
    OrderedList,
    Paragraph,
    Quote,
    Runs,
    UnorderedList,
    item_runs,
)


def _runs_text(runs: Runs) -> str:
    return "".join(run.style.image.alt if run.style.image is not None else run.text for run in runs)


def extract_text(node: Document | Block) -> str:
    """Readable text of a document or a single block.

    Blocks are separated by newlines, as are list, quote and code lines.
    """
    match node:
        case Document(blocks=blocks):
            return "\n".join(extract_text(block) for block in blocks)
        case Headline(runs=runs) | Paragraph(runs=runs):
            return _runs_text(runs)
        case Code(lines=lines):
            return "\n".join(lines)
        case UnorderedList() | OrderedList() | CheckedList() | Quote():
            return "\n".join(_runs_text(runs) for runs in item_runs(node))
    raise TypeError(f"cannot extract text from {type(node).__name__}")


__all__ = ["extract_text"]
