"""Plain-text renderer: the reference rendering surface.

Shows how a consumer applies presentation hints: item prefixes come from
``BlockHints.item_hints``, blocks are separated by a blank line, items and
code lines by a newline, and images are labelled with their alt text.

Example:
    >>> from tinta import parse
    >>> PlainTextRenderer().render(parse("# Title\\n\\n1. one\\n2. two"))
    'Title\\n\\n1. one\\n2. two\\n'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinta.nodes import Code, Headline, Paragraph, item_runs

if TYPE_CHECKING:
    from tinta.document import Document
    from tinta.hints import BlockHints
    from tinta.nodes import Block, Runs


class PlainTextRenderer:
    """Render a Document as readable plain text.

    Thread Safety:
        Stateless; each render() builds its own output list.
    """

    __slots__ = ("_image_label",)

    def __init__(self, image_label: str = "[image: {alt}]") -> None:
        self._image_label = image_label

    def render(self, document: Document) -> str:
        parts = [
            self._render_block(block, hints)
            for block, hints in zip(document.blocks, document.hints, strict=True)
        ]
        return "\n\n".join(parts) + "\n" if parts else ""

    def _render_block(self, block: Block, hints: BlockHints) -> str:
        match block:
            case Headline(runs=runs) | Paragraph(runs=runs):
                return self._render_runs(runs)
            case Code(lines=lines):
                return "\n".join(lines)
            case _:
                items = item_runs(block)
                return "\n".join(
                    item.prefix + self._render_runs(runs)
                    for item, runs in zip(hints.item_hints, items, strict=True)
                )

    def _render_runs(self, runs: Runs) -> str:
        out: list[str] = []
        for run in runs:
            image = run.style.image
            if image is not None:
                out.append(self._image_label.format(alt=image.alt, url=image.url))
            else:
                out.append(run.text)
        return "".join(out)
