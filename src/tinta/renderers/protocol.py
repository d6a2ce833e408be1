"""DocumentRenderer protocol: what a rendering surface must provide.

A surface receives a whole Document and is free to interpret the block
hints and style sheet however its medium allows. ``PlainTextRenderer`` is
the reference consumer.

Example:
    from tinta.renderers.protocol import DocumentRenderer

    def preview(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tinta.document import Document


class DocumentRenderer(Protocol):
    """Structural type for renderers.

    Conforming classes need no base class, only a matching ``render``.

    """

    def render(self, document: Document) -> str:
        """Turn ``document`` into the surface's output text.

        Args:
            document: Parsed document, including its hints and style sheet

        """
        ...
