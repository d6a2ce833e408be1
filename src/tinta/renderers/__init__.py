"""Tinta renderers.

Renderers turn a parsed Document into an output format. Layout, fonts and
image display belong to the surface that consumes them.

Available Renderers:
- PlainTextRenderer: readable text with item prefixes and image labels

Thread Safety:
Renderers keep no state between render() calls and are safe to share.

"""

from tinta.renderers.plain import PlainTextRenderer
from tinta.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "PlainTextRenderer"]
