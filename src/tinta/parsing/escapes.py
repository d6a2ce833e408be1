"""Escape table and protected-span handling.

Backslash-escaped punctuation is hidden behind private-use placeholders
before any inline pattern runs, so ``\\*`` can never open emphasis. After
all passes ``unescape`` turns the placeholders into the literal punctuation;
code spans use ``restore_escapes``, which gives back the source text
exactly.

HTML comments are removed before hiding and never come back.

Example:
    >>> hidden = hide_escapes(r"a \\*b\\*")
    >>> "*" in hidden
    False
    >>> unescape(hidden)
    'a *b*'
    >>> restore_escapes(hidden)
    'a \\\\*b\\\\*'

Thread Safety:
    The tables are module-level constants, built once at import.

"""

from __future__ import annotations

import re
from types import MappingProxyType

from tinta.parsing.charsets import (
    ESCAPABLE,
    ESCAPE_BASE,
    ESCAPE_CLOSE,
    ESCAPE_OPEN,
)

# punctuation -> placeholder, placeholder index char -> punctuation
ESCAPE_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {char: f"{ESCAPE_OPEN}{chr(ESCAPE_BASE + i)}{ESCAPE_CLOSE}" for i, char in enumerate(ESCAPABLE)}
)
_UNESCAPE_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {chr(ESCAPE_BASE + i): char for i, char in enumerate(ESCAPABLE)}
)

_ESCAPE_RE = re.compile(r"\\([" + re.escape(ESCAPABLE) + r"])")
_PLACEHOLDER_RE = re.compile(
    f"{ESCAPE_OPEN}([{chr(ESCAPE_BASE)}-{chr(ESCAPE_BASE + len(ESCAPABLE) - 1)}]){ESCAPE_CLOSE}"
)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def strip_comments(text: str) -> str:
    """Remove ``<!-- ... -->``. An unterminated comment is left as text.

    Repeats until no complete comment remains.
    """
    while True:
        stripped = _COMMENT_RE.sub("", text)
        if stripped == text:
            return text
        text = stripped


def hide_escapes(text: str) -> str:
    """Replace each ``\\<punct>`` with its placeholder."""
    return _ESCAPE_RE.sub(lambda m: ESCAPE_TABLE[m.group(1)], text)


def unescape(text: str) -> str:
    """Replace placeholders with the literal punctuation."""
    return _PLACEHOLDER_RE.sub(lambda m: _UNESCAPE_TABLE[m.group(1)], text)


def restore_escapes(text: str) -> str:
    """Replace placeholders with their original backslash form."""
    return _PLACEHOLDER_RE.sub(lambda m: "\\" + _UNESCAPE_TABLE[m.group(1)], text)
