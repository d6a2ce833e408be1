"""HTML character reference table.

Named references come from the HTML5 table shipped with the standard
library; numeric references are decoded arithmetically. The named table
is built lazily, at most once, and is read-only afterwards.
"""

from __future__ import annotations

import html.entities
from functools import cache
from types import MappingProxyType

from tinta.parsing.charsets import PRIVATE_USE_FIRST, PRIVATE_USE_LAST

_REPLACEMENT = "\ufffd"


@cache
def entity_table() -> MappingProxyType[str, str]:
    """Name (without ``&`` and ``;``) -> decoded text."""
    return MappingProxyType(
        {name[:-1]: value for name, value in html.entities.html5.items() if name.endswith(";")}
    )


def decode_numeric(digits: str, *, hexadecimal: bool) -> str | None:
    """Decode the body of ``&#...;`` / ``&#x...;``.

    Zero, surrogates and values beyond U+10FFFF become U+FFFD. References
    into the private-use area are declined (None) so they stay literal and
    can never pose as a placeholder.
    """
    codepoint = int(digits, 16 if hexadecimal else 10)
    if codepoint == 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return _REPLACEMENT
    if PRIVATE_USE_FIRST <= codepoint <= PRIVATE_USE_LAST:
        return None
    return chr(codepoint)


def decode_entity(body: str) -> str | None:
    """Decode an entity body (text between ``&`` and ``;``).

    Returns:
        Decoded text, or None when the name is not a known reference.
    """
    if body.startswith(("#x", "#X")):
        return decode_numeric(body[2:], hexadecimal=True)
    if body.startswith("#"):
        return decode_numeric(body[1:], hexadecimal=False)
    return entity_table().get(body)
