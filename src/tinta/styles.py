"""Style roles and presentation attribute bags.

The core never interprets presentation attributes. It only decides which
role applies to a span of text; the rendering collaborator owns what the
attribute bags mean (fonts, colours, sizes).

Roles:
    NORMAL, BOLD, ITALIC, MONOSPACE, QUOTE,
    HEADLINE, SUBHEADLINE, SUBSUBHEADLINE, SUBSUBSUBHEADLINE

Usage:
    >>> sheet = StyleSheet.default().with_overrides({"bold": {"weight": 800}})
    >>> sheet[StyleRole.BOLD]["weight"]
    800

Thread Safety:
    StyleSheet is immutable (read-only mapping proxies) and safe to share.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tinta.errors import StyleError

if TYPE_CHECKING:
    from tinta.runs import Style


class StyleRole(Enum):
    """Fixed enumeration of presentation roles."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    MONOSPACE = "monospace"
    QUOTE = "quote"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    SUBSUBHEADLINE = "subsubheadline"
    SUBSUBSUBHEADLINE = "subsubsubheadline"

    @classmethod
    def coerce(cls, key: StyleRole | str) -> StyleRole:
        """Accept a role member or its case-insensitive name."""
        if isinstance(key, StyleRole):
            return key
        if isinstance(key, str):
            try:
                return cls(key.lower())
            except ValueError:
                pass
        raise StyleError(key, "unknown style role")


_HEADLINE_ROLES: tuple[StyleRole, ...] = (
    StyleRole.HEADLINE,
    StyleRole.SUBHEADLINE,
    StyleRole.SUBSUBHEADLINE,
    StyleRole.SUBSUBSUBHEADLINE,
)


def headline_role(level: int) -> StyleRole:
    """Map a headline level (1-4) to its role; out-of-range levels clamp."""
    index = min(max(level, 1), len(_HEADLINE_ROLES)) - 1
    return _HEADLINE_ROLES[index]


# Built-in defaults. Keys are opaque to the core.
_DEFAULT_BAGS: dict[StyleRole, dict[str, Any]] = {
    StyleRole.NORMAL: {"font": "system", "size": 13},
    StyleRole.BOLD: {"weight": "bold"},
    StyleRole.ITALIC: {"slant": "italic"},
    StyleRole.MONOSPACE: {"font": "Menlo-Regular", "size": 11},
    StyleRole.QUOTE: {"font": "system", "size": 13, "color": "gray"},
    StyleRole.HEADLINE: {"font": "system", "size": 20, "weight": "bold"},
    StyleRole.SUBHEADLINE: {"font": "system", "size": 17, "weight": "bold"},
    StyleRole.SUBSUBHEADLINE: {"font": "system", "size": 15, "weight": "bold"},
    StyleRole.SUBSUBSUBHEADLINE: {"font": "system", "size": 13, "weight": "bold"},
}


class StyleSheet(Mapping[StyleRole, Mapping[str, Any]]):
    """Immutable role -> attribute bag mapping.

    Every role always has a bag; overrides replace whole bags rather than
    merging keys, so a caller can drop a default attribute by omitting it.

    """

    __slots__ = ("_bags",)

    def __init__(self, bags: Mapping[StyleRole, Mapping[str, Any]]) -> None:
        self._bags: Mapping[StyleRole, Mapping[str, Any]] = MappingProxyType(
            {role: MappingProxyType(dict(bags[role])) for role in StyleRole}
        )

    @classmethod
    def default(cls) -> StyleSheet:
        """Return the shared built-in style sheet."""
        return _DEFAULT_SHEET

    def with_overrides(
        self, overrides: Mapping[StyleRole | str, Mapping[str, Any]] | None
    ) -> StyleSheet:
        """Return a new sheet with the given roles replaced.

        Args:
            overrides: Role (member or name) -> attribute bag. None or empty
                returns self unchanged.

        Raises:
            StyleError: Unknown role, or a bag that is not a mapping.
        """
        if not overrides:
            return self
        bags = dict(self._bags)
        for key, bag in overrides.items():
            role = StyleRole.coerce(key)
            if not isinstance(bag, Mapping):
                raise StyleError(key, f"expected a mapping of attributes, got {type(bag).__name__}")
            bags[role] = bag
        return StyleSheet(bags)

    def resolve(self, base: StyleRole, style: Style) -> Mapping[str, Any]:
        """Layer the bags that apply to a run.

        The block's base role comes first, then BOLD, ITALIC and MONOSPACE for
        each flag set on the run's style. Later layers win on key clashes.
        """
        merged: dict[str, Any] = dict(self._bags[base])
        if style.bold:
            merged.update(self._bags[StyleRole.BOLD])
        if style.italic:
            merged.update(self._bags[StyleRole.ITALIC])
        if style.monospace and base is not StyleRole.MONOSPACE:
            merged.update(self._bags[StyleRole.MONOSPACE])
        return MappingProxyType(merged)

    def __getitem__(self, role: StyleRole) -> Mapping[str, Any]:
        return self._bags[role]

    def __iter__(self) -> Iterator[StyleRole]:
        return iter(self._bags)

    def __len__(self) -> int:
        return len(self._bags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleSheet):
            return NotImplemented
        return all(dict(self._bags[r]) == dict(other._bags[r]) for r in StyleRole)

    def __hash__(self) -> int:
        return hash(tuple(tuple(sorted(map(repr, self._bags[r].items()))) for r in StyleRole))

    def __repr__(self) -> str:
        bags = {role.value: dict(bag) for role, bag in self._bags.items()}
        return f"StyleSheet({bags!r})"


_DEFAULT_SHEET = StyleSheet(_DEFAULT_BAGS)


__all__ = ["StyleRole", "StyleSheet", "headline_role"]
