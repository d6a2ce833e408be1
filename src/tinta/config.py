"""ContextVar-based parse configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance (or per ``parse()`` call) and read
by the block assembler and every inline pass in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    # Through the top-level API
    md = Markdown(config=ParseConfig(decode_emoji=False))
    doc = md("Hello :wave:")

    # Direct use (advanced)
    with parse_config_context(ParseConfig(collapse_whitespace=False)):
        runs = format_inline("a   b")

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from tinta.errors import ConfigError
from tinta.parsing.charsets import RAW_LINK_TRAILING_PUNCTUATION
from tinta.styles import StyleSheet


def _check_format(option: str, template: str, **values: str) -> None:
    try:
        template.format(**values)
    except (AttributeError, IndexError, KeyError, ValueError) as e:
        raise ConfigError(option, f"bad link format {template!r}") from e


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        styles: Role -> attribute bag sheet attached to every Document
        issue_link_format: Link target for ``#123``; ``{number}`` is substituted
        commit_link_format: Link target for commit hashes; ``{sha}`` is substituted
        commit_display_length: Visible length of a linked commit hash
        commit_min_length: Shortest hex run treated as a commit hash
        commit_max_length: Longest hex run treated as a commit hash
        raw_link_trailing_punctuation: Characters left outside a bare URL's end
        collapse_whitespace: Collapse runs of spaces to one
        strip_comments: Remove ``<!-- ... -->`` before formatting
        decode_entities: Decode ``&name;`` / ``&#n;`` references
        decode_emoji: Decode ``:shortcode:`` emoji

    """

    styles: StyleSheet = field(default_factory=StyleSheet.default)
    issue_link_format: str = "issue/{number}"
    commit_link_format: str = "commit/{sha}"
    commit_display_length: int = 7
    commit_min_length: int = 7
    commit_max_length: int = 40
    raw_link_trailing_punctuation: str = RAW_LINK_TRAILING_PUNCTUATION
    collapse_whitespace: bool = True
    strip_comments: bool = True
    decode_entities: bool = True
    decode_emoji: bool = True

    def __post_init__(self) -> None:
        """Reject values that would make parsing fail.

        Raises:
            ConfigError: Commit length bounds are out of order or below 1, or
                a link format names a placeholder other than its own.
        """
        if not 1 <= self.commit_min_length <= self.commit_max_length:
            raise ConfigError(
                "commit_min_length",
                f"bounds {self.commit_min_length}..{self.commit_max_length} are out of order",
            )
        if self.commit_display_length < 1:
            raise ConfigError("commit_display_length", "must be at least 1")
        _check_format("issue_link_format", self.issue_link_format, number="1")
        _check_format("commit_link_format", self.commit_link_format, sha="0" * 7)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ParseConfig:
        """Create ParseConfig from a dictionary.

        Unknown keys are silently ignored. A ``styles`` entry may be a
        StyleSheet or a mapping of role names to attribute bags, which is
        layered over the built-in defaults.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "decode_emoji": False,
            ...     "styles": {"bold": {"weight": 900}},
            ...     "unknown_key": "ignored",
            ... })
            >>> config.decode_emoji
            False

        Raises:
            StyleError: The ``styles`` mapping names an unknown role.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        styles = filtered.get("styles")
        if styles is not None and not isinstance(styles, StyleSheet):
            filtered["styles"] = StyleSheet.default().with_overrides(styles)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "tinta_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the active parse configuration for this thread/context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Thread Safety:
        Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration singleton."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Use ``config`` for the duration of the block.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(decode_emoji=False)):
        ...     doc = parse(":wave:")
        >>> doc.plain_text()
        ':wave:'

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
