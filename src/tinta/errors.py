"""Exception classes for Tinta.

Parsing itself never raises: malformed markup degrades to literal text.
These exceptions cover the surfaces around the parser: configuration and
style overrides, the editing host and the image collaborator.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class StyleError(TintaError):
    """Invalid style override.

    Raised when a style mapping names a role that does not exist or
    supplies something other than an attribute mapping.
    """

    def __init__(self, role: object, message: str) -> None:
        """Initialize style error.

        Args:
            role: The offending role key as supplied by the caller
            message: Description of the problem
        """
        self.role = role
        super().__init__(f"Style role {role!r}: {message}")


class ConfigError(TintaError):
    """Invalid ParseConfig value.

    Raised when the config is built, so a bad value never reaches a parse.
    """

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Config option {option!r}: {message}")


class EditError(TintaError):
    """Edit outside the bounds of an editable text host."""

    def __init__(self, start: int, end: int, length: int) -> None:
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"Edit range {start}..{end} is outside text of length {length}")


class ImageError(TintaError):
    """Image resolution failed.

    Wraps whatever the injected fetcher raised. Only the image collaborator
    sees these; the parsed document simply keeps an empty placeholder.
    """

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Image {url}: {message}")
