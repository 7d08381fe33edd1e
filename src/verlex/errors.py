"""Exception classes for verlex.

The scanner itself never raises on input content: unrecognized characters
become ILLEGAL tokens. These exceptions cover caller-side policies (strict
iteration), misuse of the reader, and invalid configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from verlex.tokens import Token


class VerlexError(Exception):
    """Base exception for all verlex errors.

    Subclass this for specific error categories.
    """

    pass


class IllegalTokenError(VerlexError):
    """An ILLEGAL token was rejected by strict iteration.

    Raised by ``Scanner.tokenize()`` when the active configuration has
    ``strict`` enabled. ``Scanner.scan()`` never raises this.
    """

    def __init__(self, token: Token) -> None:
        """Initialize from the offending token.

        Args:
            token: The ILLEGAL token that was rejected
        """
        self.token = token
        self.lineno = token.lineno or None
        self.col_offset = token.col or None
        self.source_file = token.source_file

        location = ""
        if self.source_file:
            location = f"{self.source_file}:"
        if self.lineno is not None:
            location += f"{self.lineno}:"
            if self.col_offset is not None:
                location += f"{self.col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}illegal token {token.value!r}")


class PushbackError(VerlexError):
    """Pushback was requested twice without an intervening read.

    The reader holds a single pending character; this signals a bug in
    the calling scanner, not bad input.
    """

    pass


class ConfigError(VerlexError):
    """Invalid configuration value."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Option '{option}': {message}")
