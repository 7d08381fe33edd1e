"""Token and TokenKind definitions for the verlex scanner.

The scanner produces a stream of Token objects, one per ``scan()`` call.
Each Token pairs a kind with the exact lexeme it matched, plus the
position where the lexeme started.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

from verlex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    Whitespace is consumed by the scanner and has no kind of its own.

    """

    # Stream structure
    ILLEGAL = auto()
    EOF = auto()

    # Operands
    IDENT = auto()  # field
    VERSION = auto()  # 1.2.3

    # Comparison operators
    LESS_THAN = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER_THAN = auto()  # >
    GREATER_EQUAL = auto()  # >=
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=

    # Punctuation and trivia
    COMMA = auto()  # ,
    COMMENT = auto()  # # to end of line


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Behaves as a ``(kind, value)`` pair: it unpacks into two items and
    compares equal to any token with the same kind and lexeme, wherever
    that token was found.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: The exact lexeme matched in the source
        lineno: Start line number (1-indexed, 0 if unknown)
        col: Start column (1-indexed, 0 if unknown)
        source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    value: str
    lineno: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)
    source_file: str | None = field(default=None, compare=False)

    def __iter__(self) -> Iterator[TokenKind | str]:
        yield self.kind
        yield self.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.lineno}:{self.col})"

    @property
    def location(self) -> SourceLocation:
        """Source location spanning this token's lexeme.

        A comment's span includes its ``#`` marker, which is consumed
        but not kept in the lexeme.
        """
        if self.lineno == 0:
            return SourceLocation.unknown()
        width = len(self.value)
        if self.kind is TokenKind.COMMENT:
            width += 1
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            end_lineno=self.lineno,
            end_col_offset=self.col + width,
            source_file=self.source_file,
        )
