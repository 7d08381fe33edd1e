"""Character classifiers for the verlex scanner.

Pure predicates that route the scanner's state machine. All sets are
frozensets for O(1) membership tests and are ASCII-only: the constraint
grammar has no Unicode identifiers or digits.

Every predicate returns False for the end-of-input sentinel (the empty
string), so scanning loops stop at exhaustion without a separate check.
"""

from __future__ import annotations

import string

# Space, tab and newline only; "\r" is not whitespace in this grammar
WHITESPACE: frozenset[str] = frozenset(" \t\n")

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

# Digits and the period, so "1.2.3" stays a single token
VERSION_CHARS: frozenset[str] = frozenset(string.digits + ".")


def is_whitespace(ch: str) -> bool:
    """Check if ch separates tokens without being emitted."""
    return ch in WHITESPACE


def is_letter(ch: str) -> bool:
    """Check if ch is an ASCII letter (no digits, no underscore)."""
    return ch in LETTERS


def is_version_char(ch: str) -> bool:
    """Check if ch may appear in a version literal (digit or period)."""
    return ch in VERSION_CHARS


__all__ = [
    "LETTERS",
    "VERSION_CHARS",
    "WHITESPACE",
    "is_letter",
    "is_version_char",
    "is_whitespace",
]
