"""Character-driven scanner for version constraint expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, SourceReader, classifiers
├── core.py              # Scanner state machine and operator table
├── reader.py            # SourceReader: buffered reads + single pushback
└── classifiers.py       # ASCII character predicates

Usage:
    >>> from verlex.lexer import Scanner
    >>> scanner = Scanner("a=b")
    >>> [tuple(token) for token in scanner]
    [(<TokenKind.IDENT: 3>, 'a'), (<TokenKind.ILLEGAL: 1>, '='), (<TokenKind.IDENT: 3>, 'b'), (<TokenKind.EOF: 2>, '')]

"""

from verlex.lexer.classifiers import is_letter, is_version_char, is_whitespace
from verlex.lexer.core import OPERATORS, Scanner
from verlex.lexer.reader import EOF_CHAR, SourceReader

__all__ = [
    "EOF_CHAR",
    "OPERATORS",
    "Scanner",
    "SourceReader",
    "is_letter",
    "is_version_char",
    "is_whitespace",
]
