"""
verlex: scanner for version constraint expressions.

Tokenizes the small comparison language used to pin versions:
comma-joined ``field OP version`` terms with trailing ``#`` comments.

Quick Start:
    >>> from verlex import Scanner, TokenKind
    >>> scanner = Scanner("pkg >= 1.2, other != 3 # note")
    >>> kind, lexeme = scanner.scan()
    >>> kind, lexeme
    (<TokenKind.IDENT: 3>, 'pkg')

    >>> # Or iterate lazily
    >>> from verlex import tokenize
    >>> [t.value for t in tokenize("a < 2")]
    ['a', '<', '2', '']

Error Handling:
    Scanning never raises on bad input. Unrecognized characters, and a
    lone "=" or "!", come back as ILLEGAL tokens for the caller to judge.
    Opt into ``ScanConfig(strict=True)`` to have iteration raise
    IllegalTokenError instead.
"""

from collections.abc import Iterator

from verlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from verlex.errors import ConfigError, IllegalTokenError, PushbackError, VerlexError
from verlex.lexer import Scanner, SourceReader
from verlex.lexer.reader import TextSource
from verlex.location import SourceLocation
from verlex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: str | TextSource,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Lazily tokenize source, ending with the EOF token.

    Args:
        source: Constraint text or a text stream
        source_file: Optional source file path for locations and errors
        config: Iteration policies; defaults to the active ScanConfig

    Returns:
        Forward-only iterator of tokens
    """
    return Scanner(source, source_file=source_file, config=config).tokenize()


def scan_all(
    source: str | TextSource,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Tokenize source into a list, EOF included.

    Example:
        >>> [t.kind.name for t in scan_all("x,y")]
        ['IDENT', 'COMMA', 'IDENT', 'EOF']
    """
    return list(tokenize(source, source_file=source_file, config=config))


__all__ = [
    "__version__",
    # Scanning
    "Scanner",
    "SourceReader",
    "scan_all",
    "tokenize",
    # Tokens
    "SourceLocation",
    "Token",
    "TokenKind",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "ConfigError",
    "IllegalTokenError",
    "PushbackError",
    "VerlexError",
]
