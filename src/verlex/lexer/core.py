"""State-machine scanner for version constraint expressions.

Tokenizes text such as ``pkg >= 1.2, other != 3 # pinned`` one token per
``scan()`` call. The scanner reads a character at a time and uses a single
character of look-ahead, pushed back when it does not extend the token.

No regex, no backtracking beyond one character. Bad input never raises:
anything unrecognized becomes an ILLEGAL token.

Thread Safety:
Scanner instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from verlex.config import ScanConfig, get_scan_config
from verlex.errors import IllegalTokenError
from verlex.lexer.classifiers import is_letter, is_version_char, is_whitespace
from verlex.lexer.reader import EOF_CHAR, SourceReader, TextSource
from verlex.tokens import Token, TokenKind
from verlex.utils.logger import get_logger

logger = get_logger(__name__)

# First character -> (kind when "=" follows, kind otherwise)
OPERATORS: dict[str, tuple[TokenKind, TokenKind]] = {
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER_THAN),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS_THAN),
    "=": (TokenKind.EQUAL, TokenKind.ILLEGAL),
    "!": (TokenKind.NOT_EQUAL, TokenKind.ILLEGAL),
}


class Scanner:
    """Pull-based scanner producing one Token per ``scan()`` call.

    Usage:
            >>> scanner = Scanner("x >= 1.0")
            >>> for token in scanner:
            ...     print(token)
        Token(IDENT, 'x', 1:1)
        Token(GREATER_EQUAL, '>=', 1:3)
        Token(VERSION, '1.0', 1:6)
        Token(EOF, '', 1:9)

    Once EOF has been returned, every further ``scan()`` returns EOF again
    without touching the source.

    Thread Safety:
        Scanner instances are single-use. Create one per source.
        A single instance must not be driven from several threads.

    """

    __slots__ = ("_reader", "_config", "_source_file")

    def __init__(
        self,
        source: str | TextSource,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner over a string or text stream.

        Args:
            source: Constraint text, or a stream read lazily
            source_file: Optional source file path for locations and errors
            config: Iteration policies; defaults to the active ScanConfig
        """
        self._config = config if config is not None else get_scan_config()
        self._source_file = source_file
        self._reader = SourceReader(
            source,
            source_file=source_file,
            chunk_size=self._config.chunk_size,
        )

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def source_error(self) -> OSError | ValueError | None:
        """Stream fault that ended input early, or None after a clean end."""
        return self._reader.error

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF.

        Applies the config's iteration policies: ``skip_comments`` drops
        COMMENT tokens, ``strict`` raises on the first ILLEGAL token.

        Yields:
            Token objects one at a time

        Raises:
            IllegalTokenError: In strict mode, on an ILLEGAL token.
        """
        skip_comments = self._config.skip_comments
        strict = self._config.strict
        while True:
            token = self.scan()
            kind = token.kind
            if kind is TokenKind.EOF:
                yield token
                return
            if kind is TokenKind.COMMENT and skip_comments:
                continue
            if kind is TokenKind.ILLEGAL and strict:
                logger.debug("Rejecting illegal token %r at %s", token.value, token.location)
                raise IllegalTokenError(token)
            yield token

    def scan(self) -> Token:
        """Scan the next token.

        Returns:
            The next Token; unpacks as ``(kind, lexeme)``.
        """
        reader = self._reader

        lineno, col = reader.lineno, reader.col
        ch = reader.read()
        while is_whitespace(ch):
            lineno, col = reader.lineno, reader.col
            ch = reader.read()

        if is_letter(ch):
            return self._make_token(TokenKind.IDENT, self._scan_run(ch, is_letter), lineno, col)

        if is_version_char(ch):
            return self._make_token(
                TokenKind.VERSION, self._scan_run(ch, is_version_char), lineno, col
            )

        match ch:
            case "":
                return self._make_token(TokenKind.EOF, "", lineno, col)

            case ">" | "<" | "=" | "!":
                kind, value = self._scan_operator(ch)
                return self._make_token(kind, value, lineno, col)

            case ",":
                return self._make_token(TokenKind.COMMA, ch, lineno, col)

            case "#":
                return self._make_token(TokenKind.COMMENT, self._scan_comment(), lineno, col)

            case _:
                return self._make_token(TokenKind.ILLEGAL, ch, lineno, col)

    # =========================================================================
    # Sub-scanners
    # =========================================================================

    def _scan_run(self, first: str, accept: Callable[[str], bool]) -> str:
        """Consume a maximal run of accepted characters starting with first.

        The terminating character is pushed back for the next scan.
        """
        reader = self._reader
        chars = [first]
        ch = reader.read()
        while accept(ch):
            chars.append(ch)
            ch = reader.read()
        reader.pushback()
        return "".join(chars)

    def _scan_operator(self, first: str) -> tuple[TokenKind, str]:
        """Resolve a one- or two-character operator by one look-ahead.

        A character other than "=" is pushed back intact, so ``a=b`` lexes
        as IDENT, ILLEGAL("="), IDENT.
        """
        paired, single = OPERATORS[first]
        if self._reader.read() == "=":
            return paired, first + "="
        self._reader.pushback()
        return single, first

    def _scan_comment(self) -> str:
        """Consume the rest of the line after "#".

        The terminating newline is consumed and dropped.
        """
        reader = self._reader
        chars = []
        ch = reader.read()
        while ch != "\n" and ch != EOF_CHAR:
            chars.append(ch)
            ch = reader.read()
        return "".join(chars)

    def _make_token(self, kind: TokenKind, value: str, lineno: int, col: int) -> Token:
        return Token(
            kind=kind,
            value=value,
            lineno=lineno,
            col=col,
            source_file=self._source_file,
        )
