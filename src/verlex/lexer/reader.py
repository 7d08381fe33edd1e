"""Character source with single-slot pushback.

SourceReader hands out one character per ``read()`` from either an
in-memory string or a text stream, and can give back the most recently
read character with ``pushback()``.

Exhaustion and stream faults look the same to the caller: both produce
``EOF_CHAR``. A fault is logged and kept on ``reader.error`` for callers
that need to tell them apart.

Thread Safety:
Readers are single-owner. All state is instance-local; no locking.

"""

from __future__ import annotations

from typing import Protocol

from verlex.config import DEFAULT_CHUNK_SIZE, check_chunk_size
from verlex.errors import PushbackError
from verlex.utils.logger import get_logger

logger = get_logger(__name__)

# End-of-input sentinel; never a real character
EOF_CHAR = ""


class TextSource(Protocol):
    """Anything with a text ``read(size)``: files, StringIO, socket wrappers."""

    def read(self, size: int = -1, /) -> str: ...


class SourceReader:
    """Buffered character reader with one character of pushback.

    Usage:
            >>> reader = SourceReader(">x")
            >>> reader.read()
            '>'
            >>> reader.read()
            'x'
            >>> reader.pushback()
            >>> reader.read()
            'x'
            >>> reader.read()
            ''

    Position:
        ``lineno`` and ``col`` (1-indexed) name the next character to be
        read. Pushback moves them back to the pushed-back character.

    """

    __slots__ = (
        "_buffer",
        "_buf_pos",
        "_stream",
        "_chunk_size",
        "_source_file",
        "_pending",  # Pushed-back character, None when the slot is empty
        "_last",  # Most recent read, None once pushed back
        "_lineno",
        "_col",
        "_prev_lineno",
        "_prev_col",
        "_exhausted",
        "error",
    )

    def __init__(
        self,
        source: str | TextSource,
        *,
        source_file: str | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize reader over a string or text stream.

        Args:
            source: Source text, or a stream read lazily in chunks
            source_file: Optional source file path for locations
            chunk_size: Characters requested per stream read

        Raises:
            ConfigError: If chunk_size is not a positive integer.
        """
        check_chunk_size(chunk_size)
        if isinstance(source, str):
            self._buffer = source
            self._stream: TextSource | None = None
        else:
            self._buffer = ""
            self._stream = source
        self._buf_pos = 0
        self._chunk_size = chunk_size
        self._source_file = source_file

        self._pending: str | None = None
        self._last: str | None = None

        self._lineno = 1
        self._col = 1
        self._prev_lineno = 1
        self._prev_col = 1

        self._exhausted = False
        self.error: OSError | ValueError | None = None

    @property
    def lineno(self) -> int:
        """Line of the next character (1-indexed)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column of the next character (1-indexed)."""
        return self._col

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def exhausted(self) -> bool:
        """True once the end-of-input sentinel has been produced."""
        return self._exhausted

    def read(self) -> str:
        """Read the next character.

        Returns:
            The next character, or EOF_CHAR when the source is exhausted
            or the underlying stream failed.
        """
        if self._pending is not None:
            ch = self._pending
            self._pending = None
        else:
            ch = self._next_char()

        self._last = ch
        self._prev_lineno = self._lineno
        self._prev_col = self._col
        if ch == "\n":
            self._lineno += 1
            self._col = 1
        elif ch != EOF_CHAR:
            self._col += 1
        return ch

    def pushback(self) -> None:
        """Give back the most recently read character.

        The next ``read()`` returns it again. Pushing back the sentinel is
        allowed; the next read is the sentinel again.

        Raises:
            PushbackError: Nothing was read since the last pushback.
        """
        if self._last is None:
            raise PushbackError("pushback without a preceding read")
        self._pending = self._last
        self._last = None
        self._lineno = self._prev_lineno
        self._col = self._prev_col

    def _next_char(self) -> str:
        """Take one character from the buffer, refilling from the stream."""
        if self._buf_pos >= len(self._buffer) and not self._fill():
            self._exhausted = True
            return EOF_CHAR
        ch = self._buffer[self._buf_pos]
        self._buf_pos += 1
        return ch

    def _fill(self) -> bool:
        """Replace the buffer with the next chunk of the stream.

        Returns:
            True if new characters are available.
        """
        stream = self._stream
        if stream is None:
            return False

        try:
            chunk = stream.read(self._chunk_size)
        except (OSError, ValueError) as exc:
            # ValueError covers decode failures and reads from closed files
            logger.debug(
                "Read from %s failed; treating as end of input",
                self._source_file or "stream",
                exc_info=True,
            )
            self.error = exc
            chunk = ""

        if not chunk:
            # Never touch the stream again once it ran dry or failed
            self._stream = None
            return False

        self._buffer = chunk
        self._buf_pos = 0
        return True
