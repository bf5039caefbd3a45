"""Mutable character cursor for hand-written lexers.

Decodes a text once into its characters and walks it one character at a
time, keeping the bookkeeping a lexer needs for diagnostics.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Characters are Unicode scalar values, never bytes or code units
    - Decoding is eager: the whole text is validated at construction
    - End of input is a None result, not an exception
    - Exactly one step of rewind: next() saves, back() restores and forgets
    - Line and column are tracked incrementally (O(1) per character)

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, the \\r
      counts as an ordinary column character)
    - CR-only (Classic Mac, \\r): NOT treated as a line break

State:
    position: characters consumed so far (0..length)
    line: 1-based line number of the current position
    cursor: 0-based column, reset to 0 right after a newline is consumed
"""

import logging
from typing import TypeAlias

from .constants import DEFAULT_ENCODING, NEWLINE
from .errors import SourceDecodeError, SourceTooLargeError
from .position import Location, get_error_context, line_bounds

__all__ = ["Cursor"]

logger = logging.getLogger(__name__)

_Source: TypeAlias = str | bytes | bytearray | memoryview


def _decode(text: _Source, encoding: str) -> str:
    """Return text as a str of Unicode scalar values.

    Raises:
        SourceDecodeError: Undecodable bytes or a str with lone surrogates
        TypeError: text is neither str nor bytes-like
    """
    if isinstance(text, str):
        # Strict UTF-8 encoding rejects exactly the lone surrogates
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            msg = (
                f"Lone surrogate U+{ord(text[e.start]):04X} at character {e.start} "
                "is not a Unicode scalar value"
            )
            raise SourceDecodeError(msg, encoding="utf-8", offset=e.start) from e
        return text

    if isinstance(text, (bytes, bytearray, memoryview)):
        data = bytes(text)
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            msg = f"Cannot decode byte 0x{data[e.start]:02X} at offset {e.start} as {encoding}: {e.reason}"
            raise SourceDecodeError(msg, encoding=encoding, offset=e.start) from e

    msg = f"Cursor text must be str or bytes-like, got {type(text).__name__}"
    raise TypeError(msg)


class Cursor:
    """Stateful character reader with line/column tracking.

    Key Design Decisions:
        1. Mutable - lexers advance a single cursor in place
        2. Slots - no per-instance dict
        3. One snapshot - back() undoes the most recent next() only
        4. None at EOF - next() and peek() never raise

    Example:
        >>> cursor = Cursor("abc\\ndef")
        >>> cursor.next()
        'a'
        >>> (cursor.position, cursor.line, cursor.cursor)
        (1, 1, 1)
        >>> cursor.back().peek()
        'a'
        >>> cursor.this_line()
        'abc'

    Thread Safety:
        Not thread-safe. Each cursor belongs to one caller; share it across
        threads only behind an external lock.
    """

    __slots__ = ("_column", "_length", "_line", "_position", "_snapshot", "_text")

    def __init__(
        self,
        text: _Source,
        *,
        encoding: str = DEFAULT_ENCODING,
        max_source_size: int | None = None,
    ) -> None:
        """Decode text and position the cursor at its first character.

        Args:
            text: Source text. Bytes-like input is decoded with encoding.
            encoding: Codec for bytes-like input (default: UTF-8)
            max_source_size: Maximum length in characters. None or 0 (the
                             default) means no limit; pass MAX_SOURCE_SIZE
                             when reading untrusted input.

        Raises:
            SourceDecodeError: If text cannot be decoded into Unicode scalar values
            SourceTooLargeError: If the decoded text exceeds max_source_size
            TypeError: If text is neither str nor bytes-like
            ValueError: If max_source_size is negative
        """
        if max_source_size is not None and max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {max_source_size}"
            raise ValueError(msg)

        chars = _decode(text, encoding)
        if max_source_size and len(chars) > max_source_size:
            raise SourceTooLargeError(len(chars), max_source_size)

        self._text = chars
        self._length = len(chars)
        self._position = 0
        self._line = 1
        self._column = 0
        # (position, line, column) before the most recent next()
        self._snapshot: tuple[int, int, int] | None = None

        logger.debug("Cursor created over %d characters", self._length)

    def __repr__(self) -> str:
        return (
            f"Cursor(length={self._length}, text={self._text!r}, "
            f"position={self._position}, line={self._line}, column={self._column})"
        )

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> str:
        """Consume the next character, raising StopIteration at the end.

        Bookkeeping is identical to next(), so `for ch in cursor:` leaves
        the cursor at the end with line and column up to date.
        """
        ch = self.next()
        if ch is None:
            raise StopIteration
        return ch

    @property
    def text(self) -> str:
        """Decoded characters."""
        return self._text

    @property
    def length(self) -> int:
        """Total character count."""
        return self._length

    @property
    def position(self) -> int:
        """Characters consumed so far."""
        return self._position

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        return self._line

    @property
    def cursor(self) -> int:
        """Column within the current line (0-indexed)."""
        return self._column

    @property
    def column(self) -> int:
        """Alias of cursor."""
        return self._column

    @property
    def location(self) -> Location:
        """Current (position, line, column) as an immutable value."""
        return Location(position=self._position, line=self._line, column=self._column)

    def has_next(self) -> bool:
        """Check whether another character can be consumed.

        Note: This is the loop condition for exhaustive traversal:
              `while cursor.has_next(): cursor.next()`
        """
        return self._position < self._length

    def peek(self) -> str | None:
        """Get the next character without consuming it.

        Returns:
            Character at the current position, or None at end of input

        Note:
            Idempotent. Does not touch the rewind snapshot, so
            `cursor.back().peek()` yields the character just un-read.
        """
        if self._position >= self._length:
            return None
        return self._text[self._position]

    def next(self) -> str | None:
        """Consume and return the next character.

        Saves the current state as the rewind snapshot, then advances.
        Consuming a newline moves to column 0 of the following line.

        Returns:
            The consumed character, or None at end of input (state unchanged)

        Example:
            >>> cursor = Cursor("a\\nb")
            >>> cursor.next(), cursor.next()
            ('a', '\\n')
            >>> (cursor.line, cursor.cursor)
            (2, 0)
        """
        if self._position >= self._length:
            return None

        ch = self._text[self._position]
        self._snapshot = (self._position, self._line, self._column)
        self._position += 1

        if ch == NEWLINE:
            self._line += 1
            self._column = 0
        else:
            self._column += 1

        return ch

    def back(self) -> "Cursor":
        """Undo the most recent next().

        Restores position, line and column saved by next() and discards the
        snapshot. A second back() in a row, or back() before any next(), is
        a no-op.

        Returns:
            This cursor, for chaining: `cursor.back().peek()`
        """
        if self._snapshot is None:
            logger.debug("back() ignored at position %d: no pending snapshot", self._position)
            return self

        self._position, self._line, self._column = self._snapshot
        self._snapshot = None
        return self

    def reset(self) -> "Cursor":
        """Rewind to the first character and discard the snapshot.

        Returns:
            This cursor, for chaining
        """
        self._position = 0
        self._line = 1
        self._column = 0
        self._snapshot = None
        return self

    def this_line(self) -> str | None:
        """Get the full text of the line containing the current position.

        The line is delimited by the newline before the position (or the
        start of text) and the next newline at or after it (or the end of
        text). Neither newline is included. Does not consume anything.

        Returns:
            Current line text ("" for an empty line), or None if the cursor
            holds no text at all

        Example:
            >>> cursor = Cursor("abc\\ndef")
            >>> for _ in range(3):
            ...     _ = cursor.next()
            >>> cursor.this_line()  # Sitting on the newline
            'abc'
            >>> _ = cursor.next()
            >>> cursor.this_line()
            'def'
        """
        if not self._length:
            return None
        start, end = line_bounds(self._text, self._position)
        return self._text[start:end]

    def error_context(self, marker: str = "^") -> str:
        """Render the current line with a marker under the current column.

        Example:
            >>> cursor = Cursor("x = @")
            >>> for _ in range(4):
            ...     _ = cursor.next()
            >>> print(cursor.error_context())
            x = @
                ^
        """
        return get_error_context(self._text, self._position, marker)
