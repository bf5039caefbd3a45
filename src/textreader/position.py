"""Position utilities for text cursors.

Converts character offsets into the line/column pairs the cursor tracks, and
renders source context for diagnostics. Offsets count characters (Unicode
scalar values), never bytes.

Conventions match :class:`~textreader.cursor.Cursor`:
- Lines are 1-based
- Columns are 0-based (characters since the most recent newline)
- Only LF (\\n) starts a new line
"""

from dataclasses import dataclass

from .constants import NEWLINE

__all__ = [
    "Location",
    "format_location",
    "get_error_context",
    "line_bounds",
    "locate",
]


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable cursor state.

    Attributes:
        position: Characters consumed from the start of the text (0-indexed)
        line: Line number (1-indexed)
        column: Characters consumed since the most recent newline (0-indexed)

    Example:
        >>> loc = Location(position=5, line=2, column=1)
        >>> str(loc)
        '2:2'
    """

    position: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate Location invariants.

        Raises:
            ValueError: If position or column is negative, or line is less
                than 1 (lines are 1-indexed).
        """
        if self.position < 0:
            msg = f"Location.position must be >= 0, got {self.position}"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"Location.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"Location.column must be >= 0, got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return editor-style ``line:column`` (both 1-based)."""
        return format_location(self)


def _clamp(text: str, pos: int) -> int:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return min(pos, len(text))


def locate(text: str, pos: int) -> Location:
    """Compute the location a cursor reports after consuming pos characters.

    Args:
        text: Complete source text
        pos: Character offset in text (clamped to len(text))

    Returns:
        Location with 1-based line and 0-based column

    Raises:
        ValueError: If pos is negative

    Example:
        >>> locate("abc\\ndef", 3)
        Location(position=3, line=1, column=3)
        >>> locate("abc\\ndef", 4)
        Location(position=4, line=2, column=0)
    """
    pos = _clamp(text, pos)

    # O(1) memory: count and search in range instead of slicing
    line = text.count(NEWLINE, 0, pos) + 1
    last_newline = text.rfind(NEWLINE, 0, pos)
    column = pos - last_newline - 1 if last_newline >= 0 else pos

    return Location(position=pos, line=line, column=column)


def line_bounds(text: str, pos: int) -> tuple[int, int]:
    """Get the [start, end) offsets of the line containing pos.

    The line runs from just after the newline preceding pos (or the start of
    text) up to the next newline at or after pos (or the end of text). A
    position sitting on a newline therefore belongs to the line that newline
    terminates.

    Args:
        text: Complete source text
        pos: Character offset in text (clamped to len(text))

    Returns:
        (start, end) tuple; end is exclusive and never includes the newline

    Raises:
        ValueError: If pos is negative

    Example:
        >>> line_bounds("abc\\ndef", 3)
        (0, 3)
        >>> line_bounds("abc\\ndef", 4)
        (4, 7)
    """
    pos = _clamp(text, pos)

    start = text.rfind(NEWLINE, 0, pos) + 1
    end = text.find(NEWLINE, pos)
    if end == -1:
        end = len(text)

    return (start, end)


def format_location(location: Location, *, zero_based: bool = False) -> str:
    """Format location as human-readable line:column string.

    Args:
        location: Location to format
        zero_based: If True, both parts are 0-based; if False, both 1-based

    Returns:
        Position string like "2:1" (1-based) or "1:0" (0-based)

    Example:
        >>> loc = Location(position=4, line=2, column=0)
        >>> format_location(loc)
        '2:1'
        >>> format_location(loc, zero_based=True)
        '1:0'
    """
    if zero_based:
        return f"{location.line - 1}:{location.column}"
    return f"{location.line}:{location.column + 1}"


def get_error_context(text: str, pos: int, marker: str = "^") -> str:
    """Render the line containing pos with a marker under its column.

    Args:
        text: Complete source text
        pos: Character offset of the error (clamped to len(text))
        marker: String placed under the error column

    Returns:
        Two lines: the source line, then the marker line

    Raises:
        ValueError: If pos is negative

    Example:
        >>> print(get_error_context("let x = ;\\nnext", 8))
        let x = ;
                ^
    """
    pos = _clamp(text, pos)
    start, end = line_bounds(text, pos)

    return f"{text[start:end]}\n{' ' * (pos - start)}{marker}"
