"""textreader - character cursor with line/column tracking.

A low-level building block for hand-written lexers and parsers. Decodes a
text once into Unicode characters and reads it forward one character at a
time, with non-consuming lookahead, a single step of rewind, and exact
position/line/column bookkeeping for diagnostics.

Public API:
    Cursor - Stateful character reader (next, peek, back, this_line)
    Location - Immutable (position, line, column) value
    locate - Line/column for an arbitrary character offset
    line_bounds - Offsets of the line containing a character offset
    format_location - Human-readable "line:column"
    get_error_context - Source line with a marker under a column

Exceptions:
    TextReaderError - Base exception class
    SourceDecodeError - Input is not valid Unicode text
    SourceTooLargeError - Input exceeds the configured size limit
"""

from .cursor import Cursor
from .errors import SourceDecodeError, SourceTooLargeError, TextReaderError
from .position import Location, format_location, get_error_context, line_bounds, locate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textreader")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "Location",
    "SourceDecodeError",
    "SourceTooLargeError",
    "TextReaderError",
    "__version__",
    "format_location",
    "get_error_context",
    "line_bounds",
    "locate",
]
