"""Shared constants for textreader.

Single source of truth for the values the cursor and the position helpers
agree on:
- Line delimiter: the only character that starts a new line
- Decoding: encoding applied to bytes-like input
- Input limits: opt-in memory bound on the decoded character sequence

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_ENCODING",
    "MAX_SOURCE_SIZE",
    "NEWLINE",
]

# ============================================================================
# LINE DELIMITER
# ============================================================================

# Only LF starts a new line. CR is an ordinary column character, so CRLF text
# still counts lines correctly and CR-only text is a single line.
NEWLINE: str = "\n"

# ============================================================================
# DECODING
# ============================================================================

# Applied with errors="strict" when the cursor is built from bytes.
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Suggested max_source_size for untrusted input, in characters (10 Mi).
# Cursor applies no limit unless one is passed explicitly.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
