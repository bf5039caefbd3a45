"""textreader exception hierarchy.

Only construction can fail. Reading past the end and rewinding without a
pending snapshot are ordinary outcomes, not errors.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "SourceDecodeError",
    "SourceTooLargeError",
    "TextReaderError",
]


class TextReaderError(Exception):
    """Base exception for all textreader errors."""


class SourceDecodeError(TextReaderError, ValueError):
    """Input could not be decoded into Unicode scalar values.

    Raised for bytes that are invalid in the requested encoding and for
    strings holding lone surrogates. The underlying ``UnicodeError`` is
    chained as ``__cause__``.

    Attributes:
        encoding: Encoding used for decoding (or validation of a str)
        offset: Offset of the first offending unit (byte for bytes input,
            character for str input)
    """

    def __init__(self, message: str, *, encoding: str, offset: int) -> None:
        """Initialize SourceDecodeError.

        Args:
            message: Human-readable description
            encoding: Encoding in effect
            offset: Offset of the first offending unit
        """
        super().__init__(message)
        self.encoding = encoding
        self.offset = offset


class SourceTooLargeError(TextReaderError, ValueError):
    """Decoded input exceeds the configured character limit.

    Attributes:
        size: Decoded length in characters
        limit: Configured maximum
    """

    def __init__(self, size: int, limit: int) -> None:
        msg = f"Source length {size} exceeds maximum of {limit} characters"
        super().__init__(msg)
        self.size = size
        self.limit = limit
