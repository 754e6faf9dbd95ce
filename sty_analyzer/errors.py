# sty_analyzer/errors.py
"""Exceptions raised while decoding style files."""


class StyleParsingError(Exception):
    """Base class for all style decoding errors."""
    pass


class FormatError(StyleParsingError):
    """Raised when the file does not start with the style file magic."""
    pass


class TruncatedInput(StyleParsingError):
    """Raised when a read would run past the end of the buffer."""

    def __init__(self, requested: int, remaining: int, position: int):
        self.requested = requested
        self.remaining = remaining
        self.position = position
        super().__init__(
            f"Cannot read {requested} bytes at offset {position}: "
            f"only {remaining} remaining"
        )


class SizeMismatch(StyleParsingError):
    """Raised when a chunk length does not match its layout."""

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(f"{tag}: {message}")


class UnknownChunk(StyleParsingError):
    """Recorded when a chunk tag has no registered handler."""

    def __init__(self, tag: str, offset: int, size: int):
        self.tag = tag
        self.offset = offset
        self.size = size
        super().__init__(
            f"Unknown chunk {tag!r} at offset {offset} ({size} bytes skipped)"
        )


class IndexOutOfRange(StyleParsingError):
    """Raised when a palette, sprite or pixel index is outside its table."""
    pass
