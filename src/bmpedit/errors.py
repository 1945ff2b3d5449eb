from __future__ import annotations


class BmpError(Exception):
    """User-facing one-line errors."""


class FileOpenError(BmpError):
    """The path could not be opened for reading or writing."""


class UnexpectedEndOfInput(BmpError, EOFError):
    """Fewer bytes were available than a field or region requires."""


class BmpIOError(BmpError):
    """A read or write fault not explained by end of input."""


class InvalidFormatError(BmpError):
    """Signature or profile check failed (only 24-bit uncompressed is supported)."""


class OutOfRangeError(BmpError, ValueError):
    """Crop bounds outside the image, or inverted."""
