"""Read, write and edit 24-bit uncompressed BMP images."""
from __future__ import annotations

__version__ = "1.0.0"

from .core import dumps, load, loads, save
from .errors import (
    BmpError,
    BmpIOError,
    FileOpenError,
    InvalidFormatError,
    OutOfRangeError,
    UnexpectedEndOfInput,
)
from .headers import FileHeader, InfoHeader
from .image import Image, Pixel, calculate_size, row_padding

__all__ = [
    "__version__",
    "load",
    "save",
    "loads",
    "dumps",
    "BmpError",
    "BmpIOError",
    "FileOpenError",
    "InvalidFormatError",
    "OutOfRangeError",
    "UnexpectedEndOfInput",
    "FileHeader",
    "InfoHeader",
    "Image",
    "Pixel",
    "calculate_size",
    "row_padding",
]
