from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .headers import TOTAL_HEADER_SIZE, FileHeader, InfoHeader

BYTES_PER_PIXEL = 3
DWORD = 4


@dataclass(frozen=True)
class Pixel:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= 255:
                raise ValueError(f"{name} must be an int in 0..255, got {v!r}")


PixelGrid = List[List[Pixel]]  # rows top-to-bottom, columns left-to-right


def row_padding(width: int) -> int:
    """Zero bytes appended to each row so it is a multiple of 4 bytes."""
    return (DWORD - (width * BYTES_PER_PIXEL) % DWORD) % DWORD


def calculate_size(width: int, height: int) -> int:
    """Total file size in bytes for a 24-bit image without palette."""
    return (BYTES_PER_PIXEL * width + row_padding(width)) * height + TOTAL_HEADER_SIZE


@dataclass
class Image:
    """
    A decoded 24-bit BMP: both headers, the pixel grid and the row padding.

    pixels[0] is the topmost visual row; the bottom-up order of the file
    is handled by the pixel reader/writer.
    """

    header: FileHeader = field(default_factory=FileHeader)
    info_header: InfoHeader = field(default_factory=InfoHeader)
    pixels: PixelGrid = field(default_factory=list)
    padding: int = 0

    @classmethod
    def new(cls, width: int, height: int, fill: Pixel = Pixel()) -> "Image":
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        header = FileHeader(file_size=calculate_size(width, height))
        info = InfoHeader(width=width, height=height)
        pixels = [[fill] * width for _ in range(height)]
        return cls(header, info, pixels, row_padding(width))

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height

    def row_padding(self) -> int:
        return row_padding(self.width)

    def calculate_size(self) -> int:
        return calculate_size(self.width, self.height)

    def copy(self) -> "Image":
        # Pixels are immutable values, copying the rows is enough.
        return Image(
            FileHeader(**vars(self.header)),
            InfoHeader(**vars(self.info_header)),
            [row[:] for row in self.pixels],
            self.padding,
        )
