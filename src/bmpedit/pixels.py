from __future__ import annotations

import io
from typing import BinaryIO

from .errors import BmpIOError, UnexpectedEndOfInput
from .headers import InfoHeader, read_exact, write_all
from .image import BYTES_PER_PIXEL, Image, Pixel, PixelGrid


def _remaining(stream: BinaryIO) -> int:
    try:
        here = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(here)
    except OSError as exc:
        raise BmpIOError(f"Error measuring pixel data: {exc}") from exc
    return max(end - here, 0)


def read_pixels(stream: BinaryIO, info: InfoHeader, padding: int, data_offset: int) -> PixelGrid:
    """
    Read the pixel region. The file stores rows bottom-up with channels in
    B, G, R order; the returned grid is top-down and each row is followed
    on disk by `padding` bytes which are skipped.

    The declared geometry is checked against the bytes actually present
    before anything is allocated, so a bogus header fails with
    UnexpectedEndOfInput rather than exhausting memory.
    """
    width, height = info.width, info.height
    row_len = width * BYTES_PER_PIXEL
    try:
        stream.seek(data_offset)
    except OSError as exc:
        raise BmpIOError(f"Error seeking to pixel data: {exc}") from exc

    if height > 0 and row_len > 0:
        # the pad after the last row may be missing
        needed = (row_len + padding) * height - padding
        available = _remaining(stream)
        if available < needed:
            raise UnexpectedEndOfInput(
                f"Unexpected end of file in pixel data "
                f"({width}x{height} needs {needed} bytes, got {available})"
            )

    pixels: PixelGrid = []
    for row in range(height - 1, -1, -1):
        raw = read_exact(stream, row_len, f"pixel row {row}")
        pixels.append([
            Pixel(red=raw[i + 2], green=raw[i + 1], blue=raw[i])
            for i in range(0, row_len, BYTES_PER_PIXEL)
        ])
        # Like fseek: a missing pad after the last row is not an error.
        try:
            stream.seek(padding, io.SEEK_CUR)
        except OSError as exc:
            raise BmpIOError(f"Error skipping row padding: {exc}") from exc
    # rows were read bottom-up
    pixels.reverse()
    return pixels


def write_pixels(stream: BinaryIO, image: Image) -> None:
    pad = bytes(image.padding)
    for row in range(image.height - 1, -1, -1):
        out = bytearray()
        for px in image.pixels[row]:
            out += bytes((px.blue, px.green, px.red))
        out += pad
        write_all(stream, bytes(out), f"pixel row {row}")
