from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .errors import BmpIOError, UnexpectedEndOfInput

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
TOTAL_HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

SIGNATURE = 0x424D  # "BM" read big-endian

# signature is handled separately: it is the only big-endian field
_FILE_HEADER_TAIL = struct.Struct("<III")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")


@dataclass
class FileHeader:
    signature: int = SIGNATURE
    file_size: int = 0
    reserved: int = 0
    data_offset: int = TOTAL_HEADER_SIZE


@dataclass
class InfoHeader:
    size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bits_per_pixel: int = 24
    compression: int = 0
    image_size: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    important_colors: int = 0


def read_exact(stream: BinaryIO, count: int, what: str) -> bytes:
    """
    Read exactly `count` bytes or raise:
    - UnexpectedEndOfInput if the stream runs dry
    - BmpIOError if the stream itself fails
    """
    try:
        data = stream.read(count)
    except OSError as exc:
        raise BmpIOError(f"Error reading {what}: {exc}") from exc
    if len(data) < count:
        raise UnexpectedEndOfInput(
            f"Unexpected end of file while reading {what} "
            f"(needed {count} bytes, got {len(data)})"
        )
    return data


def write_all(stream: BinaryIO, data: bytes, what: str) -> None:
    try:
        stream.write(data)
    except OSError as exc:
        raise BmpIOError(f"Error writing {what}: {exc}") from exc


def decode_file_header(stream: BinaryIO) -> FileHeader:
    raw = read_exact(stream, FILE_HEADER_SIZE, "file header")
    # Big-endian: b"BM" reads as 0x424D, not 0x4D42.
    (signature,) = struct.unpack(">H", raw[:2])
    file_size, reserved, data_offset = _FILE_HEADER_TAIL.unpack(raw[2:])
    return FileHeader(signature, file_size, reserved, data_offset)


def encode_file_header(header: FileHeader, stream: BinaryIO) -> None:
    raw = b"BM" + _FILE_HEADER_TAIL.pack(header.file_size, header.reserved, header.data_offset)
    write_all(stream, raw, "file header")


def decode_info_header(stream: BinaryIO) -> InfoHeader:
    raw = read_exact(stream, INFO_HEADER_SIZE, "info header")
    return InfoHeader(*_INFO_HEADER.unpack(raw))


def encode_info_header(info: InfoHeader, stream: BinaryIO) -> None:
    raw = _INFO_HEADER.pack(
        info.size,
        info.width,
        info.height,
        info.planes,
        info.bits_per_pixel,
        info.compression,
        info.image_size,
        info.x_pixels_per_meter,
        info.y_pixels_per_meter,
        info.colors_used,
        info.important_colors,
    )
    write_all(stream, raw, "info header")
