from __future__ import annotations

from .errors import InvalidFormatError
from .headers import INFO_HEADER_SIZE, SIGNATURE, TOTAL_HEADER_SIZE, FileHeader, InfoHeader


def check_compatible(header: FileHeader, info: InfoHeader) -> None:
    """
    Reject anything outside the single supported profile
    (24-bit, uncompressed, no palette). First failing check wins.

    file_size and image_size are not compared with the geometry: some editors
    append zero bytes after the pixel data, which would make valid files fail.
    """
    checks = (
        ("signature", header.signature, SIGNATURE),
        ("data_offset", header.data_offset, TOTAL_HEADER_SIZE),
        ("info header size", info.size, INFO_HEADER_SIZE),
        ("planes", info.planes, 1),
        ("compression", info.compression, 0),
        ("bits_per_pixel", info.bits_per_pixel, 24),
        ("colors_used", info.colors_used, 0),
        ("important_colors", info.important_colors, 0),
    )
    for name, actual, expected in checks:
        if actual != expected:
            if name == "signature":
                actual, expected = hex(actual), hex(expected)
            raise InvalidFormatError(
                f"Invalid or incompatible file: {name} is {actual}, expected {expected}. "
                "Only 24-bit uncompressed files are supported."
            )


def is_compatible(header: FileHeader, info: InfoHeader) -> bool:
    try:
        check_compatible(header, info)
    except InvalidFormatError:
        return False
    return True
