from __future__ import annotations

from typing import List

from .image import Image

DIVIDER = "=" * 40


def _num(value: int, hex_: bool) -> str:
    return f"{value:x}" if hex_ else str(value)


def _base_line(hex_: bool) -> str:
    return "Number base: hexadecimal" if hex_ else "Number base: decimal"


def format_metadata(image: Image, hex_: bool = False) -> str:
    """
    Human-readable dump of both headers.
    The signature is always shown in hex, everything else in the chosen base.
    """
    h, i = image.header, image.info_header
    fields = [
        ("File Size (Bytes)", h.file_size),
        ("Reserved Flags", h.reserved),
        ("Data Offset (Bytes)", h.data_offset),
    ]
    info_fields = [
        ("Info Header Size (Bytes)", i.size),
        ("Image Width (Pixels)", i.width),
        ("Image Height (Pixels)", i.height),
        ("Planes", i.planes),
        ("Bits Per Pixel", i.bits_per_pixel),
        ("Compression Type", i.compression),
        ("Compressed Image Size (Bytes)", i.image_size),
        ("Horizontal Resolution (Pixels/Meter)", i.x_pixels_per_meter),
        ("Vertical Resolution (Pixels/Meter)", i.y_pixels_per_meter),
        ("Number of Actually Used Colors", i.colors_used),
        ("Number of Important Colors", i.important_colors),
    ]
    lines: List[str] = [_base_line(hex_), "", "HEADER", DIVIDER]
    lines.append(f"Signature (hexadecimal): 0x{h.signature:x}")
    lines += [f"{label}: {_num(v, hex_)}" for label, v in fields]
    lines += ["", "INFO HEADER", DIVIDER]
    lines += [f"{label}: {_num(v, hex_)}" for label, v in info_fields]
    return "\n".join(lines) + "\n\n"


def format_pixels(image: Image, hex_: bool = False) -> str:
    """
    Per-row pixel dump (R G B per column) followed by the row padding.
    Output may be long for real images.
    """
    lines: List[str] = [_base_line(hex_), ""]
    for r, row in enumerate(image.pixels):
        lines.append(f"Row {r} (R/G/B)")
        lines.append("=" * 30)
        for c, px in enumerate(row):
            channels = " ".join(_num(v, hex_) for v in (px.red, px.green, px.blue))
            lines.append(f"Col {c}:\t\t{channels}")
        # 0-3 bytes, same in both bases
        lines.append(f"Padding Bytes: {image.padding}")
        lines.append("")
    return "\n".join(lines)
