from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO, Union

from .errors import BmpError, BmpIOError, FileOpenError
from .headers import (
    decode_file_header,
    decode_info_header,
    encode_file_header,
    encode_info_header,
)
from .image import Image, row_padding
from .ops import EditOptions, apply_edits
from .pixels import read_pixels, write_pixels
from .validate import check_compatible

PathLike = Union[str, os.PathLike]


def read_image(stream: BinaryIO) -> Image:
    header = decode_file_header(stream)
    info = decode_info_header(stream)
    check_compatible(header, info)
    padding = row_padding(info.width)
    pixels = read_pixels(stream, info, padding, header.data_offset)
    return Image(header, info, pixels, padding)


def write_image(image: Image, stream: BinaryIO) -> None:
    encode_file_header(image.header, stream)
    encode_info_header(image.info_header, stream)
    write_pixels(stream, image)


def load(path: PathLike) -> Image:
    """Read and decode a 24-bit uncompressed BMP file."""
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise FileOpenError(f"Failed to open file: {path} ({exc.strerror or exc})") from exc
    with f:
        return read_image(f)


def save(image: Image, path: PathLike) -> None:
    """
    Encode `image` and write it to `path`, replacing any existing file.
    The target is truncated on open, so a BmpIOError partway through
    leaves a partial file behind.
    """
    try:
        f = open(path, "wb")
    except OSError as exc:
        raise FileOpenError(f"Failed to open file: {path} ({exc.strerror or exc})") from exc
    with f:
        write_image(image, f)


def loads(data: bytes) -> Image:
    return read_image(io.BytesIO(data))


def dumps(image: Image) -> bytes:
    buf = io.BytesIO()
    write_image(image, buf)
    return buf.getvalue()


def default_output_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}_edited{input_path.suffix}")


def process_image(
    input_path: Path,
    output_path: Path | None,
    edits: EditOptions,
    verbose: bool = False,
) -> Image:
    """
    Load -> apply edits -> write. A .bmp output goes through `save`;
    any other suffix is handed to Pillow.
    """
    if not input_path.exists():
        raise FileOpenError(f"File not found: {input_path}")

    image = load(input_path)
    apply_edits(image, edits)

    out_path = output_path or default_output_path(input_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.suffix.lower() == ".bmp":
        save(image, out_path)
    else:
        from .convert import to_pil  # Pillow only needed for export

        try:
            to_pil(image).save(out_path)
        except ValueError as exc:
            raise BmpError(f"Unsupported output format: {out_path.suffix or out_path.name}") from exc
        except OSError as exc:
            raise BmpIOError(f"Error writing {out_path}: {exc}") from exc

    if verbose:
        print(f"Wrote {out_path} ({image.width}x{image.height}, {out_path.stat().st_size} bytes)")
    return image
