from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import OutOfRangeError
from .image import Image, Pixel

COLOR_MAX = 255


def _map_pixels(image: Image, fn) -> None:
    for row in image.pixels:
        for x, px in enumerate(row):
            row[x] = fn(px)


def _refresh_geometry(image: Image) -> None:
    # width/height changed: padding and file size follow
    image.padding = image.row_padding()
    image.header.file_size = image.calculate_size()


def invert_colors(image: Image) -> None:
    _map_pixels(
        image,
        lambda p: Pixel(COLOR_MAX - p.red, COLOR_MAX - p.green, COLOR_MAX - p.blue),
    )


def flip_horizontal(image: Image) -> None:
    for row in image.pixels:
        row.reverse()


def flip_vertical(image: Image) -> None:
    rows = image.pixels
    top, bottom = 0, len(rows) - 1
    while top < bottom:
        rows[top], rows[bottom] = rows[bottom], rows[top]
        top += 1
        bottom -= 1


def gray_value(red: int, green: int, blue: int) -> int:
    """
    Average of three channels, split into quotient and remainder parts.
    Same result as (r + g + b) // 3.
    """
    return (red // 3 + green // 3 + blue // 3) + (red % 3 + green % 3 + blue % 3) // 3


def grayscale(image: Image) -> None:
    def _gray(p: Pixel) -> Pixel:
        avg = gray_value(p.red, p.green, p.blue)
        return Pixel(avg, avg, avg)

    _map_pixels(image, _gray)


def isolate_red(image: Image) -> None:
    _map_pixels(image, lambda p: Pixel(p.red, 0, 0))


def isolate_green(image: Image) -> None:
    _map_pixels(image, lambda p: Pixel(0, p.green, 0))


def isolate_blue(image: Image) -> None:
    _map_pixels(image, lambda p: Pixel(0, 0, p.blue))


def sepia_pixel(p: Pixel) -> Pixel:
    """
    Microsoft's sepia matrix. Results are clamped to 255.0 and truncated;
    the coefficients are non-negative so there is no lower clamp.
    """
    r = 0.393 * p.red + 0.769 * p.green + 0.189 * p.blue
    g = 0.349 * p.red + 0.686 * p.green + 0.168 * p.blue
    b = 0.272 * p.red + 0.534 * p.green + 0.131 * p.blue
    return Pixel(int(min(r, 255.0)), int(min(g, 255.0)), int(min(b, 255.0)))


def sepia(image: Image) -> None:
    _map_pixels(image, sepia_pixel)


def crop(image: Image, x_begin: int, y_begin: int, x_end: int, y_end: int) -> None:
    """
    Keep columns [x_begin, x_end) and rows [y_begin, y_end).

    x_end/y_end must be valid indices (< width/height) but are used as
    exclusive bounds, so the last valid column/row is never kept.
    """
    w, h = image.width, image.height
    if not (0 <= x_begin < w and 0 <= x_end < w):
        raise OutOfRangeError("x_begin and x_end must be smaller than width")
    if not x_begin <= x_end:
        raise OutOfRangeError("x_begin must be smaller than or equal to x_end")
    if not (0 <= y_begin < h and 0 <= y_end < h):
        raise OutOfRangeError("y_begin and y_end must be smaller than height")
    if not y_begin <= y_end:
        raise OutOfRangeError("y_begin must be smaller than or equal to y_end")

    image.pixels = [row[x_begin:x_end] for row in image.pixels[y_begin:y_end]]
    image.info_header.width = x_end - x_begin
    image.info_header.height = y_end - y_begin
    _refresh_geometry(image)


def transpose(image: Image) -> None:
    """Row n becomes column n. File size may change because of padding."""
    w, h = image.width, image.height
    old = image.pixels
    image.pixels = [[old[row][col] for row in range(h)] for col in range(w)]
    image.info_header.width, image.info_header.height = h, w
    _refresh_geometry(image)


def rotate90_left(image: Image) -> None:
    transpose(image)
    flip_vertical(image)


def rotate90_right(image: Image) -> None:
    transpose(image)
    flip_horizontal(image)


_ISOLATE = {"red": isolate_red, "green": isolate_green, "blue": isolate_blue}
_ROTATE = {"left": rotate90_left, "right": rotate90_right}


@dataclass(frozen=True)
class EditOptions:
    crop: Tuple[int, int, int, int] | None = None  # (x_begin, y_begin, x_end, y_end)
    invert: bool = False
    grayscale: bool = False
    sepia: bool = False
    isolate: str | None = None  # "red" | "green" | "blue"
    flip_h: bool = False
    flip_v: bool = False
    transpose: bool = False
    rotate: str | None = None  # "left" (counterclockwise) | "right" (clockwise)


def apply_edits(image: Image, opts: EditOptions) -> None:
    """
    Deterministic edit order:
    crop → invert → grayscale → sepia → isolate → flip-h → flip-v → transpose → rotate
    """
    if opts.isolate is not None and opts.isolate not in _ISOLATE:
        raise ValueError(f"isolate must be one of red, green, blue; got {opts.isolate!r}")
    if opts.rotate is not None and opts.rotate not in _ROTATE:
        raise ValueError(f"rotate must be 'left' or 'right'; got {opts.rotate!r}")

    if opts.crop is not None:
        crop(image, *opts.crop)
    if opts.invert:
        invert_colors(image)
    if opts.grayscale:
        grayscale(image)
    if opts.sepia:
        sepia(image)
    if opts.isolate is not None:
        _ISOLATE[opts.isolate](image)
    if opts.flip_h:
        flip_horizontal(image)
    if opts.flip_v:
        flip_vertical(image)
    if opts.transpose:
        transpose(image)
    if opts.rotate is not None:
        _ROTATE[opts.rotate](image)
