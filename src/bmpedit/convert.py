from __future__ import annotations

from PIL import Image as PILImage

from .image import Image, Pixel


def to_pil(image: Image) -> PILImage.Image:
    """RGB Pillow image with the same pixels (row 0 on top)."""
    out = PILImage.new("RGB", (image.width, image.height))
    out.putdata([(p.red, p.green, p.blue) for row in image.pixels for p in row])
    return out


def from_pil(img: PILImage.Image) -> Image:
    """
    Build an Image from any Pillow image. Non-RGB modes (palette, RGBA, "1", L...)
    are converted to RGB first, since only 24-bit pixels are representable.
    """
    rgb = img if img.mode == "RGB" else img.convert("RGB")
    w, h = rgb.size
    px = rgb.load()
    image = Image.new(w, h)
    for y in range(h):
        row = image.pixels[y]
        for x in range(w):
            r, g, b = px[x, y]
            row[x] = Pixel(r, g, b)
    return image
