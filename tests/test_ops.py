import unittest

from bmpedit.errors import OutOfRangeError
from bmpedit.image import Image, Pixel, calculate_size
from bmpedit.ops import (
    EditOptions,
    apply_edits,
    crop,
    flip_horizontal,
    flip_vertical,
    gray_value,
    grayscale,
    invert_colors,
    isolate_blue,
    isolate_green,
    isolate_red,
    rotate90_left,
    rotate90_right,
    sepia,
    transpose,
)


def _numbered(width, height):
    # every pixel distinct: red = column, green = row
    img = Image.new(width, height)
    for y in range(height):
        for x in range(width):
            img.pixels[y][x] = Pixel(x, y, (x * 7 + y * 13) % 256)
    return img


class TestColorOps(unittest.TestCase):
    def test_invert_white_to_black(self):
        img = Image.new(2, 2, Pixel(255, 255, 255))
        invert_colors(img)
        self.assertEqual(img.pixels, [[Pixel(0, 0, 0)] * 2] * 2)

    def test_invert_twice_restores(self):
        img = _numbered(5, 3)
        before = img.copy()
        invert_colors(img)
        self.assertNotEqual(img.pixels, before.pixels)
        invert_colors(img)
        self.assertEqual(img, before)

    def test_grayscale_pure_red(self):
        img = Image.new(1, 1, Pixel(255, 0, 0))
        grayscale(img)
        self.assertEqual(img.pixels[0][0], Pixel(85, 85, 85))

    def test_gray_value_matches_plain_average(self):
        for r in range(256):
            for g in range(256):
                for b in range(256):
                    if gray_value(r, g, b) != (r + g + b) // 3:
                        self.fail(f"mismatch at {(r, g, b)}")

    def test_isolate_channels(self):
        src = Pixel(10, 20, 30)
        for fn, expected in (
            (isolate_red, Pixel(10, 0, 0)),
            (isolate_green, Pixel(0, 20, 0)),
            (isolate_blue, Pixel(0, 0, 30)),
        ):
            img = Image.new(2, 1, src)
            fn(img)
            self.assertEqual(img.pixels[0], [expected, expected])

    def test_sepia_known_values(self):
        img = Image.new(2, 1)
        img.pixels[0] = [Pixel(255, 255, 255), Pixel(100, 50, 25)]
        sepia(img)
        # blue of white: 0.937 * 255 = 238.9 -> truncated, red/green clamped
        self.assertEqual(img.pixels[0][0], Pixel(255, 255, 238))
        self.assertEqual(img.pixels[0][1], Pixel(82, 73, 57))

    def test_sepia_and_grayscale_stay_in_range(self):
        img = Image.new(16, 16)
        for y in range(16):
            for x in range(16):
                img.pixels[y][x] = Pixel(x * 17, y * 17, 255 - x * 17)
        other = img.copy()
        sepia(img)
        grayscale(other)
        for grid in (img.pixels, other.pixels):
            for row in grid:
                for p in row:
                    for v in (p.red, p.green, p.blue):
                        self.assertTrue(0 <= v <= 255)


class TestGeometryOps(unittest.TestCase):
    def setUp(self):
        self.img = _numbered(3, 2)

    def test_flip_h(self):
        rows = [row[:] for row in self.img.pixels]
        flip_horizontal(self.img)
        self.assertEqual(self.img.pixels, [r[::-1] for r in rows])

    def test_flip_v_odd_height(self):
        img = _numbered(2, 3)
        rows = [row[:] for row in img.pixels]
        flip_vertical(img)
        self.assertEqual(img.pixels, rows[::-1])

    def test_flips_are_self_inverse(self):
        before = self.img.copy()
        for fn in (flip_horizontal, flip_vertical):
            fn(self.img)
            fn(self.img)
            self.assertEqual(self.img, before)

    def test_flip_v_empty(self):
        img = Image.new(0, 0)
        flip_vertical(img)
        self.assertEqual(img.pixels, [])

    def test_transpose_updates_geometry(self):
        img = _numbered(1, 4)
        self.assertEqual(img.header.file_size, 70)
        old = [row[:] for row in img.pixels]
        transpose(img)
        self.assertEqual((img.width, img.height), (4, 1))
        self.assertEqual(img.pixels, [[old[r][0] for r in range(4)]])
        self.assertEqual(img.padding, 0)
        self.assertEqual(img.header.file_size, 66)

    def test_rotate_2x2(self):
        a, b, c, d = Pixel(1, 0, 0), Pixel(2, 0, 0), Pixel(3, 0, 0), Pixel(4, 0, 0)
        img = Image.new(2, 2)
        img.pixels = [[a, b], [c, d]]
        rotate90_right(img)
        self.assertEqual(img.pixels, [[c, a], [d, b]])
        img.pixels = [[a, b], [c, d]]
        rotate90_left(img)
        self.assertEqual(img.pixels, [[b, d], [a, c]])

    def test_rotate_round_trips(self):
        before = self.img.copy()
        rotate90_left(self.img)
        self.assertEqual((self.img.width, self.img.height), (2, 3))
        rotate90_right(self.img)
        self.assertEqual(self.img, before)
        for _ in range(4):
            rotate90_right(self.img)
        self.assertEqual(self.img, before)
        for _ in range(4):
            rotate90_left(self.img)
        self.assertEqual(self.img, before)


class TestCrop(unittest.TestCase):
    def setUp(self):
        self.img = _numbered(4, 4)

    def test_crop_single_pixel(self):
        corner = self.img.pixels[0][0]
        crop(self.img, 0, 0, 1, 1)
        self.assertEqual((self.img.width, self.img.height), (1, 1))
        self.assertEqual(self.img.pixels, [[corner]])
        self.assertEqual(self.img.padding, 1)
        self.assertEqual(self.img.header.file_size, calculate_size(1, 1))

    def test_crop_end_is_exclusive(self):
        rows = [row[:] for row in self.img.pixels]
        crop(self.img, 1, 1, 3, 3)
        self.assertEqual(self.img.pixels, [rows[1][1:3], rows[2][1:3]])
        self.assertEqual(self.img.header.file_size, calculate_size(2, 2))

    def test_crop_rejects_bad_bounds(self):
        cases = [
            ((0, 0, 4, 1), "x_begin and x_end must be smaller than width"),
            ((-1, 0, 1, 1), "x_begin and x_end must be smaller than width"),
            ((2, 0, 1, 1), "x_begin must be smaller than or equal to x_end"),
            ((0, 0, 1, 4), "y_begin and y_end must be smaller than height"),
            ((0, 3, 1, 2), "y_begin must be smaller than or equal to y_end"),
        ]
        before = self.img.copy()
        for args, msg in cases:
            with self.subTest(args=args):
                with self.assertRaises(OutOfRangeError) as cm:
                    crop(self.img, *args)
                self.assertEqual(str(cm.exception), msg)
                self.assertEqual(self.img, before)

    def test_crop_error_is_value_error(self):
        with self.assertRaises(ValueError):
            crop(self.img, 0, 0, 9, 9)


class TestApplyEdits(unittest.TestCase):
    def test_chain(self):
        img = _numbered(4, 3)
        apply_edits(img, EditOptions(crop=(0, 0, 3, 2), invert=True, rotate="right"))
        self.assertEqual((img.width, img.height), (2, 3))
        self.assertEqual(len(img.pixels), 3)
        self.assertTrue(all(len(r) == 2 for r in img.pixels))
        self.assertEqual(img.header.file_size, calculate_size(2, 3))

    def test_noop(self):
        img = _numbered(3, 3)
        before = img.copy()
        apply_edits(img, EditOptions())
        self.assertEqual(img, before)

    def test_bad_choice(self):
        img = _numbered(2, 2)
        with self.assertRaises(ValueError):
            apply_edits(img, EditOptions(isolate="purple"))
        with self.assertRaises(ValueError):
            apply_edits(img, EditOptions(rotate="180"))


if __name__ == "__main__":
    unittest.main()
