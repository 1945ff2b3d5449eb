from __future__ import annotations

import argparse
import sys
import unittest
from pathlib import Path
from typing import Sequence, Tuple

from . import __version__
from .core import load, process_image
from .errors import BmpError
from .formatting import format_metadata, format_pixels
from .ops import EditOptions


def _parse_crop(value: str) -> Tuple[int, int, int, int]:
    try:
        parts = tuple(int(p.strip()) for p in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid --crop: {value!r}") from exc
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"--crop needs x_begin,y_begin,x_end,y_end; got {value!r}"
        )
    return parts  # type: ignore[return-value]


def _edit_options_from_args(ns: argparse.Namespace) -> EditOptions:
    return EditOptions(
        crop=ns.crop,
        invert=ns.invert,
        grayscale=ns.grayscale,
        sepia=ns.sepia,
        isolate=ns.isolate,
        flip_h=ns.flip_h,
        flip_v=ns.flip_v,
        transpose=ns.transpose,
        rotate=ns.rotate,
    )


def _add_common_edit_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--crop",
        type=_parse_crop,
        metavar="X0,Y0,X1,Y1",
        help="keep columns X0..X1-1 and rows Y0..Y1-1 (X1/Y1 must be < width/height)",
    )
    p.add_argument("--invert", action="store_true", help="invert colors")
    p.add_argument("--grayscale", action="store_true", help="average the three channels")
    p.add_argument("--sepia", action="store_true", help="sepia filter")
    p.add_argument("--isolate", choices=["red", "green", "blue"], help="keep one channel only")
    p.add_argument("--flip-h", action="store_true", help="horizontal flip")
    p.add_argument("--flip-v", action="store_true", help="vertical flip")
    p.add_argument("--transpose", action="store_true", help="swap rows and columns")
    p.add_argument(
        "--rotate",
        choices=["left", "right"],
        help="rotate 90 degrees (left = counterclockwise, right = clockwise)",
    )
    p.add_argument("--verbose", action="store_true", help="verbose logging")


def run_selftest() -> int:
    loader = unittest.TestLoader()
    suite = loader.discover(start_dir=str(Path(__file__).parent.parent.parent / "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    res = runner.run(suite)
    return 0 if res.wasSuccessful() else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bmpedit",
        description="Inspect and edit 24-bit uncompressed BMP images.",
    )
    ap.add_argument("--selftest", action="store_true", help="run the internal test suite and exit")
    ap.add_argument("--version", action="version", version=f"bmpedit {__version__}")

    sub = ap.add_subparsers(dest="cmd", required=False)

    # info / pixels
    p_info = sub.add_parser("info", help="print header and info header fields")
    p_info.add_argument("input", type=Path, metavar="input.bmp")
    p_info.add_argument("--hex", action="store_true", help="print numbers in hexadecimal")

    p_pix = sub.add_parser("pixels", help="print every pixel, row by row (long output)")
    p_pix.add_argument("input", type=Path, metavar="input.bmp")
    p_pix.add_argument("--hex", action="store_true", help="print numbers in hexadecimal")

    # edit
    p_edit = sub.add_parser("edit", help="apply edits and write a BMP")
    p_edit.add_argument("input", type=Path, metavar="input.bmp")
    p_edit.add_argument(
        "-o",
        "--output",
        type=Path,
        help="output .bmp (default: <stem>_edited.bmp next to input)",
    )
    _add_common_edit_flags(p_edit)

    # export
    p_exp = sub.add_parser("export", help="apply edits and write any format Pillow supports")
    p_exp.add_argument("input", type=Path, metavar="input.bmp")
    p_exp.add_argument("output", type=Path, metavar="output.png")
    _add_common_edit_flags(p_exp)

    return ap


def main(argv: Sequence[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = build_parser()
    ns = ap.parse_args(argv)

    if ns.selftest and ns.cmd is None:
        sys.exit(run_selftest())

    if ns.cmd is None:
        ap.print_help()
        sys.exit(1)

    try:
        if ns.cmd in ("info", "pixels"):
            image = load(ns.input)
            fmt = format_metadata if ns.cmd == "info" else format_pixels
            sys.stdout.write(fmt(image, hex_=ns.hex))
        else:
            process_image(
                input_path=ns.input,
                output_path=ns.output,
                edits=_edit_options_from_args(ns),
                verbose=ns.verbose,
            )
    except BmpError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
