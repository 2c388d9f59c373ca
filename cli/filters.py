"""Filter command CLI parsing (blur, sharpen, edges, grayscale, brightness)."""

from __future__ import annotations

import argparse

from cli.common import add_common_args, run_command
from config import DEFAULT_BLUR_INTENSITY
from raster import InvalidParameter
from raster.filters import blur_kernel_size
from raster.operations import (
    BlurOperation,
    BrightnessOperation,
    EdgeDetectOperation,
    GrayscaleOperation,
    SharpenOperation,
)


def unit_float(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"must be within [0, 1], got {value}")
    return number


def blur_intensity(value: str) -> float:
    number = float(value)
    try:
        blur_kernel_size(number)
    except InvalidParameter as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return number


def add_filter_subparsers(subparsers: argparse._SubParsersAction) -> None:
    blur_parser = subparsers.add_parser(
        "blur",
        help="Box blur (kernel size = intensity * 10, odd, at least 3)",
    )
    add_common_args(blur_parser)
    blur_parser.add_argument(
        "--intensity",
        type=blur_intensity,
        default=DEFAULT_BLUR_INTENSITY,
        help=f"Blur strength (default: {DEFAULT_BLUR_INTENSITY})",
    )
    blur_parser.set_defaults(_cmd=cmd_blur)

    sharpen_parser = subparsers.add_parser(
        "sharpen",
        help="Sharpen with a 3x3 kernel",
    )
    add_common_args(sharpen_parser)
    sharpen_parser.set_defaults(_cmd=cmd_sharpen)

    edges_parser = subparsers.add_parser(
        "edges",
        help="Edge detection on the grayscale image",
    )
    add_common_args(edges_parser)
    edges_parser.set_defaults(_cmd=cmd_edges)

    gray_parser = subparsers.add_parser(
        "grayscale",
        help="Convert to grayscale (luminance)",
    )
    add_common_args(gray_parser)
    gray_parser.set_defaults(_cmd=cmd_grayscale)

    brightness_parser = subparsers.add_parser(
        "brightness",
        help="Fade images towards black by FACTOR",
    )
    add_common_args(brightness_parser)
    brightness_parser.add_argument(
        "--factor",
        type=unit_float,
        required=True,
        help="Opacity in [0, 1]; 1.0 leaves the image unchanged",
    )
    brightness_parser.set_defaults(_cmd=cmd_brightness)


def cmd_blur(args: argparse.Namespace) -> int:
    return run_command(args, BlurOperation(intensity=args.intensity))


def cmd_sharpen(args: argparse.Namespace) -> int:
    return run_command(args, SharpenOperation())


def cmd_edges(args: argparse.Namespace) -> int:
    return run_command(args, EdgeDetectOperation())


def cmd_grayscale(args: argparse.Namespace) -> int:
    return run_command(args, GrayscaleOperation())


def cmd_brightness(args: argparse.Namespace) -> int:
    return run_command(args, BrightnessOperation(factor=args.factor))
