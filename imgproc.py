#!/usr/bin/env python3
"""
Command line for the raster processing core.

Usage:
    imgproc resize <paths> --width W --height H   # Exact dimensions
    imgproc thumbnail <paths> [--size 200]        # Longest side = SIZE
    imgproc blur <paths> [--intensity 1.0]        # Box blur
    imgproc sharpen <paths>                       # 3x3 sharpen
    imgproc edges <paths>                         # Edge detection (grayscale)
    imgproc grayscale <paths>                     # Luminance grayscale
    imgproc brightness <paths> --factor F         # Fade towards black

Every command accepts files and directories, writes processed_<op>_<name>
files to --out-dir, and can dump a JSON report with --report.
"""

import argparse
import logging
import sys

from cli.filters import add_filter_subparsers
from cli.resample import add_resize_subparser, add_thumbnail_subparser
from logging_utils import add_logging_args, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgproc",
        description="Raster image processing - filters, resizing and grayscale",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_resize_subparser(subparsers)
    add_thumbnail_subparser(subparsers)
    add_filter_subparsers(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if args.command is None or cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
