"""Resize and thumbnail command CLI parsing."""

from __future__ import annotations

import argparse

from cli.common import add_common_args, positive_int, run_command
from config import DEFAULT_THUMBNAIL_SIZE
from raster.operations import ResizeOperation, ThumbnailOperation


def add_resize_subparser(subparsers: argparse._SubParsersAction) -> None:
    resize_parser = subparsers.add_parser(
        "resize",
        help="Resize images to exact dimensions (bilinear)",
    )
    add_common_args(resize_parser)
    resize_parser.add_argument(
        "--width",
        type=positive_int,
        required=True,
        help="Target width in pixels",
    )
    resize_parser.add_argument(
        "--height",
        type=positive_int,
        required=True,
        help="Target height in pixels",
    )
    resize_parser.set_defaults(_cmd=cmd_resize)


def add_thumbnail_subparser(subparsers: argparse._SubParsersAction) -> None:
    thumb_parser = subparsers.add_parser(
        "thumbnail",
        help="Scale images so the longer side fits SIZE, keeping aspect ratio",
    )
    add_common_args(thumb_parser)
    thumb_parser.add_argument(
        "--size",
        type=positive_int,
        default=DEFAULT_THUMBNAIL_SIZE,
        help=f"Longest side in pixels (default: {DEFAULT_THUMBNAIL_SIZE})",
    )
    thumb_parser.set_defaults(_cmd=cmd_thumbnail)


def cmd_resize(args: argparse.Namespace) -> int:
    return run_command(args, ResizeOperation(width=args.width, height=args.height))


def cmd_thumbnail(args: argparse.Namespace) -> int:
    return run_command(args, ThumbnailOperation(max_size=args.size))
