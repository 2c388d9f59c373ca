"""Options and control flow shared by every processing subcommand."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from config import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FORMAT
from raster import RasterOperation
from runner import process_paths

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Image files or directories to process",
    )
    parser.add_argument(
        "-o", "--out-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for processed images (default: {DEFAULT_OUTPUT_DIR})",
    )
    formats = parser.add_mutually_exclusive_group()
    formats.add_argument(
        "--format",
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output image format, e.g. JPEG or PNG (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    formats.add_argument(
        "--keep-format",
        action="store_true",
        help="Write each image in the format of its source file",
    )
    parser.add_argument(
        "--report",
        metavar="PATH",
        help="Write a JSON report of the run to PATH",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar",
    )


def run_command(args: argparse.Namespace, operation: RasterOperation) -> int:
    """Run one operation over the inputs; 0 if every file succeeded."""
    batch = process_paths(
        args.inputs,
        operation,
        out_dir=args.out_dir,
        fmt=None if args.keep_format else args.format,
        progress=not args.no_progress,
    )

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(batch.model_dump_json(indent=2))
        logger.info("Report written to %s", report_path)

    if batch.failed or not batch.succeeded:
        return 1
    return 0
