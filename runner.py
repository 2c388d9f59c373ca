"""Batch runner: decode image files, apply one operation, write the results.

Each file is handled independently; a failure is logged and recorded in the
BatchReport and the run moves on to the next file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from PIL import Image
from tqdm import tqdm

from codec import decode, encode, extension_for_format, format_for_path
from config import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FORMAT, OUTPUT_PREFIX
from logging_utils import progress_logging
from raster import RasterError, RasterOperation, run_operation
from schemas import BatchReport, FailureReport, OperationReport

logger = logging.getLogger(__name__)


def collect_image_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories into the image files they contain.

    Files given explicitly are kept as-is, even when their extension is not
    a known image type, so that failures surface in the report.
    """
    known = Image.registered_extensions()
    collected: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            collected.extend(
                sorted(
                    child for child in path.iterdir()
                    if child.is_file() and child.suffix.lower() in known
                )
            )
        else:
            collected.append(path)
    return collected


def output_path_for(
    source: Path,
    operation_name: str,
    out_dir: Path,
    fmt: str,
    taken: set[Path] | None = None,
) -> Path:
    """Where the processed version of ``source`` is written.

    With ``taken``, a numeric suffix keeps the name clear of every path
    already in the set (``processed_blur_cat_2.png``), and the chosen path
    is added to it.
    """
    stem = f"{OUTPUT_PREFIX}{operation_name}_{source.stem}"
    ext = extension_for_format(fmt)
    output = out_dir / f"{stem}{ext}"
    if taken is None:
        return output

    counter = 1
    while output in taken:
        counter += 1
        output = out_dir / f"{stem}_{counter}{ext}"
    taken.add(output)
    return output


def process_file(
    source: str | Path,
    operation: RasterOperation,
    out_dir: str | Path = DEFAULT_OUTPUT_DIR,
    fmt: str | None = DEFAULT_OUTPUT_FORMAT,
    output: Path | None = None,
) -> OperationReport:
    """Decode one file, apply the operation and write the encoded result.

    Args:
        source: Image file to read.
        operation: Operation to apply.
        out_dir: Directory for the result when ``output`` is not given.
        fmt: Output format. None writes the source's own format.
        output: Explicit destination path.
    """
    source = Path(source)
    out_dir = Path(out_dir)
    if fmt is None:
        fmt = format_for_path(source)

    buffer = decode(source.read_bytes())
    result = run_operation(buffer, operation)
    encoded = encode(result.image, fmt)

    if output is None:
        output = output_path_for(source, result.name, out_dir, fmt)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(encoded)

    logger.debug(
        "%s: %s %dx%d -> %dx%d",
        source.name, result.name, *result.original_size, *result.new_size,
    )
    return OperationReport(
        operation=result.name,
        source=str(source),
        output=str(output),
        original_size=result.original_size,
        new_size=result.new_size,
        parameters=result.parameters,
        metadata=result.metadata,
    )


def process_paths(
    paths: Iterable[str | Path],
    operation: RasterOperation,
    out_dir: str | Path = DEFAULT_OUTPUT_DIR,
    fmt: str | None = DEFAULT_OUTPUT_FORMAT,
    progress: bool = True,
) -> BatchReport:
    """Apply one operation to every image under ``paths``.

    Output names are unique within the batch, so sources that share a stem
    (``cat.png`` and ``cat.jpg``) do not overwrite each other. A ``fmt`` of
    None keeps each source's format.
    """
    files = collect_image_paths(paths)
    batch = BatchReport(operation=operation.name)

    if not files:
        logger.info("No images to process.")
        return batch

    out_dir = Path(out_dir)
    taken: set[Path] = set()

    logger.info("Applying %s to %d image(s)...", operation.name, len(files))
    with progress_logging():
        for path in tqdm(files, desc="Processing", disable=not progress):
            try:
                file_fmt = fmt or format_for_path(path)
                output = output_path_for(path, operation.name, out_dir, file_fmt, taken)
                batch.reports.append(
                    process_file(path, operation, out_dir, file_fmt, output=output)
                )
            except (RasterError, ValueError, OSError) as e:
                logger.error("Error processing %s: %s", path, e)
                batch.failures.append(FailureReport(source=str(path), error=str(e)))

    logger.info("Processed %d image(s), %d failed", batch.succeeded, batch.failed)
    return batch
