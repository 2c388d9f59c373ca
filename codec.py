"""Pillow-backed decode/encode between compressed bytes and pixel buffers.

This is the collaborator that sits on either side of the raster core: the
core never sees compressed bytes, only PixelBuffers.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from config import DEFAULT_OUTPUT_FORMAT, FORMATS_WITHOUT_ALPHA, JPEG_QUALITY
from raster import PixelBuffer, to_rgb

logger = logging.getLogger(__name__)

# Pillow modes that already match a supported channel layout
NATIVE_MODES = ("L", "RGB", "RGBA")

# Modes that carry alpha and are expanded to RGBA
ALPHA_MODES = ("LA", "La", "PA", "RGBa")

# Single-band modes with a wider range, narrowed to 8-bit gray
GRAY_MODES = ("1", "I", "I;16", "F")

PREFERRED_EXTENSIONS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "TIFF": ".tif",
    "WEBP": ".webp",
    "BMP": ".bmp",
    "GIF": ".gif",
}


class DecodeError(ValueError):
    """Bytes could not be decoded into an image."""


class EncodeError(ValueError):
    """A buffer could not be written in the requested format."""


def _normalize_mode(image: Image.Image) -> Image.Image:
    if image.mode in NATIVE_MODES:
        return image
    if image.mode in ALPHA_MODES or (image.mode == "P" and "transparency" in image.info):
        target = "RGBA"
    elif image.mode in GRAY_MODES:
        target = "L"
    else:
        target = "RGB"
    logger.debug("Converting %s image to %s", image.mode, target)
    return image.convert(target)


def decode(data: bytes) -> PixelBuffer:
    """Decode compressed image bytes into a PixelBuffer.

    Raises:
        DecodeError: If Pillow cannot identify or read the image.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            array = np.asarray(_normalize_mode(image))
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e
    return PixelBuffer.from_array(array)


def normalize_format(fmt: str) -> str:
    fmt = fmt.upper()
    return "JPEG" if fmt == "JPG" else fmt


def encode(
    buffer: PixelBuffer,
    fmt: str = DEFAULT_OUTPUT_FORMAT,
    quality: int = JPEG_QUALITY,
) -> bytes:
    """Encode a PixelBuffer to compressed bytes.

    Args:
        buffer: Buffer to encode.
        fmt: Pillow format name (JPEG, PNG, ...).
        quality: JPEG quality (1-100, ignored for other formats).

    Returns:
        Encoded image bytes.

    Raises:
        EncodeError: If the format is unknown or Pillow fails to write it.
    """
    fmt = normalize_format(fmt)
    if buffer.channels == 4 and fmt in FORMATS_WITHOUT_ALPHA:
        buffer = to_rgb(buffer)

    image = Image.fromarray(buffer.to_array())
    save_kwargs = {"format": fmt}
    if fmt == "JPEG":
        save_kwargs["quality"] = quality
        save_kwargs["optimize"] = True

    output = io.BytesIO()
    try:
        image.save(output, **save_kwargs)
    except (KeyError, ValueError, OSError) as e:
        raise EncodeError(f"Could not encode image as {fmt}: {e}") from e
    return output.getvalue()


def format_for_path(path: str | Path) -> str:
    """Pillow format name for a file path, based on its extension."""
    suffix = Path(path).suffix.lower()
    fmt = Image.registered_extensions().get(suffix)
    if fmt is None:
        raise EncodeError(f"Unknown image extension: {suffix or '(none)'}")
    return fmt


def extension_for_format(fmt: str) -> str:
    fmt = normalize_format(fmt)
    return PREFERRED_EXTENSIONS.get(fmt, f".{fmt.lower()}")
