"""
Bilinear resampling: resize to explicit dimensions or to a bounding box.

Output pixel centers are mapped back into the source with
``src = (dst + 0.5) * src_len / dst_len - 0.5`` and clamped to the valid
range, so corner pixels of an upscaled image keep their source values.
"""

from __future__ import annotations

import numpy as np

from .buffer import PixelBuffer, saturate
from .errors import InvalidDimensions


def _check_target(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidDimensions(f"{name} must be positive, got {value}")


def _source_coords(src_len: int, dst_len: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Lower neighbor, upper neighbor and blend weight for every output index."""
    coords = (np.arange(dst_len) + 0.5) * (src_len / dst_len) - 0.5
    coords = np.clip(coords, 0, src_len - 1)
    lower = np.floor(coords).astype(np.intp)
    upper = np.minimum(lower + 1, src_len - 1)
    return lower, upper, coords - lower


def resize(buffer: PixelBuffer, target_width: int, target_height: int) -> PixelBuffer:
    """Resize a buffer to exact dimensions with bilinear interpolation.

    Pure function: returns a new buffer without modifying the input. The
    aspect ratio is not preserved; use :func:`thumbnail` for that.

    Raises:
        TypeError: If a target dimension is not an int.
        InvalidDimensions: If a target dimension is not positive.

    Examples:
        >>> img = PixelBuffer.create(2000, 1000, 3)
        >>> resize(img, 1000, 500).size
        (1000, 500)
    """
    _check_target("target_width", target_width)
    _check_target("target_height", target_height)

    source = buffer.pixels.astype(np.float64)
    x0, x1, fx = _source_coords(buffer.width, target_width)
    y0, y1, fy = _source_coords(buffer.height, target_height)

    fx = fx[np.newaxis, :, np.newaxis]
    fy = fy[:, np.newaxis, np.newaxis]

    top = source[y0][:, x0] * (1.0 - fx) + source[y0][:, x1] * fx
    bottom = source[y1][:, x0] * (1.0 - fx) + source[y1][:, x1] * fx
    return PixelBuffer(saturate(top * (1.0 - fy) + bottom * fy))


def thumbnail_size(width: int, height: int, max_size: int) -> tuple[int, int]:
    """Dimensions that fit (width, height) into a max_size box, keeping aspect.

    The longer side becomes exactly max_size; the shorter side is rounded to
    the nearest integer and never drops below 1.
    """
    _check_target("max_size", max_size)
    aspect_ratio = width / height
    if width > height:
        return max_size, max(1, round(max_size / aspect_ratio))
    return max(1, round(max_size * aspect_ratio)), max_size


def thumbnail(buffer: PixelBuffer, max_size: int) -> PixelBuffer:
    """Scale a buffer so its longer side equals max_size, preserving aspect ratio."""
    new_width, new_height = thumbnail_size(buffer.width, buffer.height, max_size)
    return resize(buffer, new_width, new_height)
