"""
Colorspace conversion between gray, RGB and RGBA buffers.

All functions are pure: they return a new buffer and leave the input
untouched.
"""

import numpy as np

from config import LUMA_WEIGHTS

from .buffer import PixelBuffer, saturate


def to_grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """Convert a buffer to a single luminance channel.

    Each output sample is round(0.299 R + 0.587 G + 0.114 B). Alpha is
    dropped. A gray buffer comes back as an equal clone, which makes the
    conversion idempotent.

    Examples:
        >>> rgb = PixelBuffer.create(4, 2, 3, fill=255)
        >>> to_grayscale(rgb).channels
        1
    """
    if buffer.channels == 1:
        return buffer.clone()

    rgb = buffer.pixels[:, :, :3].astype(np.float64)
    luma = rgb @ np.asarray(LUMA_WEIGHTS, dtype=np.float64)
    return PixelBuffer(saturate(luma)[:, :, np.newaxis])


def to_rgb(buffer: PixelBuffer) -> PixelBuffer:
    """Convert a buffer to three color channels.

    Gray is replicated into R, G and B; RGBA loses its alpha channel.
    """
    pixels = buffer.pixels
    if buffer.channels == 1:
        return PixelBuffer(np.repeat(pixels, 3, axis=2))
    if buffer.channels == 4:
        return PixelBuffer(np.ascontiguousarray(pixels[:, :, :3]))
    return buffer.clone()
