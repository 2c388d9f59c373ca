"""
Filter catalog built on the convolution engine.

Each filter is a pure function from (buffer, parameters) to a new buffer.
All convolution filters use the IDENTITY edge policy, so border pixels are
computed with out-of-range neighbors replaced by the pixel itself.
"""

import math

import numpy as np

from config import (
    BLUR_INTENSITY_SCALE,
    DEFAULT_BLUR_INTENSITY,
    EDGE_KERNEL,
    MAX_BLUR_KERNEL_SIZE,
    MIN_BLUR_KERNEL_SIZE,
    SHARPEN_KERNEL,
)

from .buffer import PixelBuffer, saturate
from .colorspace import to_grayscale
from .convolution import EdgePolicy, Kernel, convolve
from .errors import InvalidParameter

FILTER_EDGE_POLICY = EdgePolicy.IDENTITY


def blur_kernel_size(intensity: float) -> int:
    """Kernel size for a blur of the given intensity.

    Always odd, at least MIN_BLUR_KERNEL_SIZE and at most MAX_BLUR_KERNEL_SIZE.

    Raises:
        InvalidParameter: If intensity is not finite or needs a larger kernel.
    """
    if not math.isfinite(intensity):
        raise InvalidParameter(f"Blur intensity must be finite, got {intensity}")
    size = max(MIN_BLUR_KERNEL_SIZE, round(intensity * BLUR_INTENSITY_SCALE))
    if size % 2 == 0:
        size += 1
    if size > MAX_BLUR_KERNEL_SIZE:
        raise InvalidParameter(
            f"Blur intensity {intensity} needs a {size}x{size} kernel, "
            f"the limit is {MAX_BLUR_KERNEL_SIZE}x{MAX_BLUR_KERNEL_SIZE}"
        )
    return size


def blur_kernel(intensity: float = DEFAULT_BLUR_INTENSITY) -> Kernel:
    """Uniform box kernel whose weights sum to 1."""
    return Kernel.box(blur_kernel_size(intensity))


def sharpen_kernel() -> Kernel:
    return Kernel(SHARPEN_KERNEL)


def edge_kernel() -> Kernel:
    return Kernel(EDGE_KERNEL)


def blur(buffer: PixelBuffer, intensity: float = DEFAULT_BLUR_INTENSITY) -> PixelBuffer:
    """Box blur. Higher intensity means a larger kernel (intensity 1.0 -> 11x11)."""
    return convolve(buffer, blur_kernel(intensity), FILTER_EDGE_POLICY)


def sharpen(buffer: PixelBuffer) -> PixelBuffer:
    return convolve(buffer, sharpen_kernel(), FILTER_EDGE_POLICY)


def edge_detect(buffer: PixelBuffer) -> PixelBuffer:
    """Laplacian-style edge response on the luminance channel.

    The output is always a single-channel buffer.
    """
    return convolve(to_grayscale(buffer), edge_kernel(), FILTER_EDGE_POLICY)


def adjust_brightness(buffer: PixelBuffer, factor: float) -> PixelBuffer:
    """Composite the buffer at opacity ``factor`` over an empty canvas.

    Gray and RGB buffers sit on a black canvas, so every sample is scaled by
    ``factor``. RGBA buffers sit on a transparent canvas, so color is kept
    and only alpha is scaled.

    Raises:
        InvalidParameter: If factor is outside [0, 1].
    """
    if not 0.0 <= factor <= 1.0:
        raise InvalidParameter(f"Brightness factor must be within [0, 1], got {factor}")

    scaled = buffer.pixels.astype(np.float64)
    if buffer.channels == 4:
        scaled[:, :, 3] *= factor
    else:
        scaled *= factor
    return PixelBuffer(saturate(scaled))
