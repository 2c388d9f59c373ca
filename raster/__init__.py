"""
Raster image-processing core.

This package provides pure, deterministic operations over decoded pixel
buffers. Every operation follows the pattern: input buffer -> new output
buffer, with no mutation of the input and no I/O.

Key components:
- buffer: PixelBuffer, the owned 8-bit raster (gray, RGB or RGBA)
- colorspace: Luminance grayscale and RGB conversion
- convolution: Kernel, EdgePolicy and the convolve() engine
- filters: Blur, sharpen, edge detection and brightness built on convolve()
- resample: Bilinear resize and aspect-preserving thumbnail
- operations: One class per operation with a common RasterOperation interface
- errors: InvalidDimensions, InvalidKernel, OutOfBounds, InvalidParameter
"""

from .buffer import ChannelLayout, PixelBuffer
from .colorspace import to_grayscale, to_rgb
from .convolution import EdgePolicy, Kernel, convolve
from .errors import (
    InvalidDimensions,
    InvalidKernel,
    InvalidParameter,
    OutOfBounds,
    RasterError,
)
from .filters import (
    adjust_brightness,
    blur,
    blur_kernel,
    edge_detect,
    edge_kernel,
    sharpen,
    sharpen_kernel,
)
from .operations import (
    OPERATIONS,
    OperationResult,
    RasterOperation,
    build_operation,
    run_operation,
)
from .resample import resize, thumbnail, thumbnail_size

__all__ = [
    # Data model
    "PixelBuffer",
    "ChannelLayout",
    "Kernel",
    "EdgePolicy",
    # Errors
    "RasterError",
    "InvalidDimensions",
    "InvalidKernel",
    "OutOfBounds",
    "InvalidParameter",
    # Engine and converters
    "convolve",
    "to_grayscale",
    "to_rgb",
    # Filters
    "blur",
    "blur_kernel",
    "sharpen",
    "sharpen_kernel",
    "edge_detect",
    "edge_kernel",
    "adjust_brightness",
    # Resampling
    "resize",
    "thumbnail",
    "thumbnail_size",
    # Operations
    "RasterOperation",
    "OperationResult",
    "OPERATIONS",
    "build_operation",
    "run_operation",
]
