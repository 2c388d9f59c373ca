"""
Generic 2D convolution over pixel buffers.

The engine is spelled out explicitly instead of delegating to a library
convolution primitive, because border handling differs between libraries.
For a kernel of size ``k`` and radius ``r = k // 2``, output sample
``(x, y, c)`` is::

    sum(kernel[ky][kx] * sample(x + kx - r, y + ky - r, c))

where out-of-range samples are resolved by the EdgePolicy, then the sum is
rounded and saturated to the 8-bit sample range. Channels never mix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from .buffer import PixelBuffer, saturate
from .errors import InvalidKernel


class EdgePolicy(Enum):
    """
    Defines how convolution handles samples that fall outside the buffer.
    """

    CLAMP_TO_EDGE = auto()
    """
    Clamp coordinates to the nearest valid pixel.
    (Edge pixels are repeated outward.)
    """

    ZERO_PAD = auto()
    """
    Treat out-of-bounds samples as zero.
    """

    IDENTITY = auto()
    """
    Replace an out-of-bounds sample with the center pixel's own value.
    """


@dataclass(frozen=True, eq=False)
class Kernel:
    """Immutable odd-sized square matrix of convolution weights.

    Attributes:
        weights: Square matrix of weights, copied into a read-only float64 array.
        scale: Normalization factor multiplied into every weight.
    """

    weights: np.ndarray
    scale: float = 1.0

    def __post_init__(self) -> None:
        try:
            weights = np.array(self.weights, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidKernel(f"Kernel weights must be numeric: {e}") from e

        if weights.ndim != 2 or weights.size == 0:
            raise InvalidKernel(
                f"Kernel must be a non-empty 2D matrix, got shape {weights.shape}"
            )
        rows, cols = weights.shape
        if rows != cols:
            raise InvalidKernel(f"Kernel must be square, got {rows}x{cols}")
        if rows % 2 == 0:
            raise InvalidKernel(f"Kernel size must be odd, got {rows}")
        if not np.isfinite(self.scale):
            raise InvalidKernel(f"Kernel scale must be finite, got {self.scale}")

        weights = weights * float(self.scale)
        if not np.all(np.isfinite(weights)):
            raise InvalidKernel("Kernel weights must be finite")

        weights.flags.writeable = False
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "scale", 1.0)

    @classmethod
    def box(cls, size: int) -> "Kernel":
        """Uniform kernel whose weights are all 1 / size**2."""
        if size <= 0:
            raise InvalidKernel(f"Kernel size must be positive, got {size}")
        return cls(np.ones((size, size)), scale=1.0 / (size * size))

    @property
    def size(self) -> int:
        return self.weights.shape[0]

    @property
    def radius(self) -> int:
        return self.size // 2

    @property
    def total(self) -> float:
        """Sum of all weights."""
        return float(self.weights.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kernel):
            return NotImplemented
        return np.array_equal(self.weights, other.weights)

    __hash__ = None


def _resolve_axis(length: int, offset: int) -> tuple[np.ndarray, np.ndarray]:
    """Clamped source indices along one axis, plus which of them were in range."""
    indices = np.arange(length) + offset
    valid = (indices >= 0) & (indices < length)
    return np.clip(indices, 0, length - 1), valid


def convolve(
    buffer: PixelBuffer,
    kernel,
    edge_policy: EdgePolicy = EdgePolicy.CLAMP_TO_EDGE,
) -> PixelBuffer:
    """Convolve every channel of a buffer with a square kernel.

    Pure function: returns a new buffer with the same dimensions and
    channel count as the input.

    Args:
        buffer: Input buffer.
        kernel: A Kernel, or any square odd-sized array-like of weights.
        edge_policy: How to resolve neighborhood samples outside the buffer.

    Returns:
        New PixelBuffer holding the rounded, saturated weighted sums.

    Raises:
        InvalidKernel: If the kernel is not an odd-sized square matrix.
    """
    if not isinstance(kernel, Kernel):
        kernel = Kernel(kernel)
    if not isinstance(edge_policy, EdgePolicy):
        raise TypeError(f"edge_policy must be an EdgePolicy, got {type(edge_policy).__name__}")

    source = buffer.pixels.astype(np.float64)
    height, width = source.shape[:2]
    radius = kernel.radius
    acc = np.zeros_like(source)

    # One pass per kernel tap; each pass touches every pixel at once.
    for ky in range(kernel.size):
        rows, rows_valid = _resolve_axis(height, ky - radius)
        for kx in range(kernel.size):
            weight = kernel.weights[ky, kx]
            if weight == 0.0:
                continue
            cols, cols_valid = _resolve_axis(width, kx - radius)
            neighborhood = source[rows[:, np.newaxis], cols[np.newaxis, :]]

            if edge_policy is not EdgePolicy.CLAMP_TO_EDGE:
                inside = (rows_valid[:, np.newaxis] & cols_valid[np.newaxis, :])[:, :, np.newaxis]
                fill = 0.0 if edge_policy is EdgePolicy.ZERO_PAD else source
                neighborhood = np.where(inside, neighborhood, fill)

            acc += weight * neighborhood

    return PixelBuffer(saturate(acc))
