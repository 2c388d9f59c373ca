"""
Pixel buffer: the decoded raster every core operation reads and produces.

Samples are 8-bit unsigned, stored row-major and channel-interleaved in a
numpy array of shape (height, width, channels). Core operations never write
into their input buffer; they allocate a new array and wrap it in a new
PixelBuffer.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

import numpy as np

from config import SAMPLE_MAX, SAMPLE_MIN, SUPPORTED_CHANNELS

from .errors import InvalidDimensions, InvalidParameter, OutOfBounds


class ChannelLayout(IntEnum):
    """Channel layouts, valued by their channel count."""

    GRAY = 1
    RGB = 3
    RGBA = 4


def _validate_dimensions(width: int, height: int, channels: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(
            f"width and height must be positive, got {width}x{height}"
        )
    if channels not in SUPPORTED_CHANNELS:
        raise InvalidDimensions(
            f"Unsupported number of channels: {channels}. "
            "Expected 1 (gray), 3 (RGB), or 4 (RGBA)."
        )


class PixelBuffer:
    """An owned raster of width x height pixels with 1, 3 or 4 channels.

    The constructor takes ownership of ``data`` without copying it; use
    :meth:`from_array` to wrap an array the caller keeps using.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray) -> None:
        if not isinstance(data, np.ndarray):
            raise TypeError(f"Expected numpy.ndarray, got {type(data).__name__}")
        if data.ndim != 3:
            raise InvalidDimensions(
                f"Pixel data must be a 3D (height, width, channels) array, "
                f"got {data.ndim}D array with shape {data.shape}"
            )
        if data.dtype != np.uint8:
            raise TypeError(f"Pixel data must be uint8, got {data.dtype}")
        height, width, channels = data.shape
        _validate_dimensions(width, height, channels)
        self._data = data

    # --------------------------------------------------
    # Construction
    # --------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int, channels: int, fill: int = 0) -> "PixelBuffer":
        """Allocate a buffer with every sample set to ``fill``.

        Raises:
            InvalidDimensions: If width or height is not positive or the
                channel count is not 1, 3 or 4.
            InvalidParameter: If ``fill`` is not a valid sample value.
        """
        _validate_dimensions(width, height, channels)
        _check_sample(fill)
        return cls(np.full((height, width, channels), fill, dtype=np.uint8))

    @classmethod
    def from_array(cls, array) -> "PixelBuffer":
        """Copy a 2D (gray) or 3D (height, width, channels) array into a buffer.

        Non-uint8 input is clipped into the sample range before casting.
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        elif array.ndim != 3:
            raise InvalidDimensions(
                f"Image must be 2D or 3D array, got {array.ndim}D array with shape {array.shape}"
            )

        height, width, channels = array.shape
        _validate_dimensions(width, height, channels)

        if array.dtype == np.uint8:
            data = array.copy()
        else:
            data = np.clip(array, SAMPLE_MIN, SAMPLE_MAX).astype(np.uint8)
        return cls(np.ascontiguousarray(data))

    @classmethod
    def from_samples(
        cls, width: int, height: int, channels: int, samples: Sequence[int]
    ) -> "PixelBuffer":
        """Build a buffer from a flat row-major, channel-interleaved sequence."""
        _validate_dimensions(width, height, channels)
        flat = np.asarray(samples)
        expected = width * height * channels
        if flat.size != expected:
            raise InvalidDimensions(
                f"Expected {expected} samples for {width}x{height}x{channels}, got {flat.size}"
            )
        if flat.size and (flat.min() < SAMPLE_MIN or flat.max() > SAMPLE_MAX):
            raise InvalidParameter(
                f"Samples must be within [{SAMPLE_MIN}, {SAMPLE_MAX}]"
            )
        return cls(flat.astype(np.uint8).reshape(height, width, channels))

    # --------------------------------------------------
    # Shape
    # --------------------------------------------------

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def layout(self) -> ChannelLayout:
        return ChannelLayout(self.channels)

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the buffer."""
        return self.width, self.height

    # --------------------------------------------------
    # Sample access
    # --------------------------------------------------

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width, channels) view of the samples."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def samples(self) -> np.ndarray:
        """Flat copy of the samples in row-major, channel-interleaved order."""
        return self._data.reshape(-1).copy()

    def get(self, x: int, y: int, channel: int) -> int:
        self._check_coords(x, y, channel)
        return int(self._data[y, x, channel])

    def set(self, x: int, y: int, channel: int, value: int) -> None:
        self._check_coords(x, y, channel)
        _check_sample(value)
        self._data[y, x, channel] = value

    def to_array(self, squeeze: bool = True) -> np.ndarray:
        """Copy the samples out; gray buffers become 2D when ``squeeze`` is set."""
        if squeeze and self.channels == 1:
            return self._data[:, :, 0].copy()
        return self._data.copy()

    def clone(self) -> "PixelBuffer":
        return PixelBuffer(self._data.copy())

    def _check_coords(self, x: int, y: int, channel: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= channel < self.channels):
            raise OutOfBounds(
                f"({x}, {y}, channel {channel}) is outside "
                f"{self.width}x{self.height}x{self.channels}"
            )

    # --------------------------------------------------
    # Comparison
    # --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._data.shape == other._data.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, layout={self.layout.name})"


def saturate(values: np.ndarray) -> np.ndarray:
    """Round float samples to the nearest integer and clip into the sample range."""
    return np.clip(np.rint(values), SAMPLE_MIN, SAMPLE_MAX).astype(np.uint8)


def _check_sample(value: int) -> None:
    if not SAMPLE_MIN <= value <= SAMPLE_MAX:
        raise InvalidParameter(
            f"Sample value must be within [{SAMPLE_MIN}, {SAMPLE_MAX}], got {value}"
        )
