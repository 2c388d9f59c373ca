"""Error kinds raised by the raster core.

Every error derives from RasterError and from the builtin exception that
best matches it, so callers can catch either.
"""


class RasterError(Exception):
    """Base class for all raster core failures."""


class InvalidDimensions(RasterError, ValueError):
    """Width, height, channel count or sample count is not valid."""


class InvalidKernel(RasterError, ValueError):
    """Kernel is not an odd-sized square matrix of finite weights."""


class OutOfBounds(RasterError, IndexError):
    """Coordinate access outside the buffer extent."""


class InvalidParameter(RasterError, ValueError):
    """Operation parameter outside its accepted range."""
