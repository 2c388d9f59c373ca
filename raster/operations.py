"""
Operation classes with a common interface.

Each operation wraps exactly one filter or resample function in a frozen
dataclass that implements the RasterOperation interface. Operations are
pure: they take a buffer and return a new one without mutating the input.

Usage:
    from raster.operations import build_operation, run_operation

    operation = build_operation("thumbnail", max_size=128)
    result = run_operation(buffer, operation)
    result.new_size  # (128, 64) for a 2:1 input
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import Any

from config import DEFAULT_BLUR_INTENSITY, DEFAULT_THUMBNAIL_SIZE

from .buffer import PixelBuffer
from .colorspace import to_grayscale
from .errors import InvalidParameter
from .filters import adjust_brightness, blur, blur_kernel_size, edge_detect, sharpen
from .resample import resize, thumbnail


class RasterOperation(ABC):
    """Base class for operations.

    All operations must implement this interface. Operations are pure
    functions of their parameters and input buffer.
    """

    @abstractmethod
    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        """Apply this operation to a buffer.

        Must be pure: never mutates the input buffer.

        Args:
            buffer: Input buffer.

        Returns:
            Processed image as a new PixelBuffer.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Short operation name, as used on the command line."""
        pass

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters this operation was built with."""
        return asdict(self)

    def get_metadata(self) -> dict[str, Any]:
        """Return any metadata describing how the operation will run.

        Override this method if the operation derives values worth
        reporting (e.g., a kernel size).
        """
        return {}


@dataclass(frozen=True)
class ResizeOperation(RasterOperation):
    """Resize to exact dimensions (aspect ratio not preserved)."""

    width: int
    height: int

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return resize(buffer, self.width, self.height)

    @property
    def name(self) -> str:
        return "resize"


@dataclass(frozen=True)
class ThumbnailOperation(RasterOperation):
    """Fit the image into a max_size square, preserving aspect ratio."""

    max_size: int = DEFAULT_THUMBNAIL_SIZE

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return thumbnail(buffer, self.max_size)

    @property
    def name(self) -> str:
        return "thumbnail"


@dataclass(frozen=True)
class BlurOperation(RasterOperation):
    """Box blur.

    Attributes:
        intensity: Blur strength. The kernel size is intensity * 10,
                   at least 3 and always odd.
    """

    intensity: float = DEFAULT_BLUR_INTENSITY

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return blur(buffer, self.intensity)

    @property
    def name(self) -> str:
        return "blur"

    def get_metadata(self) -> dict[str, Any]:
        return {"kernel_size": blur_kernel_size(self.intensity)}


@dataclass(frozen=True)
class SharpenOperation(RasterOperation):
    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return sharpen(buffer)

    @property
    def name(self) -> str:
        return "sharpen"


@dataclass(frozen=True)
class EdgeDetectOperation(RasterOperation):
    """Grayscale, then Laplacian-style edge kernel."""

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return edge_detect(buffer)

    @property
    def name(self) -> str:
        return "edges"


@dataclass(frozen=True)
class GrayscaleOperation(RasterOperation):
    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return to_grayscale(buffer)

    @property
    def name(self) -> str:
        return "grayscale"


@dataclass(frozen=True)
class BrightnessOperation(RasterOperation):
    """Fade the image towards black (or transparent, for RGBA).

    Attributes:
        factor: Opacity in [0, 1]; 1.0 leaves the image unchanged.
    """

    factor: float

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        return adjust_brightness(buffer, self.factor)

    @property
    def name(self) -> str:
        return "brightness"


OPERATIONS: dict[str, type[RasterOperation]] = {
    "resize": ResizeOperation,
    "thumbnail": ThumbnailOperation,
    "blur": BlurOperation,
    "sharpen": SharpenOperation,
    "edges": EdgeDetectOperation,
    "grayscale": GrayscaleOperation,
    "brightness": BrightnessOperation,
}


def build_operation(name: str, **params: Any) -> RasterOperation:
    """Build an operation by name.

    Raises:
        InvalidParameter: If the name is unknown or the parameters do not
            match the operation.
    """
    try:
        operation_cls = OPERATIONS[name]
    except KeyError:
        raise InvalidParameter(
            f"Unknown operation {name!r}. Expected one of: {', '.join(OPERATIONS)}"
        ) from None

    try:
        return operation_cls(**params)
    except TypeError as e:
        raise InvalidParameter(f"Invalid parameters for {name}: {e}") from e


@dataclass
class OperationResult:
    """Result of applying a single operation.

    Attributes:
        name: Name of the operation that produced this result.
        image: Output buffer.
        original_size: (width, height) of the input.
        parameters: Parameters the operation was built with.
        metadata: Any metadata produced by the operation (e.g., kernel_size).
    """

    name: str
    image: PixelBuffer
    original_size: tuple[int, int]
    parameters: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def new_size(self) -> tuple[int, int]:
        """(width, height) of the output."""
        return self.image.size


def run_operation(buffer: PixelBuffer, operation: RasterOperation) -> OperationResult:
    """Apply exactly one operation to a buffer.

    The input buffer is left untouched; the result owns a new buffer.
    """
    image = operation.apply(buffer)
    return OperationResult(
        name=operation.name,
        image=image,
        original_size=buffer.size,
        parameters=operation.parameters,
        metadata=operation.get_metadata(),
    )
