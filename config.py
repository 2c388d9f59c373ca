"""Central configuration for raster processing.

All tunable parameters are defined here with descriptive names.
Core modules read their constants from here; per-call parameters are
always passed explicitly.
"""

# =============================================================================
# SAMPLE RANGE
# =============================================================================

# Every channel is stored as an unsigned 8-bit sample
SAMPLE_MIN = 0
SAMPLE_MAX = 255

# Supported channel counts (gray, RGB, RGBA)
SUPPORTED_CHANNELS = (1, 3, 4)

# =============================================================================
# COLORSPACE
# =============================================================================

# ITU-R BT.601 luminance weights for R, G, B
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# =============================================================================
# FILTER KERNELS
# =============================================================================

# Blur kernel size = max(MIN_BLUR_KERNEL_SIZE, round(intensity * BLUR_INTENSITY_SCALE)),
# bumped to the next odd size if even
BLUR_INTENSITY_SCALE = 10
MIN_BLUR_KERNEL_SIZE = 3
# Largest blur kernel accepted (intensity ~10); larger sizes are rejected
MAX_BLUR_KERNEL_SIZE = 101
DEFAULT_BLUR_INTENSITY = 1.0

# Sharpen kernel (weights sum to 1, brightness preserved)
SHARPEN_KERNEL = (
    (0.0, -1.0, 0.0),
    (-1.0, 5.0, -1.0),
    (0.0, -1.0, 0.0),
)

# Laplacian-style edge kernel (weights sum to 0, high-pass response)
EDGE_KERNEL = (
    (-1.0, -1.0, -1.0),
    (-1.0, 8.0, -1.0),
    (-1.0, -1.0, -1.0),
)

# =============================================================================
# RESAMPLING
# =============================================================================

# Longest side of a thumbnail when no size is given
DEFAULT_THUMBNAIL_SIZE = 200

# =============================================================================
# OUTPUT
# =============================================================================

# Processed images are written as JPEG unless another format is requested
DEFAULT_OUTPUT_FORMAT = "JPEG"
JPEG_QUALITY = 90

# Formats that cannot carry an alpha channel (RGBA is flattened to RGB)
FORMATS_WITHOUT_ALPHA = ("JPEG", "BMP")

# Output directory and filename prefix for processed files
DEFAULT_OUTPUT_DIR = "processed"
OUTPUT_PREFIX = "processed_"

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Third-party loggers held at WARNING or above (Pillow logs every PNG chunk at DEBUG)
QUIET_LOGGERS = ("PIL",)
