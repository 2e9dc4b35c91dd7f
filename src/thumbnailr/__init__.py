"""thumbnailr - Resized PNG/JPEG thumbnails exported to files or base64."""

from .algo.fit_dimensions import fit_dimensions
from .common.errors import (
    InvalidPolicyError,
    NotBuiltError,
    ThumbnailrError,
    UnsupportedFormatError,
)
from .common.schemas import (
    FitPolicy,
    ImageFormat,
    JpegExportParams,
    PngExportParams,
    ThumbnailParams,
)
from .thumbnail_builder import ThumbnailBuilder

__version__ = "2.0.0"

__all__ = [
    "FitPolicy",
    "ImageFormat",
    "InvalidPolicyError",
    "JpegExportParams",
    "NotBuiltError",
    "PngExportParams",
    "ThumbnailBuilder",
    "ThumbnailParams",
    "ThumbnailrError",
    "UnsupportedFormatError",
    "__version__",
    "fit_dimensions",
]
