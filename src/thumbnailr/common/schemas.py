"""Pydantic schemas and enumerations for thumbnail parameters."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidPolicyError, UnsupportedFormatError

DEFAULT_PNG_COMPRESSION_LEVEL = 5
DEFAULT_JPEG_QUALITY = 75


class FitPolicy(StrEnum):
    FIXED = "fixed"
    FIT_LONGEST = "fit_longest"
    FIT_SHORTEST = "fit_shortest"

    @classmethod
    def coerce(cls, value: object) -> "FitPolicy":
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(p.value for p in cls)
            raise InvalidPolicyError(
                f"Invalid fit policy {value!r}, expecting one of: {allowed}"
            ) from exc


class ImageFormat(StrEnum):
    PNG = "png"
    JPEG = "jpeg"

    @property
    def pil_format(self) -> str:
        """Format name understood by Pillow's open/save."""
        return "PNG" if self is ImageFormat.PNG else "JPEG"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".png",) if self is ImageFormat.PNG else (".jpg", ".jpeg")

    @classmethod
    def from_path(cls, path: str | Path) -> "ImageFormat":
        """Resolve the format from the file suffix, case-insensitively.

        Raises:
            UnsupportedFormatError: If the suffix is missing or is not
                .png, .jpg or .jpeg
        """
        suffix = Path(path).suffix.lower()
        for fmt in cls:
            if suffix in fmt.extensions:
                return fmt
        raise UnsupportedFormatError(
            f"Unrecognized file type for {str(path)!r}, expecting .png, .jpg or .jpeg"
        )


# ─────────────────────────────────────────────────────────────
# Build parameters
# ─────────────────────────────────────────────────────────────


class ThumbnailParams(BaseModel):
    """Parameters for a single thumbnail build.

    Attributes:
        width: Requested width in pixels
        height: Requested height in pixels
        policy: How the requested box constrains the final size
    """

    width: int = Field(..., gt=0, description="Requested width in pixels")
    height: int = Field(..., gt=0, description="Requested height in pixels")
    policy: FitPolicy = FitPolicy.FIT_LONGEST

    model_config = ConfigDict(frozen=True)


# ─────────────────────────────────────────────────────────────
# Export parameters
# ─────────────────────────────────────────────────────────────


class PngExportParams(BaseModel):
    """PNG encoder settings. 0 is no compression, 9 is maximum."""

    compression_level: int = Field(default=DEFAULT_PNG_COMPRESSION_LEVEL, ge=0, le=9)

    model_config = ConfigDict(frozen=True)


class JpegExportParams(BaseModel):
    """JPEG encoder settings. 0 is the worst quality, 100 the best."""

    quality: int = Field(default=DEFAULT_JPEG_QUALITY, ge=0, le=100)

    model_config = ConfigDict(frozen=True)
