"""Thumbnail builder: decode a PNG/JPEG source, resize it, export the result."""

import base64
from pathlib import Path
from typing import Self

from loguru import logger
from PIL import Image

from .algo.fit_dimensions import fit_dimensions
from .algo.image_codec import decode_image, encode_image, resample_image
from .common.errors import NotBuiltError, UnsupportedFormatError
from .common.schemas import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PNG_COMPRESSION_LEVEL,
    FitPolicy,
    ImageFormat,
    JpegExportParams,
    PngExportParams,
    ThumbnailParams,
)


class ThumbnailBuilder:
    """Builds thumbnails from one source image.

    ``build`` may be called any number of times; each successful call
    replaces the destination image. Exports read the destination image
    and require a prior successful build.

    Instances are not safe for concurrent use.

    Usage:
        b64 = ThumbnailBuilder("photo.jpg").build(100, 100).to_png_base64()
    """

    _source_image: Image.Image | None
    _destination_image: Image.Image | None

    def __init__(self, source_path: str | Path) -> None:
        self._source_path: Path = Path(source_path)
        self._source_image = None
        self._destination_image = None

    @property
    def source_path(self) -> Path:
        return self._source_path

    @property
    def is_built(self) -> bool:
        return self._destination_image is not None

    @property
    def original_size(self) -> tuple[int, int] | None:
        """Pixel size of the decoded source, None before the first build."""
        if self._source_image is None:
            return None
        return self._source_image.size

    @property
    def size(self) -> tuple[int, int] | None:
        """Pixel size of the destination image, None before the first build."""
        if self._destination_image is None:
            return None
        return self._destination_image.size

    # ─────────────────────────────────────────────────────────────
    # Build
    # ─────────────────────────────────────────────────────────────

    def build(
        self,
        width: int,
        height: int,
        policy: FitPolicy | str = FitPolicy.FIT_LONGEST,
    ) -> Self:
        """
        Create the thumbnail from the source image.

        Args:
            width: Requested width in pixels
            height: Requested height in pixels
            policy: FIXED keeps the requested size verbatim; FIT_LONGEST
                fits the image inside the box; FIT_SHORTEST makes it cover
                the box. Both FIT policies keep the source aspect ratio.

        Returns:
            This builder, to allow chaining

        Raises:
            InvalidPolicyError: If policy is not a FitPolicy value
            UnsupportedFormatError: If the source is not .png/.jpg/.jpeg
            pydantic.ValidationError: If width or height is not positive
            OSError: If Pillow cannot read the source
        """
        params = ThumbnailParams(
            width=width,
            height=height,
            policy=FitPolicy.coerce(policy),
        )

        source, fmt = decode_image(self._source_path)
        original_width, original_height = source.size

        target = fit_dimensions(
            width=params.width,
            height=params.height,
            original_width=original_width,
            original_height=original_height,
            policy=params.policy,
        )
        destination = resample_image(source, target)

        self._source_image = source
        self._destination_image = destination

        logger.info(
            f"Built {params.policy} thumbnail of {self._source_path.name} ({fmt}): "
            + f"{original_width}x{original_height} -> {target[0]}x{target[1]}"
        )
        return self

    def build_thumbnail(self, width: int, height: int, keep_aspect_ratio: bool = True) -> Self:
        """Build with FIT_LONGEST when keep_aspect_ratio is set, FIXED otherwise."""
        policy = FitPolicy.FIT_LONGEST if keep_aspect_ratio else FitPolicy.FIXED
        return self.build(width, height, policy)

    # ─────────────────────────────────────────────────────────────
    # PNG export
    # ─────────────────────────────────────────────────────────────

    def to_png_bytes(self, compression_level: int = DEFAULT_PNG_COMPRESSION_LEVEL) -> bytes:
        params = PngExportParams(compression_level=compression_level)
        return encode_image(self._require_destination(), ImageFormat.PNG, params)

    def to_png_base64(self, compression_level: int = DEFAULT_PNG_COMPRESSION_LEVEL) -> str:
        """Base64 text of the PNG-encoded thumbnail (0 = no compression, 9 = max)."""
        return base64.b64encode(self.to_png_bytes(compression_level)).decode("ascii")

    def to_png_file(
        self,
        path: str | Path,
        compression_level: int = DEFAULT_PNG_COMPRESSION_LEVEL,
    ) -> bool:
        """Write the thumbnail as a PNG file. Returns True once written."""
        _ = self._require_destination()
        path = _target_path(path, ImageFormat.PNG)
        return _write(path, self.to_png_bytes(compression_level))

    # ─────────────────────────────────────────────────────────────
    # JPEG export
    # ─────────────────────────────────────────────────────────────

    def to_jpeg_bytes(self, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
        params = JpegExportParams(quality=quality)
        return encode_image(self._require_destination(), ImageFormat.JPEG, params)

    def to_jpeg_base64(self, quality: int = DEFAULT_JPEG_QUALITY) -> str:
        """Base64 text of the JPEG-encoded thumbnail (0 = worst, 100 = best)."""
        return base64.b64encode(self.to_jpeg_bytes(quality)).decode("ascii")

    def to_jpeg_file(self, path: str | Path, quality: int = DEFAULT_JPEG_QUALITY) -> bool:
        """Write the thumbnail as a JPEG file. Returns True once written."""
        _ = self._require_destination()
        path = _target_path(path, ImageFormat.JPEG)
        return _write(path, self.to_jpeg_bytes(quality))

    # ─────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────

    def _require_destination(self) -> Image.Image:
        if self._destination_image is None:
            raise NotBuiltError()
        return self._destination_image


def _target_path(path: str | Path, fmt: ImageFormat) -> Path:
    path = Path(path)
    if ImageFormat.from_path(path) is not fmt:
        raise UnsupportedFormatError(
            f"Cannot write {fmt.pil_format} data to {str(path)!r}, "
            + f"expecting one of: {', '.join(fmt.extensions)}"
        )
    return path


def _write(path: Path, data: bytes) -> bool:
    _ = path.write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return True
