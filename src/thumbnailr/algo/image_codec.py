"""Pillow-backed decode, resample and encode helpers."""

from io import BytesIO
from pathlib import Path

from loguru import logger
from PIL import Image

from ..common.schemas import ImageFormat, JpegExportParams, PngExportParams

# JPEG does not support alpha or palettes
_JPEG_UNSAFE_MODES = ("RGBA", "LA", "P", "PA")

# Modes that carry an alpha channel of their own
_ALPHA_MODES = ("RGBA", "LA", "PA")


def decode_image(path: str | Path) -> tuple[Image.Image, ImageFormat]:
    """
    Decode a PNG or JPEG file into a fully loaded, detached image.

    The format comes from the suffix and Pillow is only allowed to use
    the matching decoder. The result is always RGB, or RGBA when the
    source has transparency, so resampling can interpolate (Pillow falls
    back to nearest-neighbour for palette and 1-bit images).

    Args:
        path: Source image path

    Returns:
        (image, format); the file handle is already closed

    Raises:
        UnsupportedFormatError: If the suffix is not .png, .jpg or .jpeg
        FileNotFoundError: If the file does not exist
        PIL.UnidentifiedImageError: If the content does not match the format
    """
    fmt = ImageFormat.from_path(path)

    with Image.open(Path(path), formats=[fmt.pil_format]) as img:
        img.load()
        decoded = _to_full_colour(img)

    logger.debug(f"Decoded {fmt.pil_format} {path} at {decoded.width}x{decoded.height}")
    return decoded, fmt


def resample_image(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Scale the whole of image onto a new canvas of exactly size."""
    return image.resize(
        size,
        Image.Resampling.LANCZOS,
        box=(0, 0, image.width, image.height),
    )


def encode_image(
    image: Image.Image,
    fmt: ImageFormat,
    params: PngExportParams | JpegExportParams | None = None,
) -> bytes:
    """
    Encode image in memory.

    Args:
        image: Image to encode
        fmt: Target format
        params: Encoder settings matching fmt (defaults when None)

    Returns:
        Encoded file content
    """
    save_kwargs: dict[str, object] = {}

    if fmt is ImageFormat.PNG:
        png = params or PngExportParams()
        if not isinstance(png, PngExportParams):
            raise TypeError(f"PNG encoding expects PngExportParams, got {type(png).__name__}")
        save_kwargs["compress_level"] = png.compression_level
    else:
        jpeg = params or JpegExportParams()
        if not isinstance(jpeg, JpegExportParams):
            raise TypeError(f"JPEG encoding expects JpegExportParams, got {type(jpeg).__name__}")
        save_kwargs["quality"] = jpeg.quality
        if image.mode in _JPEG_UNSAFE_MODES:
            image = _flatten_to_rgb(image)
        elif image.mode != "RGB" and image.mode != "L":
            image = image.convert("RGB")

    buffer = BytesIO()
    image.save(buffer, format=fmt.pil_format, **save_kwargs)
    data = buffer.getvalue()

    logger.debug(f"Encoded {image.width}x{image.height} as {fmt.pil_format}: {len(data)} bytes")
    return data


def _to_full_colour(image: Image.Image) -> Image.Image:
    if image.mode in ("RGB", "RGBA"):
        return image.copy()
    if image.mode in _ALPHA_MODES or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def _flatten_to_rgb(image: Image.Image) -> Image.Image:
    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, (255, 255, 255))
    background.paste(rgba, mask=rgba.split()[3])  # 3 is the alpha channel
    return background
