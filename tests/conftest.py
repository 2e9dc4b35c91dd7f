"""Test configuration and fixtures for thumbnailr.

Source images are synthesized with Pillow per test so no media has to be
checked in.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw


def _draw_source(size: tuple[int, int], mode: str = "RGB") -> Image.Image:
    width, height = size
    base_mode = "RGBA" if mode in ("RGBA", "LA") else "RGB"
    fill = (73, 109, 137, 255) if base_mode == "RGBA" else (73, 109, 137)
    img = Image.new(base_mode, size, color=fill)
    draw = ImageDraw.Draw(img)

    # Grid lines so resampling has detail to work on
    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill="white", width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill="white", width=2)

    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )

    # Other modes (P, 1, L, LA, CMYK) are derived from the RGB drawing
    if mode != base_mode:
        img = img.convert(mode)
    return img


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a synthetic source image and returning its path.

    Usage: make_image("photo.jpg", (800, 600))
    The Pillow format comes from the suffix unless ``pil_format`` is given.
    """

    def _make(
        name: str,
        size: tuple[int, int],
        mode: str = "RGB",
        pil_format: str | None = None,
    ) -> Path:
        path = tmp_path / name
        img = _draw_source(size, mode)
        if pil_format is None:
            suffix = path.suffix.lower()
            pil_format = "PNG" if suffix == ".png" else "JPEG"
        img.save(path, pil_format)
        return path

    return _make


@pytest.fixture
def landscape_jpeg(make_image: Callable[..., Path]) -> Path:
    """800x600 JPEG."""
    return make_image("landscape.jpg", (800, 600))


@pytest.fixture
def portrait_jpeg(make_image: Callable[..., Path]) -> Path:
    """600x800 JPEG."""
    return make_image("portrait.jpeg", (600, 800))


@pytest.fixture
def landscape_png(make_image: Callable[..., Path]) -> Path:
    """800x600 PNG."""
    return make_image("landscape.png", (800, 600))


@pytest.fixture
def transparent_png(make_image: Callable[..., Path]) -> Path:
    """400x200 RGBA PNG."""
    return make_image("transparent.png", (400, 200), mode="RGBA")
