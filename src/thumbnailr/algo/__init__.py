"""Thumbnail sizing and image codec algorithms."""

from .fit_dimensions import fit_dimensions
from .image_codec import decode_image, encode_image, resample_image

__all__ = ["decode_image", "encode_image", "fit_dimensions", "resample_image"]
