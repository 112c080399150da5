"""Image normalization for upload."""

from cards_core.imaging.encode import DEFAULT_QUALITY, EncodeError, RawImage, encode_image

__all__ = ["DEFAULT_QUALITY", "EncodeError", "RawImage", "encode_image"]
