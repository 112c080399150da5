"""Image encoding for the OCR request."""

import base64
from io import BytesIO
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from cards_core.schemas.images import EncodedImage
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)

# Quality on a 0-1 scale, as the capture side reports it
DEFAULT_QUALITY = 0.8

RawImage = Union[Image.Image, bytes, str, Path]


class EncodeError(Exception):
    """Error when an image cannot be compressed for upload."""

    pass


def _open_image(image: RawImage) -> Image.Image:
    """Return a PIL image for any supported raw image input."""
    if isinstance(image, Image.Image):
        return image
    if not isinstance(image, (bytes, bytearray, str, Path)):
        raise EncodeError(f"Unsupported image input: {type(image).__name__}")

    try:
        if isinstance(image, (bytes, bytearray)):
            if not image:
                raise EncodeError("Empty image data")
            opened = Image.open(BytesIO(bytes(image)))
        else:
            opened = Image.open(Path(image))
        opened.load()
        return opened
    except FileNotFoundError as e:
        raise EncodeError(f"Image file not found: {e}") from e
    except UnidentifiedImageError as e:
        raise EncodeError(f"Unrecognized image data: {e}") from e
    except Image.DecompressionBombError as e:
        raise EncodeError(f"Image too large: {e}") from e
    except OSError as e:
        raise EncodeError(f"Failed to open image: {e}") from e


def encode_image(image: RawImage, quality: float = DEFAULT_QUALITY) -> EncodedImage:
    """Compress an image to JPEG and base64-encode it.

    Args:
        image: PIL image, encoded image bytes, or a path to an image file
        quality: JPEG quality on a 0-1 scale

    Returns:
        Encoded payload ready for the OCR request body

    Raises:
        EncodeError: If the image is empty, corrupt or cannot be compressed
    """
    if not 0.0 < quality <= 1.0:
        raise ValueError(f"quality must be in (0, 1], got {quality}")

    pil_image = _open_image(image)
    width, height = pil_image.size
    if width <= 0 or height <= 0:
        raise EncodeError(f"Image has no pixels ({width}x{height})")

    # JPEG has no alpha channel or palette
    if pil_image.mode != "RGB":
        logger.debug(f"Converting image from {pil_image.mode} to RGB")
        try:
            pil_image = pil_image.convert("RGB")
        except (OSError, ValueError) as e:
            raise EncodeError(
                f"Cannot convert {pil_image.mode} image to RGB: {e}"
            ) from e

    buffer = BytesIO()
    try:
        pil_image.save(buffer, format="JPEG", quality=round(quality * 100))
    except (OSError, ValueError) as e:
        raise EncodeError(f"JPEG compression failed: {e}") from e

    data = buffer.getvalue()
    if not data:
        raise EncodeError("JPEG compression produced no data")

    logger.debug(f"Encoded {width}x{height} image to {len(data)} JPEG bytes")
    return EncodedImage(
        image_bytes=data,
        encoded=base64.b64encode(data).decode("ascii"),
        width=width,
        height=height,
    )
