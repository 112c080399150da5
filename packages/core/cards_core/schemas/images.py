"""Encoded image payload schema."""

from pydantic import BaseModel, ConfigDict, Field


class EncodedImage(BaseModel):
    """A compressed image ready to be embedded in a JSON request body.

    Created by the image encoder and consumed once by the OCR request.
    """

    image_bytes: bytes = Field(..., description="Compressed JPEG bytes")
    encoded: str = Field(..., description="Base64 text of image_bytes")
    width: int = Field(..., ge=1, description="Pixel width of the source image")
    height: int = Field(..., ge=1, description="Pixel height of the source image")

    model_config = ConfigDict(frozen=True)

    @property
    def size_bytes(self) -> int:
        """Size of the compressed image in bytes."""
        return len(self.image_bytes)
