"""OCR response schema."""

from pydantic import BaseModel, ConfigDict, Field


class OcrResult(BaseModel):
    """Text extracted from an image by the OCR endpoint.

    The ``text`` field may be empty but must be present and a string.
    """

    text: str = Field(..., description="Extracted text")

    model_config = ConfigDict(strict=True, frozen=True)
