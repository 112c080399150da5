"""Model adapters for the remote OCR and flashcard generation services."""

from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.model_adapters.errors import OcrError, StageError, SynthesisError
from cards_core.model_adapters.http import HTTPAdapter

__all__ = [
    "BaseCardsAdapter",
    "HTTPAdapter",
    "OcrError",
    "StageError",
    "SynthesisError",
]
