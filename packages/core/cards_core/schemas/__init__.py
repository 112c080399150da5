"""Data schemas for the pipeline.

This module exports the values that flow through the image-to-flashcard
pipeline, from the encoded image to the persisted card.
"""

from cards_core.schemas.cards import Card, FlashcardCandidate, FlashcardList
from cards_core.schemas.images import EncodedImage
from cards_core.schemas.ocr import OcrResult
from cards_core.schemas.outcome import (
    FailureKind,
    PipelineFailure,
    PipelineOutcome,
    PipelineStage,
)

__all__ = [
    # Stage payloads
    "EncodedImage",
    "OcrResult",
    # Cards
    "Card",
    "FlashcardCandidate",
    "FlashcardList",
    # Outcome
    "FailureKind",
    "PipelineFailure",
    "PipelineOutcome",
    "PipelineStage",
]
