"""cards-core: Turn photographed notes into flashcards.

A photo is compressed to JPEG, sent to an OCR endpoint, and the extracted
text is sent to a language-model endpoint that writes flashcards. The
resulting front/back pairs are handed to a card store.

    >>> from cards_core import CardsPipeline, InMemoryCardStore, Settings
    >>> pipeline = CardsPipeline.from_settings(Settings())
    >>> store = InMemoryCardStore()
    >>> outcome = await pipeline.run(image)
    >>> if outcome.ok:
    ...     store.save_flashcards(outcome.cards)

UI code that prefers callbacks uses ``pipeline.process(image, on_complete)``,
which calls ``on_complete`` once with the flashcards or ``None``.
"""

from cards_core.graph import PipelineConfig, build_pipeline_graph
from cards_core.imaging import EncodeError, encode_image
from cards_core.model_adapters import (
    BaseCardsAdapter,
    HTTPAdapter,
    OcrError,
    StageError,
    SynthesisError,
)
from cards_core.pipeline import CardsPipeline
from cards_core.schemas import (
    Card,
    FailureKind,
    FlashcardCandidate,
    OcrResult,
    PipelineOutcome,
    PipelineStage,
)
from cards_core.settings import ConfigurationError, Settings
from cards_core.storage import InMemoryCardStore, JsonFileCardStore, ReviewStats

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "CardsPipeline",
    "PipelineConfig",
    "build_pipeline_graph",
    "encode_image",
    # Adapters
    "BaseCardsAdapter",
    "HTTPAdapter",
    # Errors
    "ConfigurationError",
    "EncodeError",
    "OcrError",
    "StageError",
    "SynthesisError",
    # Schemas
    "Card",
    "FailureKind",
    "FlashcardCandidate",
    "OcrResult",
    "PipelineOutcome",
    "PipelineStage",
    # Storage and settings
    "InMemoryCardStore",
    "JsonFileCardStore",
    "ReviewStats",
    "Settings",
]
