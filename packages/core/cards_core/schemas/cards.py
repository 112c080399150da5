"""Flashcard schemas."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class FlashcardCandidate(BaseModel):
    """An unpersisted front/back pair produced by the synthesis endpoint."""

    front: str = Field(..., description="Question/prompt side")
    back: str = Field(..., description="Answer side")

    model_config = ConfigDict(strict=True, frozen=True)


# Decoder for the synthesis endpoint's response body
FlashcardList = TypeAdapter(list[FlashcardCandidate])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Card(BaseModel):
    """A persisted flashcard."""

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    front: str = Field(..., description="Question/prompt side")
    back: str = Field(..., description="Answer side")
    creation_date: datetime = Field(
        default_factory=_utcnow, description="When the card was stored"
    )

    @classmethod
    def from_candidate(cls, candidate: FlashcardCandidate) -> "Card":
        """Create a new card with a fresh id and timestamp."""
        return cls(front=candidate.front, back=candidate.back)
