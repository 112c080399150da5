"""Pipeline stage, failure and outcome schemas.

Every pipeline invocation ends in a ``PipelineOutcome``. Callers that only
need the baseline contract read ``outcome.cards`` (``None`` on failure);
callers that need to tell causes apart read ``outcome.failure``.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from cards_core.schemas.cards import FlashcardCandidate


class PipelineStage(str, Enum):
    """States of one pipeline instance."""

    IDLE = "idle"
    ENCODING = "encoding"
    AWAITING_OCR = "awaiting_ocr"
    AWAITING_SYNTHESIS = "awaiting_synthesis"
    DONE = "done"


class FailureKind(str, Enum):
    """Why a pipeline instance produced no flashcards."""

    ENCODE = "encode"
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    DECODE_ERROR = "decode_error"
    HTTP_STATUS = "http_status"
    CANCELLED = "cancelled"
    UNEXPECTED = "unexpected"


class PipelineFailure(BaseModel):
    """The stage and cause of a failed pipeline instance."""

    stage: PipelineStage = Field(..., description="Stage that failed")
    kind: FailureKind = Field(..., description="Failure category")
    detail: str = Field("", description="Human readable cause")
    status_code: int | None = Field(None, description="HTTP status, if any")

    def __str__(self) -> str:
        text = f"{self.stage.value}: {self.kind.value}"
        if self.status_code is not None:
            text += f" (HTTP {self.status_code})"
        if self.detail:
            text += f" - {self.detail}"
        return text


class PipelineOutcome(BaseModel):
    """Result of one pipeline invocation: flashcards or a failure."""

    cards: list[FlashcardCandidate] | None = None
    failure: PipelineFailure | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "PipelineOutcome":
        if (self.cards is None) == (self.failure is None):
            raise ValueError("outcome needs exactly one of cards or failure")
        return self

    @property
    def ok(self) -> bool:
        """Whether the pipeline produced a flashcard list."""
        return self.failure is None

    @classmethod
    def succeeded(cls, cards: list[FlashcardCandidate]) -> "PipelineOutcome":
        return cls(cards=list(cards))

    @classmethod
    def failed(
        cls,
        stage: PipelineStage,
        kind: FailureKind,
        detail: str = "",
        status_code: int | None = None,
    ) -> "PipelineOutcome":
        return cls(
            failure=PipelineFailure(
                stage=stage, kind=kind, detail=detail, status_code=status_code
            )
        )
