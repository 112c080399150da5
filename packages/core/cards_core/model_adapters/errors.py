"""Errors raised by model adapters."""

from cards_core.schemas.outcome import FailureKind, PipelineFailure, PipelineStage


class StageError(Exception):
    """A remote stage failed.

    Attributes:
        kind: Failure category
        detail: Human readable cause
        status_code: HTTP status for ``FailureKind.HTTP_STATUS`` failures
    """

    stage: PipelineStage = PipelineStage.IDLE

    def __init__(
        self,
        kind: FailureKind,
        detail: str = "",
        status_code: int | None = None,
    ):
        message = f"{kind.value}: {detail}" if detail else kind.value
        super().__init__(message)
        self.kind = kind
        self.detail = detail
        self.status_code = status_code

    def to_failure(self) -> PipelineFailure:
        """Describe this error as the failure of its pipeline stage."""
        return PipelineFailure(
            stage=self.stage,
            kind=self.kind,
            detail=self.detail,
            status_code=self.status_code,
        )


class OcrError(StageError):
    """The OCR request failed."""

    stage = PipelineStage.AWAITING_OCR


class SynthesisError(StageError):
    """The flashcard synthesis request failed."""

    stage = PipelineStage.AWAITING_SYNTHESIS
