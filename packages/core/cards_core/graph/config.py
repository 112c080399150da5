"""Configuration for the flashcard pipeline graph."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Behaviour of one pipeline.

    Endpoints and the credential live in ``Settings``; this holds the values
    that shape how a single image is processed.
    """

    # JPEG quality on a 0-1 scale
    jpeg_quality: float = 0.8

    # Output bound for the generation endpoint
    max_tokens: int = 1000

    # Cancel the previous in-flight process() call when a new one starts
    supersede: bool = False

    def __post_init__(self) -> None:
        if not 0.0 < self.jpeg_quality <= 1.0:
            raise ValueError(f"jpeg_quality must be in (0, 1], got {self.jpeg_quality}")
        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
