"""Base model adapter interface."""

from abc import ABC, abstractmethod

from cards_core.schemas.cards import FlashcardCandidate
from cards_core.schemas.images import EncodedImage
from cards_core.schemas.ocr import OcrResult


class BaseCardsAdapter(ABC):
    """Abstract base class for the remote OCR and synthesis services."""

    @abstractmethod
    async def request_ocr(self, payload: EncodedImage) -> OcrResult:
        """Extract text from an encoded image.

        Args:
            payload: Encoded image

        Returns:
            Decoded OCR result

        Raises:
            OcrError: On transport, status, empty or undecodable responses
        """
        pass

    @abstractmethod
    async def generate_cards(
        self,
        prompt: str,
        max_tokens: int,
    ) -> list[FlashcardCandidate]:
        """Generate flashcards from a prompt.

        Args:
            prompt: Instruction text that embeds the extracted text
            max_tokens: Maximum output length bound

        Returns:
            Decoded flashcards, possibly empty

        Raises:
            SynthesisError: On transport, status, empty or undecodable responses
        """
        pass

    async def close(self) -> None:
        """Release any held connections."""
        return None
