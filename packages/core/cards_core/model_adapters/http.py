"""HTTP adapter for JSON OCR and generation endpoints."""

from typing import Any

import httpx
from pydantic import ValidationError

from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.model_adapters.errors import OcrError, StageError, SynthesisError
from cards_core.schemas.cards import FlashcardCandidate, FlashcardList
from cards_core.schemas.images import EncodedImage
from cards_core.schemas.ocr import OcrResult
from cards_core.schemas.outcome import FailureKind
from cards_core.utils.logging import get_logger
from cards_core.utils.retry import format_exception, with_retry

logger = get_logger(__name__)

# Default timeout for API calls (seconds)
DEFAULT_TIMEOUT = 60.0


class HTTPAdapter(BaseCardsAdapter):
    """Adapter that POSTs JSON to an OCR endpoint and a generation endpoint."""

    def __init__(
        self,
        api_key: str,
        ocr_url: str,
        generation_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = 1,
        check_status: bool = True,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the HTTP adapter.

        Args:
            api_key: Bearer token sent to both endpoints
            ocr_url: OCR endpoint URL
            generation_url: Flashcard generation endpoint URL
            timeout: Request timeout in seconds
            max_attempts: Attempts per request; 1 means no retry
            check_status: Treat non-2xx responses as failures before decoding
            client: Optional preconfigured client (tests pass a mock transport)
        """
        self._api_key = api_key
        self.ocr_url = ocr_url
        self.generation_url = generation_url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.check_status = check_status

        self._client = client
        self._owns_client = client is None
        logger.info(
            f"Initialized HTTP adapter (ocr={ocr_url}, generation={generation_url})"
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _post(
        self,
        url: str,
        body: dict[str, Any],
        error_cls: type[StageError],
        operation_name: str,
    ) -> bytes:
        """POST a JSON body and return the raw response body.

        Transport failures, undecodable content encodings, non-2xx statuses
        (when checked) and empty bodies are raised as ``error_cls``.
        """

        async def _make_request() -> httpx.Response:
            try:
                return await self.client.post(url, json=body, headers=self._headers())
            except httpx.TimeoutException as e:
                raise TimeoutError(f"{operation_name} timed out") from e
            except httpx.DecodingError as e:
                raise error_cls(
                    FailureKind.DECODE_ERROR,
                    f"{operation_name} body could not be decoded: {e}",
                ) from e
            except httpx.RequestError as e:
                raise ConnectionError(f"{operation_name} transport error") from e
            except httpx.InvalidURL as e:
                raise error_cls(FailureKind.TRANSPORT, f"Invalid URL {url}: {e}") from e

        logger.debug(f"Starting {operation_name} ({url})")
        try:
            response = await with_retry(
                _make_request,
                max_attempts=self.max_attempts,
                operation_name=operation_name,
            )
        except (ConnectionError, TimeoutError) as e:
            raise error_cls(FailureKind.TRANSPORT, format_exception(e)) from e

        if self.check_status and not response.is_success:
            raise error_cls(
                FailureKind.HTTP_STATUS,
                f"{operation_name} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            raise error_cls(
                FailureKind.EMPTY_RESPONSE, f"No data received from {operation_name}"
            )

        logger.debug(
            f"Completed {operation_name} (HTTP {response.status_code}, "
            f"{len(response.content)} bytes)"
        )
        return response.content

    async def request_ocr(self, payload: EncodedImage) -> OcrResult:
        """Send the encoded image to the OCR endpoint."""
        logger.info(f"Requesting OCR for image ({payload.size_bytes} bytes)")
        content = await self._post(
            self.ocr_url,
            {"image_data": payload.encoded},
            OcrError,
            "ocr_request",
        )
        try:
            result = OcrResult.model_validate_json(content)
        except ValidationError as e:
            raise OcrError(
                FailureKind.DECODE_ERROR,
                f"Failed to decode OCR response: {e.error_count()} error(s)",
            ) from e

        logger.info(f"OCR extracted {len(result.text)} characters")
        return result

    async def generate_cards(
        self,
        prompt: str,
        max_tokens: int,
    ) -> list[FlashcardCandidate]:
        """Send the prompt to the generation endpoint."""
        content = await self._post(
            self.generation_url,
            {"prompt": prompt, "max_tokens": max_tokens},
            SynthesisError,
            "generate_cards",
        )
        try:
            cards = FlashcardList.validate_json(content)
        except ValidationError as e:
            raise SynthesisError(
                FailureKind.DECODE_ERROR,
                f"Failed to decode generation response: {e.error_count()} error(s)",
            ) from e

        logger.info(f"Generated {len(cards)} cards")
        return cards

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed HTTP client")
