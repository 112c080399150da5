"""Shared fixtures for pipeline tests."""

import json
from collections.abc import Callable
from io import BytesIO
from typing import Any

import httpx
import pytest
from PIL import Image

from cards_core.model_adapters.http import HTTPAdapter

OCR_URL = "https://ocr.test/v1/ocr"
GENERATION_URL = "https://llm.test/v1/generate"
API_KEY = "test-key"

Responder = Callable[[httpx.Request], httpx.Response]


def json_response(payload: Any, status_code: int = 200) -> Responder:
    """Respond with a JSON body."""
    return lambda request: httpx.Response(status_code, content=json.dumps(payload))


def raw_response(content: bytes, status_code: int = 200) -> Responder:
    """Respond with a raw body."""
    return lambda request: httpx.Response(status_code, content=content)


def raise_error(error_cls: type[httpx.RequestError]) -> Responder:
    """Fail at the transport level."""

    def _respond(request: httpx.Request) -> httpx.Response:
        raise error_cls("simulated failure", request=request)

    return _respond


class FakeService:
    """Routes requests to per-endpoint responders and records them."""

    def __init__(self) -> None:
        self.ocr: Responder = json_response({"text": "Mitochondria make ATP"})
        self.generation: Responder = json_response(
            [{"front": "What makes ATP?", "back": "Mitochondria"}]
        )
        self.requests: dict[str, list[httpx.Request]] = {
            OCR_URL: [],
            GENERATION_URL: [],
        }

    @property
    def ocr_calls(self) -> int:
        return len(self.requests[OCR_URL])

    @property
    def generation_calls(self) -> int:
        return len(self.requests[GENERATION_URL])

    def body(self, url: str, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[url][index].content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests[url].append(request)
        if url == OCR_URL:
            return self.ocr(request)
        return self.generation(request)

    def adapter(self, **kwargs: Any) -> HTTPAdapter:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handle))
        return HTTPAdapter(
            api_key=API_KEY,
            ocr_url=OCR_URL,
            generation_url=GENERATION_URL,
            client=client,
            **kwargs,
        )


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def sample_image() -> Image.Image:
    """A small RGB image."""
    return Image.new("RGB", (64, 48), color="white")


@pytest.fixture
def sample_png() -> bytes:
    """PNG bytes of a small image with an alpha channel."""
    img = Image.new("RGBA", (32, 32), color=(255, 0, 0, 128))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
