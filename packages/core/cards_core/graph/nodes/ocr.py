"""OCR node: Extract text from the encoded image."""

from collections.abc import Awaitable, Callable
from typing import Any

from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.model_adapters.errors import OcrError
from cards_core.schemas.outcome import PipelineStage
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_ocr_node(
    adapter: BaseCardsAdapter,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Create an OCR node with the given model adapter.

    Args:
        adapter: Model adapter for the OCR call

    Returns:
        Node function
    """

    async def ocr_node(state: dict[str, Any]) -> dict[str, Any]:
        """Send ``state["payload"]`` to OCR and store the extracted text."""
        try:
            result = await adapter.request_ocr(state["payload"])
        except OcrError as e:
            error_msg = f"OCR error: {e}"
            logger.error(error_msg)
            return {
                "failure": e.to_failure(),
                "errors": [error_msg],
                "current_step": PipelineStage.AWAITING_OCR.value,
            }

        return {
            "payload": None,
            "ocr": result,
            "current_step": PipelineStage.AWAITING_OCR.value,
        }

    return ocr_node
