"""Encode node: Compress the captured image for upload."""

from collections.abc import Awaitable, Callable
from typing import Any

from cards_core.imaging.encode import EncodeError, encode_image
from cards_core.schemas.outcome import FailureKind, PipelineFailure, PipelineStage
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_encode_node(
    quality: float,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Create an encode node that compresses at the given quality.

    Args:
        quality: JPEG quality on a 0-1 scale

    Returns:
        Node function
    """

    async def encode_node(state: dict[str, Any]) -> dict[str, Any]:
        """Encode ``state["image"]`` into ``state["payload"]``.

        Runs on the event loop thread; the pipeline starts no worker threads.
        """
        try:
            payload = encode_image(state.get("image"), quality=quality)
        except EncodeError as e:
            error_msg = f"Encode error: {e}"
            logger.error(error_msg)
            return {
                "failure": PipelineFailure(
                    stage=PipelineStage.ENCODING,
                    kind=FailureKind.ENCODE,
                    detail=str(e),
                ),
                "errors": [error_msg],
                "current_step": PipelineStage.ENCODING.value,
            }

        return {
            # The raw image is not retained past encoding
            "image": None,
            "payload": payload,
            "current_step": PipelineStage.ENCODING.value,
        }

    return encode_node
