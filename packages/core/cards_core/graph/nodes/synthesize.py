"""Synthesize node: Generate flashcards from extracted text."""

from collections.abc import Awaitable, Callable
from typing import Any

from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.model_adapters.errors import SynthesisError
from cards_core.schemas.outcome import PipelineStage
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)

SYNTHESIZE_PROMPT = """Create flashcards from the following text:
{text}

Provide the flashcards in JSON format as an array of objects with 'front' and 'back' fields."""


def build_prompt(text: str) -> str:
    """Embed extracted text verbatim in the generation instruction."""
    # str.format does not re-interpret braces inside the substituted text
    return SYNTHESIZE_PROMPT.format(text=text)


def create_synthesize_node(
    adapter: BaseCardsAdapter,
    max_tokens: int,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Create a synthesize node with the given model adapter.

    Args:
        adapter: Model adapter for the generation call
        max_tokens: Output length bound sent with the prompt

    Returns:
        Node function
    """

    async def synthesize_node(state: dict[str, Any]) -> dict[str, Any]:
        """Turn ``state["ocr"]`` into ``state["cards"]``."""
        prompt = build_prompt(state["ocr"].text)

        try:
            cards = await adapter.generate_cards(prompt=prompt, max_tokens=max_tokens)
        except SynthesisError as e:
            error_msg = f"Synthesis error: {e}"
            logger.error(error_msg)
            return {
                "failure": e.to_failure(),
                "errors": [error_msg],
                "current_step": PipelineStage.AWAITING_SYNTHESIS.value,
            }

        return {
            "ocr": None,
            "cards": cards,
            "current_step": PipelineStage.AWAITING_SYNTHESIS.value,
        }

    return synthesize_node
