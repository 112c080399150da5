"""Build the image-to-flashcards graph.

The graph walks the pipeline states in order::

    encode -> ocr -> synthesize -> END

Any node that records a failure routes straight to END, so a failed stage
never triggers the next network call.
"""

from typing import Annotated, Any, TypedDict

from langgraph.graph import END, StateGraph

from cards_core.graph.config import PipelineConfig
from cards_core.graph.nodes import encode, ocr, synthesize
from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.schemas.cards import FlashcardCandidate
from cards_core.schemas.images import EncodedImage
from cards_core.schemas.ocr import OcrResult
from cards_core.schemas.outcome import PipelineFailure


def _keep_last_str(existing: str | None, incoming: str | None) -> str | None:
    """Keep the latest value for progress tracking fields."""
    return incoming if incoming else existing


def _merge_errors(existing: list[str], incoming: list[str]) -> list[str]:
    """Combine error lists, deduplicating."""
    if not existing:
        return list(incoming or [])
    if not incoming:
        return list(existing)
    return list(dict.fromkeys([*existing, *incoming]))


class CardsPipelineState(TypedDict, total=False):
    """State passed through the flashcard pipeline."""

    image: Any
    payload: EncodedImage | None
    ocr: OcrResult | None
    cards: list[FlashcardCandidate]
    failure: PipelineFailure | None
    current_step: Annotated[str, _keep_last_str]
    errors: Annotated[list[str], _merge_errors]


def _next_or_end(next_node: str):
    """Route to ``next_node`` unless the previous node failed."""

    def _route(state: CardsPipelineState) -> str:
        return END if state.get("failure") is not None else next_node

    _route.__name__ = f"route_to_{next_node}"
    return _route


def build_pipeline_graph(
    adapter: BaseCardsAdapter,
    config: PipelineConfig | None = None,
):
    """Build the encode, OCR and synthesis pipeline.

    Args:
        adapter: Model adapter for the OCR and generation calls
        config: Optional pipeline configuration

    Returns:
        Compiled StateGraph ready for invocation
    """
    resolved_config = config or PipelineConfig()

    graph = StateGraph(CardsPipelineState)

    graph.add_node("encode", encode.create_encode_node(resolved_config.jpeg_quality))
    graph.add_node("ocr", ocr.create_ocr_node(adapter))
    graph.add_node(
        "synthesize",
        synthesize.create_synthesize_node(adapter, resolved_config.max_tokens),
    )

    graph.set_entry_point("encode")
    graph.add_conditional_edges("encode", _next_or_end("ocr"), ["ocr", END])
    graph.add_conditional_edges(
        "ocr", _next_or_end("synthesize"), ["synthesize", END]
    )
    graph.add_edge("synthesize", END)

    return graph.compile()
