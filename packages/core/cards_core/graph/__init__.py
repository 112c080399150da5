"""LangGraph pipeline components."""

from cards_core.graph.build_pipeline_graph import (
    CardsPipelineState,
    build_pipeline_graph,
)
from cards_core.graph.config import PipelineConfig

__all__ = [
    "CardsPipelineState",
    "PipelineConfig",
    "build_pipeline_graph",
]
