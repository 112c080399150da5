"""Pipeline orchestrator: image in, flashcards out.

``CardsPipeline.run`` returns a typed ``PipelineOutcome``. ``process`` is the
callback entry point used by UI code: it schedules ``run`` and hands the
callback either the flashcard list or ``None``, exactly once.
"""

import asyncio
from collections.abc import Callable

from cards_core.graph.build_pipeline_graph import build_pipeline_graph
from cards_core.graph.config import PipelineConfig
from cards_core.imaging.encode import RawImage
from cards_core.model_adapters.base import BaseCardsAdapter
from cards_core.model_adapters.http import HTTPAdapter
from cards_core.schemas.cards import FlashcardCandidate
from cards_core.schemas.outcome import FailureKind, PipelineOutcome, PipelineStage
from cards_core.settings import Settings
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)

CompletionCallback = Callable[[list[FlashcardCandidate] | None], None]


class CardsPipeline:
    """Turns a photographed page into flashcard candidates."""

    def __init__(
        self,
        adapter: BaseCardsAdapter,
        config: PipelineConfig | None = None,
    ):
        """Initialize the pipeline.

        Args:
            adapter: Model adapter for the OCR and generation calls
            config: Optional pipeline configuration
        """
        self.adapter = adapter
        self.config = config or PipelineConfig()
        self._graph = build_pipeline_graph(adapter, self.config)
        self._inflight: asyncio.Task | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "CardsPipeline":
        """Build a pipeline with an HTTP adapter configured from settings.

        Raises:
            ConfigurationError: If the credential or an endpoint is missing
        """
        ocr_url, generation_url = settings.require_endpoints()
        adapter = HTTPAdapter(
            api_key=settings.require_api_key(),
            ocr_url=ocr_url,
            generation_url=generation_url,
            timeout=settings.request_timeout,
            max_attempts=settings.max_attempts,
            check_status=settings.check_status,
        )
        config = PipelineConfig(
            jpeg_quality=settings.jpeg_quality,
            max_tokens=settings.max_tokens,
            supersede=settings.supersede,
        )
        return cls(adapter, config)

    async def run(self, image: RawImage) -> PipelineOutcome:
        """Run one pipeline instance to completion.

        Stage failures are logged and returned as a failed outcome; only
        cancellation propagates.

        Args:
            image: PIL image, encoded image bytes, or an image path

        Returns:
            Flashcards on success, otherwise the failing stage and cause
        """
        try:
            result = await self._graph.ainvoke({"image": image})
        except Exception as e:
            logger.exception(f"Pipeline failed unexpectedly: {e}")
            return PipelineOutcome.failed(
                PipelineStage.DONE, FailureKind.UNEXPECTED, str(e)
            )

        failure = result.get("failure")
        if failure is not None:
            logger.warning(f"Pipeline produced no flashcards: {failure}")
            return PipelineOutcome(failure=failure)

        cards = result.get("cards", [])
        logger.info(f"Pipeline produced {len(cards)} flashcards")
        return PipelineOutcome.succeeded(cards)

    def process(
        self,
        image: RawImage,
        on_complete: CompletionCallback,
        *,
        deliver_on: asyncio.AbstractEventLoop | None = None,
    ) -> asyncio.Task:
        """Start a pipeline instance and report its result through a callback.

        Must be called from a running event loop. ``on_complete`` receives the
        flashcard list, or ``None`` on any failure or cancellation, exactly
        once. It runs on the calling loop unless ``deliver_on`` names another
        loop, in which case it is scheduled there thread-safely.

        Args:
            image: PIL image, encoded image bytes, or an image path
            on_complete: Callback receiving ``list[FlashcardCandidate] | None``
            deliver_on: Optional loop to deliver the callback on

        Returns:
            The running task; cancel it to abandon the request
        """
        loop = asyncio.get_running_loop()

        if self.config.supersede and self._inflight and not self._inflight.done():
            logger.info("Cancelling superseded pipeline run")
            self._inflight.cancel()

        task = loop.create_task(self.run(image))
        self._inflight = task

        def _deliver(finished: asyncio.Task) -> None:
            if self._inflight is finished:
                self._inflight = None

            if finished.cancelled():
                outcome = PipelineOutcome.failed(
                    PipelineStage.DONE, FailureKind.CANCELLED, "run was cancelled"
                )
                logger.info(f"Pipeline produced no flashcards: {outcome.failure}")
            else:
                outcome = finished.result()
            cards = outcome.cards

            if deliver_on is not None and deliver_on is not loop:
                deliver_on.call_soon_threadsafe(on_complete, cards)
            else:
                on_complete(cards)

        task.add_done_callback(_deliver)
        return task

    async def close(self) -> None:
        """Release adapter resources."""
        await self.adapter.close()
