"""Command line interface.

Usage:
    python -m cards_core generate PHOTO.jpg --store cards.json
    python -m cards_core list --store cards.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from cards_core.pipeline import CardsPipeline
from cards_core.settings import ConfigurationError, Settings
from cards_core.storage.store import CardStore, InMemoryCardStore, JsonFileCardStore
from cards_core.utils.logging import configure_logging, get_logger, log_exceptions

logger = get_logger(__name__)


def _open_store(path: str | None) -> CardStore:
    return JsonFileCardStore(path) if path else InMemoryCardStore()


def _print_cards(cards) -> None:
    rows = [card.model_dump(mode="json") for card in cards]
    print(json.dumps(rows, indent=2, ensure_ascii=False))


@log_exceptions(logger)
async def _generate(image: Path, store: CardStore, settings: Settings) -> int:
    pipeline = CardsPipeline.from_settings(settings)
    try:
        outcome = await pipeline.run(image)
    finally:
        await pipeline.close()

    if outcome.failure is not None:
        print(f"No flashcards generated: {outcome.failure}", file=sys.stderr)
        return 1

    saved = store.save_flashcards(outcome.cards or [])
    _print_cards(saved)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cards-core",
        description="Generate flashcards from photographed notes.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Run OCR and flashcard generation on an image")
    gen.add_argument("image", help="Path to a photo or scan")
    gen.add_argument("--store", default=None, help="JSON file to append cards to")

    ls = sub.add_parser("list", help="Print stored cards")
    ls.add_argument("--store", required=True, help="JSON card file")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    # stdout carries the JSON output
    configure_logging(settings.log_level, stream="stderr")

    store = _open_store(args.store)

    if args.cmd == "list":
        _print_cards(store.cards())
        return 0

    image = Path(args.image)
    if not image.exists():
        print(f"Image not found: {image}", file=sys.stderr)
        return 2

    try:
        return asyncio.run(_generate(image, store, settings))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
