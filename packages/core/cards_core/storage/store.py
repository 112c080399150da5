"""Card storage: the sink for generated flashcards."""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path
from uuid import UUID, uuid4

from pydantic import TypeAdapter, ValidationError

from cards_core.schemas.cards import Card, FlashcardCandidate
from cards_core.storage.review import ReviewStats
from cards_core.utils.logging import get_logger

logger = get_logger(__name__)

_CardList = TypeAdapter(list[Card])


class CardStoreError(Exception):
    """Error when the card store cannot be read or written."""

    pass


class CardStore(ABC):
    """A collection of persisted cards with refresh notifications."""

    def __init__(self, stats: ReviewStats | None = None):
        self.stats = stats
        self.reload_token: UUID = uuid4()
        self._listeners: list[Callable[[], None]] = []

    @abstractmethod
    def _insert(self, cards: list[Card]) -> None:
        """Persist new cards."""

    @abstractmethod
    def _delete(self, card_id: UUID) -> bool:
        """Delete a card, returning whether it existed."""

    @abstractmethod
    def _all(self) -> list[Card]:
        """Return every stored card in any order."""

    def cards(self) -> list[Card]:
        """Return stored cards, oldest first."""
        return sorted(self._all(), key=lambda card: card.creation_date)

    def __len__(self) -> int:
        return len(self._all())

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Register a callable invoked after every refresh."""
        self._listeners.append(listener)

    def refresh(self) -> None:
        """Invalidate cached views of the collection."""
        self.reload_token = uuid4()
        for listener in self._listeners:
            listener()

    def reload(self) -> None:
        """Refresh views and start a new review session."""
        if self.stats is not None:
            self.stats.reset()
        self.refresh()

    def save_flashcards(self, candidates: Iterable[FlashcardCandidate]) -> list[Card]:
        """Persist each candidate as a new card, then refresh.

        Args:
            candidates: Flashcards produced by the pipeline, in order

        Returns:
            The stored cards, in the same order
        """
        cards = [Card.from_candidate(candidate) for candidate in candidates]
        self._insert(cards)
        logger.info(f"Saved {len(cards)} flashcards")
        self.refresh()
        return cards

    def add_card(self, front: str, back: str) -> Card:
        """Store a manually written card."""
        return self.save_flashcards([FlashcardCandidate(front=front, back=back)])[0]

    def remove_card(self, card_id: UUID) -> bool:
        """Delete a card by id.

        Returns:
            True if a card was removed
        """
        removed = self._delete(card_id)
        if removed:
            logger.debug(f"Removed card {card_id}")
            self.refresh()
        return removed


class InMemoryCardStore(CardStore):
    """Card store that lives for the duration of the process."""

    def __init__(self, stats: ReviewStats | None = None):
        super().__init__(stats)
        self._cards: dict[UUID, Card] = {}

    def _insert(self, cards: list[Card]) -> None:
        for card in cards:
            self._cards[card.id] = card

    def _delete(self, card_id: UUID) -> bool:
        return self._cards.pop(card_id, None) is not None

    def _all(self) -> list[Card]:
        return list(self._cards.values())


class JsonFileCardStore(InMemoryCardStore):
    """Card store backed by a JSON file, rewritten after every change."""

    def __init__(self, path: str | Path, stats: ReviewStats | None = None):
        super().__init__(stats)
        self.path = Path(path)
        if self.path.exists():
            self._load()

    def _load(self) -> None:
        try:
            cards = _CardList.validate_json(self.path.read_bytes())
        except OSError as e:
            raise CardStoreError(f"Failed to read {self.path}: {e}") from e
        except ValidationError as e:
            raise CardStoreError(f"Invalid card file {self.path}: {e}") from e

        super()._insert(cards)
        logger.info(f"Loaded {len(cards)} cards from {self.path}")

    def _write(self, cards: list[Card]) -> None:
        """Replace the file with ``cards``.

        The JSON is written to a sibling temp file and swapped in, so a crash
        leaves either the old or the new file on disk.
        """
        cards = sorted(cards, key=lambda card: card.creation_date)
        data = _CardList.dump_python(cards, mode="json")
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(data, tmp, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CardStoreError(f"Failed to write {self.path}: {e}") from e

    def _insert(self, cards: list[Card]) -> None:
        # Memory only changes once the file holds the new cards
        self._write([*self._all(), *cards])
        super()._insert(cards)

    def _delete(self, card_id: UUID) -> bool:
        if card_id not in self._cards:
            return False
        self._write([card for card in self._all() if card.id != card_id])
        return super()._delete(card_id)
