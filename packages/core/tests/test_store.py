"""Tests for card storage."""

import json

import pytest

from cards_core.schemas.cards import FlashcardCandidate
from cards_core.storage import (
    CardStoreError,
    InMemoryCardStore,
    JsonFileCardStore,
    ReviewStats,
)


@pytest.fixture
def candidates() -> list[FlashcardCandidate]:
    return [
        FlashcardCandidate(front="Q1", back="A1"),
        FlashcardCandidate(front="Q2", back="A2"),
    ]


class TestInMemoryCardStore:
    """Tests for the in-memory store."""

    def test_save_assigns_ids_and_timestamps(
        self, candidates: list[FlashcardCandidate]
    ) -> None:
        store = InMemoryCardStore()

        saved = store.save_flashcards(candidates)

        assert [(c.front, c.back) for c in saved] == [("Q1", "A1"), ("Q2", "A2")]
        assert len({c.id for c in saved}) == 2
        assert all(c.creation_date.tzinfo is not None for c in saved)
        assert store.cards() == saved

    def test_save_refreshes_once(self, candidates: list[FlashcardCandidate]) -> None:
        store = InMemoryCardStore()
        refreshes: list[int] = []
        store.add_listener(lambda: refreshes.append(1))
        token = store.reload_token

        store.save_flashcards(candidates)

        assert refreshes == [1]
        assert store.reload_token != token

    def test_add_and_remove(self) -> None:
        store = InMemoryCardStore()
        card = store.add_card("Front", "Back")

        assert len(store) == 1
        assert store.remove_card(card.id) is True
        assert store.remove_card(card.id) is False
        assert store.cards() == []

    def test_reload_resets_stats(self) -> None:
        stats = ReviewStats()
        store = InMemoryCardStore(stats=stats)
        knew = store.add_card("Q", "A")
        forgot = store.add_card("Q2", "A2")
        stats.add_knew_card(knew)
        stats.add_forgot_card(forgot)
        assert (stats.knew, stats.forgot, stats.total) == (1, 1, 2)

        store.reload()

        assert stats.total == 0


class TestJsonFileCardStore:
    """Tests for the JSON-file store."""

    def test_persists_across_instances(
        self, tmp_path, candidates: list[FlashcardCandidate]
    ) -> None:
        path = tmp_path / "cards.json"
        saved = JsonFileCardStore(path).save_flashcards(candidates)

        reopened = JsonFileCardStore(path)

        assert reopened.cards() == saved
        assert [row["front"] for row in json.loads(path.read_text())] == ["Q1", "Q2"]

    def test_remove_rewrites_file(self, tmp_path) -> None:
        path = tmp_path / "cards.json"
        store = JsonFileCardStore(path)
        card = store.add_card("Q", "A")

        store.remove_card(card.id)

        assert json.loads(path.read_text()) == []

    def test_invalid_file_raises(self, tmp_path) -> None:
        path = tmp_path / "cards.json"
        path.write_text('{"not": "a list"}')

        with pytest.raises(CardStoreError):
            JsonFileCardStore(path)

    def test_failed_write_leaves_store_unchanged(
        self, tmp_path, monkeypatch, candidates: list[FlashcardCandidate]
    ) -> None:
        """Test that memory and file stay in step when the write fails."""
        path = tmp_path / "cards.json"
        store = JsonFileCardStore(path)
        kept = store.add_card("Kept", "Card")
        before = path.read_text()
        refreshes: list[int] = []
        store.add_listener(lambda: refreshes.append(1))

        def fail_replace(src, dst) -> None:
            raise OSError("disk full")

        monkeypatch.setattr("cards_core.storage.store.os.replace", fail_replace)

        with pytest.raises(CardStoreError):
            store.save_flashcards(candidates)
        with pytest.raises(CardStoreError):
            store.remove_card(kept.id)

        assert store.cards() == [kept]
        assert path.read_text() == before
        assert refreshes == []
        assert [p.name for p in tmp_path.iterdir()] == ["cards.json"]

    def test_write_leaves_no_temp_files(
        self, tmp_path, candidates: list[FlashcardCandidate]
    ) -> None:
        path = tmp_path / "cards.json"

        JsonFileCardStore(path).save_flashcards(candidates)

        assert [p.name for p in tmp_path.iterdir()] == ["cards.json"]
