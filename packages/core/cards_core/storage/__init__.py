"""Card storage and review statistics."""

from cards_core.storage.review import ReviewStats
from cards_core.storage.store import (
    CardStore,
    CardStoreError,
    InMemoryCardStore,
    JsonFileCardStore,
)

__all__ = [
    "CardStore",
    "CardStoreError",
    "InMemoryCardStore",
    "JsonFileCardStore",
    "ReviewStats",
]
