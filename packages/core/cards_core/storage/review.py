"""Review session statistics."""

from dataclasses import dataclass, field
from uuid import UUID

from cards_core.schemas.cards import Card


@dataclass
class ReviewStats:
    """Counts of cards the learner knew or forgot in the current session."""

    knew_cards: list[UUID] = field(default_factory=list)
    forgot_cards: list[UUID] = field(default_factory=list)

    def add_knew_card(self, card: Card) -> None:
        self.knew_cards.append(card.id)

    def add_forgot_card(self, card: Card) -> None:
        self.forgot_cards.append(card.id)

    @property
    def knew(self) -> int:
        return len(self.knew_cards)

    @property
    def forgot(self) -> int:
        return len(self.forgot_cards)

    @property
    def total(self) -> int:
        return self.knew + self.forgot

    def reset(self) -> None:
        """Clear the session counts."""
        self.knew_cards.clear()
        self.forgot_cards.clear()
