"""A pass through the cards of one deck."""

from __future__ import annotations

from collections.abc import Iterator

from fishes.deck import Deck
from fishes.flashcard import Flashcard


class StudySession:
    """Serves a deck's cards: cards with a pending review first, then the rest."""

    def __init__(self, deck: Deck) -> None:
        self.deck = deck
        self._order: list[int] = []
        self._position: int | None = None

    def start(self, now: int | None = None) -> None:
        """Build the card order and rewind to its beginning."""
        due = self.deck.due_card_indexes(now)
        due_set = set(due)
        self._order.extend(due)
        self._order.extend(
            index for index, _ in enumerate(self.deck.cards) if index not in due_set
        )
        if self._order:
            self._position = 0

    def next_card(self) -> Flashcard | None:
        """Return the next card, or None when the session is over or not started."""
        if self._position is None or self._position >= len(self._order):
            return None
        card = self.deck.cards[self._order[self._position]]
        self._position += 1
        return card

    def __iter__(self) -> Iterator[Flashcard]:
        while (card := self.next_card()) is not None:
            yield card