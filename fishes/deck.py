"""Decks of flashcards."""

from __future__ import annotations

import time
from collections.abc import Iterator
from typing import ClassVar

from fishes.flashcard import Flashcard


class Deck:
    """A named, ordered collection of flashcards.

    ``Deck.count`` tracks how many decks exist; it grows with every new deck
    and shrinks (never below zero) when a deck is removed.
    """

    count: ClassVar[int] = 0

    def __init__(self, name: str) -> None:
        self.name = name
        self.cards: list[Flashcard] = []
        Deck.count += 1

    def add_card(self, card: Flashcard) -> None:
        self.cards.append(card)

    def remove(self) -> None:
        """Mark the deck as removed from the live deck count."""
        if Deck.count > 0:
            Deck.count -= 1

    def due_card_indexes(self, now: int | None = None) -> list[int]:
        """Return positions of cards whose review time lies after ``now``."""
        moment = int(time.time()) if now is None else now
        return [index for index, card in enumerate(self.cards) if card.next_review > moment]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck(name={self.name!r}, cards={len(self.cards)})"