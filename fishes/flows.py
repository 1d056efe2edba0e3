"""User-facing flows: building a deck, managing the deck list and studying."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, MutableSequence, Sequence

from fishes.deck import Deck
from fishes.flashcard import Flashcard
from fishes.study_session import StudySession

RECENT_DECKS_LIMIT = 3


class InputError(ValueError):
    """Raised when the user supplies incomplete or unusable input."""


class DeckDraft:
    """A deck under construction that joins the deck list once it is named."""

    def __init__(self, decks: MutableSequence[Deck]) -> None:
        self.decks = decks
        self.deck = Deck("")

    def add_card(self, question: str, answer: str) -> Flashcard:
        """Add a card to the draft; both sides must be non-empty."""
        if not question or not answer:
            raise InputError("Flashcard must have question and answer")
        card = Flashcard(question, answer)
        self.deck.add_card(card)
        return card

    def save(self, name: str) -> Deck:
        """Name the draft and append it to the deck list."""
        if not name:
            raise InputError("Provide deck title")
        self.deck.name = name
        self.decks.append(self.deck)
        return self.deck


def remove_deck(decks: MutableSequence[Deck], index: int) -> Deck:
    """Remove and return the deck at ``index``; raises IndexError if absent."""
    if not 0 <= index < len(decks):
        raise IndexError(f"no deck at position {index}")
    return decks.pop(index)


def recent_decks(decks: Sequence[Deck], limit: int = RECENT_DECKS_LIMIT) -> list[Deck]:
    """Return the decks shown as recently used: the first ``limit`` of them."""
    return list(decks[: max(limit, 0)])


def random_deck(decks: Sequence[Deck], rng: random.Random | None = None) -> Deck | None:
    """Pick a deck at random, or None when there are none."""
    if not decks:
        return None
    chooser = rng if rng is not None else random.Random()
    return chooser.choice(list(decks))


class StudyRun:
    """Walks through a deck one card at a time, question then answer then rating."""

    def __init__(self, deck: Deck, clock: Callable[[], int] | None = None) -> None:
        self.deck = deck
        self._clock = clock if clock is not None else (lambda: int(time.time()))
        self._session = StudySession(deck)
        self._session.start(self._clock())
        self.current_card: Flashcard | None = None
        self.answer_shown = False
        self.next_question()

    @property
    def finished(self) -> bool:
        return self.current_card is None

    @property
    def question(self) -> str | None:
        return None if self.current_card is None else self.current_card.question

    def next_question(self) -> str | None:
        """Advance to the next card and return its question, or None when done."""
        self.answer_shown = False
        self.current_card = self._session.next_card()
        return self.question

    def reveal_answer(self) -> str | None:
        """Show the current card's answer, or None when there is no card."""
        self.answer_shown = True
        return None if self.current_card is None else self.current_card.answer

    def rate(self, answer: int) -> str | None:
        """Record how well the current card was known (1-5) and move on."""
        if self.current_card is None:
            raise InputError("there is no card to rate")
        self.current_card.adjust_difficulty_and_next_review(answer, self._clock())
        return self.next_question()