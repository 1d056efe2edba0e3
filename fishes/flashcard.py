"""Flashcards and their spaced-repetition scheduling."""

from __future__ import annotations

import itertools
import time

DAY_S = 86400
HOUR_S = 3600
MINUTE_S = 60

MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 5

# rating -> (difficulty change, seconds until the next review)
_SCHEDULE: dict[int, tuple[int, int]] = {
    1: (-2, 5 * MINUTE_S),
    2: (-1, HOUR_S),
    3: (0, 5 * HOUR_S),
    4: (1, DAY_S),
    5: (2, 3 * DAY_S),
}

_ids = itertools.count(1)


def generate_id() -> int:
    """Return the next identifier from the process-wide sequence."""
    return next(_ids)


def _clamp(value: int) -> int:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value))


def _current_time(now: int | None) -> int:
    return int(time.time()) if now is None else now


class Flashcard:
    """A question/answer pair with a difficulty (0-5) and a review time."""

    __slots__ = ("id", "question", "answer", "_difficulty", "next_review")

    def __init__(
        self,
        question: str,
        answer: str,
        *,
        card_id: int | None = None,
        difficulty: int = MAX_DIFFICULTY,
        next_review: int = 0,
    ) -> None:
        self.id = generate_id() if card_id is None else card_id
        self.question = question
        self.answer = answer
        self._difficulty = _clamp(difficulty)
        self.next_review = next_review

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: int) -> None:
        self._difficulty = _clamp(value)

    def adjust_difficulty_and_next_review(
        self, last_answer: int, now: int | None = None
    ) -> None:
        """Update difficulty and schedule the next review from a 1-5 rating.

        Raises ValueError for a rating outside 1-5, leaving the card unchanged.
        """
        try:
            change, delay = _SCHEDULE[last_answer]
        except (KeyError, TypeError):
            raise ValueError(f"rating must be between 1 and 5, got {last_answer!r}") from None
        self.difficulty = self._difficulty + change
        self.next_review = _current_time(now) + delay

    def bump_difficulty(self) -> Flashcard:
        """Raise the difficulty by one (within bounds) and return the card."""
        self.difficulty = self._difficulty + 1
        return self

    def copy(self) -> Flashcard:
        """Return an independent card with the same id and contents."""
        return Flashcard(
            self.question,
            self.answer,
            card_id=self.id,
            difficulty=self._difficulty,
            next_review=self.next_review,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flashcard):
            return NotImplemented
        return (
            self.id == other.id
            and self.question == other.question
            and self.answer == other.answer
            and self._difficulty == other._difficulty
            and self.next_review == other.next_review
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Flashcard(id={self.id!r}, question={self.question!r}, "
            f"answer={self.answer!r}, difficulty={self._difficulty!r}, "
            f"next_review={self.next_review!r})"
        )