import time

import pytest

from fishes.flashcard import (
    DAY_S,
    HOUR_S,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    MINUTE_S,
    Flashcard,
    generate_id,
)


@pytest.mark.parametrize(
    "rating, expected",
    [
        (1, 300),
        (2, 3600),
        (3, 18000),
        (4, 86400),
        (5, 259200),
    ],
)
def test_schedule_delays_in_seconds(rating, expected):
    card = Flashcard("q", "a")
    card.adjust_difficulty_and_next_review(rating, 0)
    assert card.next_review == expected


def test_new_card_defaults():
    card = Flashcard("q", "a")
    assert card.question == "q"
    assert card.answer == "a"
    assert card.difficulty == MAX_DIFFICULTY
    assert card.next_review == 0


def test_generate_id_is_sequential():
    first = generate_id()
    second = generate_id()
    assert second == first + 1


def test_cards_get_increasing_ids():
    a = Flashcard("q1", "a1")
    b = Flashcard("q2", "a2")
    assert b.id == a.id + 1


@pytest.mark.parametrize(
    "rating, delta, delay",
    [
        (1, -2, 5 * MINUTE_S),
        (2, -1, HOUR_S),
        (3, 0, 5 * HOUR_S),
        (4, 1, DAY_S),
        (5, 2, 3 * DAY_S),
    ],
)
def test_adjust_follows_schedule(rating, delta, delay):
    start = 3
    card = Flashcard("q", "a", difficulty=start)
    now = 1_000_000
    card.adjust_difficulty_and_next_review(rating, now)
    assert card.difficulty == start + delta
    assert card.next_review == now + delay


def test_adjust_clamps_at_minimum():
    card = Flashcard("q", "a", difficulty=MIN_DIFFICULTY)
    card.adjust_difficulty_and_next_review(1, 0)
    assert card.difficulty == MIN_DIFFICULTY


def test_adjust_clamps_at_maximum():
    card = Flashcard("q", "a")
    card.adjust_difficulty_and_next_review(5, 0)
    assert card.difficulty == MAX_DIFFICULTY


@pytest.mark.parametrize("rating", [0, 6, -1, "3"])
def test_adjust_rejects_invalid_rating(rating):
    card = Flashcard("q", "a", difficulty=2, next_review=7)
    with pytest.raises(ValueError):
        card.adjust_difficulty_and_next_review(rating, 100)
    assert card.difficulty == 2
    assert card.next_review == 7


def test_adjust_defaults_to_current_time():
    card = Flashcard("q", "a")
    before = int(time.time())
    card.adjust_difficulty_and_next_review(4)
    after = int(time.time())
    assert before + DAY_S <= card.next_review <= after + DAY_S


def test_difficulty_setter_clamps():
    card = Flashcard("q", "a")
    card.difficulty = -3
    assert card.difficulty == MIN_DIFFICULTY
    card.difficulty = 8
    assert card.difficulty == MAX_DIFFICULTY


def test_bump_difficulty_increments_and_returns_card():
    card = Flashcard("q", "a", difficulty=2)
    result = card.bump_difficulty()
    assert result is card
    assert card.difficulty == 3


def test_bump_difficulty_stays_within_bounds():
    card = Flashcard("q", "a")
    card.bump_difficulty()
    assert card.difficulty == MAX_DIFFICULTY


def test_copy_is_equal_and_independent():
    card = Flashcard("q", "a", difficulty=1, next_review=42)
    clone = card.copy()
    assert clone == card
    assert clone is not card
    clone.question = "other"
    assert card.question == "q"