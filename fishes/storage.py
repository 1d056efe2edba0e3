"""Loading and saving decks as JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fishes.deck import Deck
from fishes.flashcard import Flashcard


class StorageError(Exception):
    """Raised when decks cannot be read or written."""


def serialize_flashcard(card: Flashcard) -> dict[str, Any]:
    return {
        "id": card.id,
        "question": card.question,
        "answer": card.answer,
        "difficulty": card.difficulty,
        "nextReview": card.next_review,
    }


def serialize_deck(deck: Deck) -> dict[str, Any]:
    return {
        "name": deck.name,
        "cards": [serialize_flashcard(card) for card in deck.cards],
    }


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise StorageError(f"expected an object holding '{key}'")
    try:
        return data[key]
    except KeyError:
        raise StorageError(f"missing field '{key}'") from None


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise StorageError(f"field '{key}' must be a number")


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, str):
        return value
    raise StorageError(f"field '{key}' must be a string")


def deserialize_flashcard(data: Any) -> Flashcard:
    """Build a flashcard from its JSON object; raises StorageError if malformed."""
    card = Flashcard(" ", " ")
    card.id = _as_int(_field(data, "id"), "id")
    card.question = _as_str(_field(data, "question"), "question")
    card.answer = _as_str(_field(data, "answer"), "answer")
    card.difficulty = _as_int(_field(data, "difficulty"), "difficulty")
    card.next_review = _as_int(_field(data, "nextReview"), "nextReview")
    return card


def deserialize_deck(data: Any) -> Deck:
    """Build a deck from its JSON object; absent parts keep their defaults."""
    deck = Deck("deck")
    if not isinstance(data, dict):
        return deck
    if "name" in data:
        deck.name = _as_str(data["name"], "name")
    cards = data.get("cards")
    if isinstance(cards, list):
        for card_data in cards:
            deck.add_card(deserialize_flashcard(card_data))
    return deck


class StorageManager:
    """Keeps all decks in one JSON file."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)

    def load_decks(self) -> list[Deck]:
        """Read every deck; an unreadable or empty file yields no decks."""
        try:
            raw = self.file_path.read_bytes()
        except OSError:
            return []
        if not raw:
            return []
        try:
            text = raw.decode("utf-8")
            data, _ = json.JSONDecoder().raw_decode(text.lstrip())
        except ValueError as exc:
            raise StorageError(f"Invalid JSON format: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError("JSON is not an array")
        return [deserialize_deck(deck_data) for deck_data in data]

    def save_decks(self, decks: Iterable[Deck] | None) -> None:
        """Write all decks, replacing the file's contents."""
        if decks is None:
            raise StorageError("Saving decks failed!")
        payload = [serialize_deck(deck) for deck in decks]
        text = json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False)
        try:
            self.file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError("Failed to open file!") from exc