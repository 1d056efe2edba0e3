import json

import pytest

from fishes.deck import Deck
from fishes.flashcard import MAX_DIFFICULTY, MIN_DIFFICULTY, Flashcard
from fishes.storage import (
    StorageError,
    StorageManager,
    deserialize_deck,
    deserialize_flashcard,
    serialize_deck,
    serialize_flashcard,
)


def _sample_decks():
    first = Deck("Capitals")
    first.add_card(Flashcard("France?", "Paris", difficulty=2, next_review=1234))
    first.add_card(Flashcard("Japan?", "Tokyo"))
    second = Deck("Empty")
    return [first, second]


def test_serialize_flashcard_uses_source_keys():
    card = Flashcard("q", "a", card_id=7, difficulty=3, next_review=99)
    assert serialize_flashcard(card) == {
        "id": 7,
        "question": "q",
        "answer": "a",
        "difficulty": 3,
        "nextReview": 99,
    }


def test_serialize_empty_deck_has_card_list():
    assert serialize_deck(Deck("x")) == {"name": "x", "cards": []}


def test_flashcard_round_trip():
    card = Flashcard("q", "a", difficulty=1, next_review=55)
    assert deserialize_flashcard(serialize_flashcard(card)) == card


def test_deserialize_flashcard_clamps_difficulty():
    data = {"id": 1, "question": "q", "answer": "a", "difficulty": 9, "nextReview": 0}
    assert deserialize_flashcard(data).difficulty == MAX_DIFFICULTY
    data["difficulty"] = -4
    assert deserialize_flashcard(data).difficulty == MIN_DIFFICULTY


def test_deserialize_flashcard_missing_field():
    with pytest.raises(StorageError, match="nextReview"):
        deserialize_flashcard({"id": 1, "question": "q", "answer": "a", "difficulty": 1})


def test_deserialize_flashcard_wrong_type():
    data = {"id": 1, "question": 5, "answer": "a", "difficulty": 1, "nextReview": 0}
    with pytest.raises(StorageError):
        deserialize_flashcard(data)


def test_deserialize_deck_defaults():
    deck = deserialize_deck({})
    assert deck.name == "deck"
    assert deck.cards == []


def test_deserialize_deck_ignores_non_list_cards():
    deck = deserialize_deck({"name": "n", "cards": {"a": 1}})
    assert deck.name == "n"
    assert deck.cards == []


def test_missing_file_loads_no_decks(tmp_path):
    assert StorageManager(tmp_path / "absent.json").load_decks() == []


def test_empty_file_loads_no_decks(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("")
    assert StorageManager(path).load_decks() == []


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json")
    with pytest.raises(StorageError, match="Invalid JSON format"):
        StorageManager(path).load_decks()


def test_non_array_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"name": "x"}')
    with pytest.raises(StorageError, match="JSON is not an array"):
        StorageManager(path).load_decks()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "data.json"
    manager = StorageManager(path)
    decks = _sample_decks()
    manager.save_decks(decks)
    loaded = manager.load_decks()
    assert [d.name for d in loaded] == [d.name for d in decks]
    assert [d.cards for d in loaded] == [d.cards for d in decks]


def test_saved_file_layout(tmp_path):
    path = tmp_path / "data.json"
    StorageManager(path).save_decks(_sample_decks())
    text = path.read_text(encoding="utf-8")
    assert text.startswith("[\n    {")
    data = json.loads(text)
    assert list(data[0]) == ["cards", "name"]
    assert list(data[0]["cards"][0]) == ["answer", "difficulty", "id", "nextReview", "question"]


def test_save_keeps_non_ascii_text(tmp_path):
    path = tmp_path / "data.json"
    deck = Deck("Słówka")
    StorageManager(path).save_decks([deck])
    assert "Słówka" in path.read_text(encoding="utf-8")


def test_save_none_raises(tmp_path):
    with pytest.raises(StorageError, match="Saving decks failed"):
        StorageManager(tmp_path / "data.json").save_decks(None)


def test_save_to_unwritable_path_raises(tmp_path):
    with pytest.raises(StorageError, match="Failed to open file"):
        StorageManager(tmp_path / "missing" / "data.json").save_decks([])