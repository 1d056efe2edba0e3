# fishes

A small flashcard application built around spaced repetition. You create
decks of question/answer cards, study them one card at a time, rate how well
you knew each answer, and each card's difficulty and next review time are
updated from that rating. All decks are kept in a JSON file between runs.

## Installing

```
pip install .
```

The window uses Tk through the standard library's `tkinter`, so your Python
must have Tk support. There are no other dependencies.

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the application

```
fishes [DATA_FILE]
```

`DATA_FILE` defaults to `data.json` in the current directory. The decks are
read from it when the application starts and written back to it when the
window closes. A missing, unreadable or empty file means no decks yet. If the
file is not valid JSON or does not hold a list of decks, the command prints
the error and exits with status 1; it does the same if the decks cannot be
written back.

From the window you can:

- **My sets** – list your decks, select one, then **Study** it or **Remove**
  it; **Back** returns to the start screen.
- **Create new** – enter a deck name and cards. **Next** adds the typed card
  (it needs both a question and an answer), **Save** adds the typed card and
  then saves the deck (it needs a name), **Back** leaves the screen.
- **Study** (start screen) – the first three decks are listed under
  "Last used"; click one to study it. "Learn something new" picks a random
  deck.

While studying, each card shows its question first; reveal the answer and
rate yourself from 1 to 5:

| Rating | Button           | Difficulty | Next review in |
|-------:|------------------|-----------:|----------------|
| 1      | I don't know     | −2         | 5 minutes      |
| 2      | I don't remember | −1         | 1 hour         |
| 3      | I know something | ±0         | 5 hours        |
| 4      | I know most      | +1         | 1 day          |
| 5      | I know all       | +2         | 3 days         |

Difficulty always stays within 0–5; new cards start at 5. When every card has
been shown, the screen says "You finished this set! Congratulations".

## Using the library

The model is usable without the window:

```python
import time

from fishes.flashcard import Flashcard
from fishes.deck import Deck
from fishes.study_session import StudySession
from fishes.storage import StorageManager

deck = Deck("Capitals")
deck.add_card(Flashcard("Capital of France?", "Paris"))
deck.add_card(Flashcard("Capital of Peru?", "Lima"))

session = StudySession(deck)
session.start(int(time.time()))
for card in session:
    print(card.question, "->", card.answer)
    card.adjust_difficulty_and_next_review(4, int(time.time()))

storage = StorageManager("data.json")
storage.save_decks([deck])
decks = storage.load_decks()
```

- `fishes.flashcard` – `Flashcard` (with `adjust_difficulty_and_next_review`,
  `bump_difficulty` and `copy`) and `generate_id`. A rating outside 1–5
  raises `ValueError`.
- `fishes.deck` – `Deck`, with `add_card`, `remove` and `due_card_indexes`
  (the positions of cards whose next review time lies after the given time).
- `fishes.study_session` – `StudySession` visits the cards returned by
  `Deck.due_card_indexes` first and the rest of the deck afterwards, each
  card once. `next_card` returns `None` when the session is over or was not
  started.
- `fishes.storage` – `StorageManager` with `load_decks` and `save_decks`,
  plus `serialize_flashcard`, `serialize_deck`, `deserialize_flashcard` and
  `deserialize_deck`. Problems raise `StorageError`. Cards are stored with the
  keys `id`, `question`, `answer`, `difficulty` and `nextReview`; decks with
  `name` and `cards`.
- `fishes.flows` – window-independent flows: `DeckDraft` (building and saving
  a deck), `StudyRun` (question, answer, rating), `remove_deck`,
  `recent_decks` and `random_deck`. Incomplete input raises `InputError`.
- `fishes.gui` – `PanelManager` and the screens `MainRightPanel`,
  `MySetsPanel`, `CreateNewPanel` and `StudyPanel`, drawn by a Tk view.
- `fishes.app` – `App` (`start` and `shutdown`) and `main`, the `fishes`
  command.

## What it does not do

- The "Daily revision" button does the same as "Learn something new": it
  studies a random deck. There is no revision that gathers due cards across
  all decks.
- Cards are never hidden because of their review time; a study session always
  goes through the whole deck, only the order changes.
- Decks and cards cannot be edited after a deck is saved, and there are no
  statistics beyond the end-of-set message.