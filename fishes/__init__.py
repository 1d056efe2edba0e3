"""Spaced-repetition flashcards: decks, study sessions, JSON storage and a Tk window."""

__version__ = "0.1.0"