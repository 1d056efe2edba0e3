"""Application start-up and shutdown."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from fishes.deck import Deck
from fishes.gui import PanelManager, View
from fishes.storage import StorageError, StorageManager

DEFAULT_DATA_FILE = "data.json"


class App:
    """Loads the decks, opens the window and saves the decks on exit."""

    def __init__(
        self,
        file_path: str | Path = DEFAULT_DATA_FILE,
        view_factory: Callable[[PanelManager], View] | None = None,
    ) -> None:
        self.file_path = Path(file_path)
        self._view_factory = view_factory
        self.storage_manager: StorageManager | None = None
        self.panel_manager: PanelManager | None = None
        self.all_decks: list[Deck] = []

    def start(self) -> PanelManager:
        """Load the decks and open the main window."""
        self.storage_manager = StorageManager(self.file_path)
        self.all_decks = self.storage_manager.load_decks()
        self.panel_manager = PanelManager(self.all_decks, view_factory=self._view_factory)
        self.panel_manager.create_app_window()
        return self.panel_manager

    def shutdown(self) -> None:
        """Write all decks back to the data file."""
        if self.storage_manager is None:
            raise RuntimeError("the application has not been started")
        self.storage_manager.save_decks(self.all_decks)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fishes", description="Study flashcards.")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="JSON file holding the decks (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    app = App(args.data_file)
    try:
        manager = app.start()
    except StorageError as exc:
        print(f"fishes: {exc}", file=sys.stderr)
        return 1
    try:
        manager.view.mainloop()
    finally:
        try:
            app.shutdown()
        except StorageError as exc:
            print(f"fishes: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())