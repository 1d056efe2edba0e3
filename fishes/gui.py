"""Screens of the flashcard application and their Tk rendering.

The screen classes hold all state and behaviour; a view only draws the
panel that is currently on top and forwards user actions back to it.
"""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, MutableSequence
from pathlib import Path
from typing import Protocol

from fishes.deck import Deck
from fishes.flows import (
    DeckDraft,
    InputError,
    StudyRun,
    random_deck,
    recent_decks,
    remove_deck,
)

TOP_MARGIN = 100
BOTTOM_MARGIN = 100
MARGIN = 50
LEFT_PANEL_WIDTH = 350
MAIN_WINDOW_WIDTH = 1200
MAIN_WINDOW_HEIGHT = 800

LEFT_PANEL_POS = (MARGIN, TOP_MARGIN + MARGIN)
LEFT_PANEL_SIZE = (
    LEFT_PANEL_WIDTH,
    MAIN_WINDOW_HEIGHT - TOP_MARGIN - MARGIN - BOTTOM_MARGIN,
)
RIGHT_PANEL_POS = (LEFT_PANEL_POS[0] + LEFT_PANEL_SIZE[0] + MARGIN, TOP_MARGIN)
RIGHT_PANEL_SIZE = (
    MAIN_WINDOW_WIDTH - 2 * MARGIN - LEFT_PANEL_SIZE[0] - LEFT_PANEL_POS[0],
    MAIN_WINDOW_HEIGHT - TOP_MARGIN - BOTTOM_MARGIN,
)

WINDOW_TITLE = "Fishes"
FINISHED_TEXT = "You finished this set! Congratulations"
RATING_LABELS: tuple[tuple[int, str], ...] = (
    (1, "I don't know"),
    (2, "I don't remember"),
    (3, "I know something"),
    (4, "I know most"),
    (5, "I know all"),
)

_FRAME_COLOUR = "#eee3e7"
_LEFT_COLOUR = "#ead5dc"
_RIGHT_COLOUR = "#eec9d2"
_WHITE = "#ffffff"
_HEADLINE_FONT = ("TkDefaultFont", 24, "bold")

Clock = Callable[[], int]


class View(Protocol):
    """What the panel manager needs from a window toolkit."""

    def refresh(self) -> None: ...

    def alert(self, message: str) -> None: ...

    def mainloop(self) -> None: ...


class RightPanel:
    """A screen shown in the right-hand area of the main window."""

    def __init__(self, manager: PanelManager) -> None:
        self.manager = manager

    @property
    def visible(self) -> bool:
        return any(panel is self for panel in self.manager.panels)

    def hide(self) -> None:
        """Take this screen away, revealing whatever lies beneath it."""
        self.manager._hide(self)


class MainRightPanel(RightPanel):
    """The start screen: study shortcuts and the recently used decks."""

    def __init__(self, manager: PanelManager, decks: MutableSequence[Deck]) -> None:
        super().__init__(manager)
        self.decks = decks

    @property
    def recent(self) -> list[Deck]:
        return recent_decks(self.decks)

    def learn_new(self, rng: random.Random | None = None) -> StudyPanel | None:
        """Start studying a randomly chosen deck, if there is any."""
        deck = random_deck(self.decks, rng)
        if deck is None:
            return None
        return self.manager.create_study_panel(deck)

    def study(self, deck: Deck) -> StudyPanel:
        return self.manager.create_study_panel(deck)


class MySetsPanel(RightPanel):
    """Lists every deck and lets the user study or remove one."""

    def __init__(self, manager: PanelManager, decks: MutableSequence[Deck]) -> None:
        super().__init__(manager)
        self.decks = decks
        self.selection: int | None = None

    @property
    def names(self) -> list[str]:
        return [deck.name for deck in self.decks]

    def study_selected(self) -> StudyPanel | None:
        """Study the selected deck; nothing happens without a selection."""
        if self.selection is None:
            return None
        deck = self.decks[self.selection]
        self.hide()
        return self.manager.create_study_panel(deck)

    def remove_selected(self) -> Deck | None:
        """Remove the selected deck from the deck list and return it."""
        if self.selection is None:
            return None
        removed = remove_deck(self.decks, self.selection)
        self.selection = None
        self.manager._refresh()
        return removed

    def back(self) -> MainRightPanel:
        self.hide()
        return self.manager.create_main_right_panel()


class CreateNewPanel(RightPanel):
    """Builds a new deck card by card from the text typed by the user."""

    def __init__(self, manager: PanelManager) -> None:
        super().__init__(manager)
        self.draft = DeckDraft(manager.decks)
        self.name = ""
        self.question = ""
        self.answer = ""

    def save_flashcard(self) -> bool:
        """Add the typed card to the draft; alert and return False if incomplete."""
        try:
            self.draft.add_card(self.question, self.answer)
        except InputError as exc:
            self.manager.alert(str(exc))
            return False
        self.question = ""
        self.answer = ""
        self.manager._refresh()
        return True

    def save_deck(self) -> Deck | None:
        """Save the pending card, then the named deck, and go to the start screen."""
        self.save_flashcard()
        try:
            deck = self.draft.save(self.name)
        except InputError as exc:
            self.manager.alert(str(exc))
            return None
        self.hide()
        self.manager.create_main_right_panel()
        return deck


class StudyStage(enum.Enum):
    QUESTION = "question"
    ANSWER = "answer"
    FINISHED = "finished"


class StudyPanel(RightPanel):
    """Shows a deck's cards one by one and records the user's ratings."""

    def __init__(
        self, manager: PanelManager, deck: Deck, clock: Clock | None = None
    ) -> None:
        super().__init__(manager)
        self.deck = deck
        self.run = StudyRun(deck, clock)

    @property
    def stage(self) -> StudyStage:
        if self.run.finished:
            return StudyStage.FINISHED
        return StudyStage.ANSWER if self.run.answer_shown else StudyStage.QUESTION

    @property
    def current_card(self):
        return self.run.current_card

    def show_next_question(self) -> str | None:
        question = self.run.next_question()
        self.manager._refresh()
        return question

    def show_answer(self) -> str | None:
        answer = self.run.reveal_answer()
        self.manager._refresh()
        return answer

    def answer_with(self, rating: int) -> str | None:
        """Rate the current card (1-5) and return the next question, if any."""
        question = self.run.rate(rating)
        self.manager._refresh()
        return question

    def go_back(self) -> None:
        self.hide()


class PanelManager:
    """Owns the deck list and the stack of screens shown on the right."""

    def __init__(
        self,
        decks: MutableSequence[Deck],
        view_factory: Callable[[PanelManager], View] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.decks = decks
        self.panels: list[RightPanel] = []
        self.messages: list[str] = []
        self.view: View | None = None
        self._view_factory = view_factory
        self._clock = clock

    @property
    def current(self) -> RightPanel | None:
        return self.panels[-1] if self.panels else None

    def create_app_window(self) -> View:
        """Open the main window with the start screen on it."""
        factory = self._view_factory if self._view_factory is not None else TkView
        self.view = factory(self)
        self.create_main_right_panel()
        return self.view

    def create_main_right_panel(self) -> MainRightPanel:
        return self._show(MainRightPanel(self, self.decks))

    def create_study_panel(self, deck: Deck) -> StudyPanel:
        return self._show(StudyPanel(self, deck, self._clock))

    def show_my_sets(self) -> MySetsPanel:
        return self._show(MySetsPanel(self, self.decks))

    def show_create_new(self) -> CreateNewPanel:
        return self._show(CreateNewPanel(self))

    def alert(self, message: str) -> None:
        self.messages.append(message)
        if self.view is not None:
            self.view.alert(message)

    def _show(self, panel):
        self.panels.append(panel)
        self._refresh()
        return panel

    def _hide(self, panel: RightPanel) -> None:
        self.panels = [shown for shown in self.panels if shown is not panel]
        self._refresh()

    def _refresh(self) -> None:
        if self.view is not None:
            self.view.refresh()


class TkView:
    """Draws the panel manager's screens in a Tk window."""

    def __init__(self, manager: PanelManager) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.manager = manager
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{MAIN_WINDOW_WIDTH}x{MAIN_WINDOW_HEIGHT}")
        self.root.resizable(False, False)
        self.root.configure(background=_FRAME_COLOUR)
        self._logo = None
        self._build_left_panel()
        self.right = tk.Frame(
            self.root, background=_RIGHT_COLOUR, borderwidth=1, relief="solid"
        )
        self.right.place(
            x=RIGHT_PANEL_POS[0],
            y=RIGHT_PANEL_POS[1],
            width=RIGHT_PANEL_SIZE[0],
            height=RIGHT_PANEL_SIZE[1],
        )

    def mainloop(self) -> None:
        self.root.mainloop()

    def alert(self, message: str) -> None:
        self._messagebox.showinfo(WINDOW_TITLE, message, parent=self.root)

    def refresh(self) -> None:
        for child in self.right.winfo_children():
            child.destroy()
        panel = self.manager.current
        if isinstance(panel, MainRightPanel):
            self._render_main(panel)
        elif isinstance(panel, MySetsPanel):
            self._render_my_sets(panel)
        elif isinstance(panel, CreateNewPanel):
            self._render_create(panel)
        elif isinstance(panel, StudyPanel):
            self._render_study(panel)

    def _build_left_panel(self) -> None:
        tk = self._tk
        logo_path = Path.cwd() / ".." / "frontend" / "fishes.png"
        if logo_path.is_file():
            try:
                self._logo = tk.PhotoImage(file=str(logo_path))
            except tk.TclError:
                self._logo = None
        if self._logo is not None:
            tk.Label(self.root, image=self._logo, background=_FRAME_COLOUR).place(
                x=2 * MARGIN - 20, y=MARGIN, width=300, height=100
            )

        left = tk.Frame(self.root, background=_LEFT_COLOUR, borderwidth=1, relief="solid")
        left.place(
            x=LEFT_PANEL_POS[0],
            y=LEFT_PANEL_POS[1],
            width=LEFT_PANEL_SIZE[0],
            height=LEFT_PANEL_SIZE[1],
        )
        for y, text, command in (
            (MARGIN, "My sets", self.manager.show_my_sets),
            (300, "Create new", self.manager.show_create_new),
        ):
            holder = tk.Frame(left, background=_WHITE, borderwidth=1, relief="solid")
            holder.place(x=MARGIN, y=y, width=250, height=200)
            tk.Button(holder, text=text, command=command).place(
                relx=0.5, rely=0.5, anchor="center"
            )

    def _render_main(self, panel: MainRightPanel) -> None:
        tk = self._tk
        tk.Label(self.right, text="Study", font=_HEADLINE_FONT, background=_RIGHT_COLOUR).place(
            x=MARGIN, y=MARGIN
        )
        for x, text in (
            (MARGIN, "Daily revision"),
            (3 * MARGIN + TOP_MARGIN, "Learn something new"),
        ):
            holder = tk.Frame(self.right, background=_WHITE, borderwidth=1, relief="solid")
            holder.place(x=x, y=2 * MARGIN, width=MARGIN + TOP_MARGIN, height=TOP_MARGIN)
            tk.Button(holder, text=text, command=panel.learn_new).place(
                relx=0.5, rely=0.5, anchor="center"
            )
        tk.Label(
            self.right, text="Last used", font=_HEADLINE_FONT, background=_RIGHT_COLOUR
        ).place(x=MARGIN, y=6 * MARGIN)
        for position, deck in enumerate(panel.recent):
            tk.Button(
                self.right, text=deck.name, command=lambda d=deck: panel.study(d)
            ).place(x=MARGIN, y=(8 + position) * MARGIN)

    def _render_my_sets(self, panel: MySetsPanel) -> None:
        tk = self._tk
        tk.Label(
            self.right, text="Your Sets", font=_HEADLINE_FONT, background=_RIGHT_COLOUR
        ).pack(pady=10)
        listbox = tk.Listbox(self.right, exportselection=False)
        for name in panel.names:
            listbox.insert("end", name)
        if panel.selection is not None:
            listbox.selection_set(panel.selection)
        listbox.pack(fill="both", expand=True, padx=200)

        def select(_event=None) -> None:
            chosen = listbox.curselection()
            panel.selection = chosen[0] if chosen else None

        listbox.bind("<<ListboxSelect>>", select)
        buttons = tk.Frame(self.right, background=_RIGHT_COLOUR)
        buttons.pack(pady=10)
        tk.Button(buttons, text="Back", command=panel.back).pack(side="left", padx=10)
        tk.Button(buttons, text="Study", command=panel.study_selected).pack(
            side="left", padx=10
        )
        tk.Button(buttons, text="Remove", command=panel.remove_selected).pack(
            side="left", padx=10
        )

    def _render_create(self, panel: CreateNewPanel) -> None:
        tk = self._tk
        name_var = tk.StringVar(value=panel.name)
        question_var = tk.StringVar(value=panel.question)
        answer_var = tk.StringVar(value=panel.answer)

        def sync() -> None:
            panel.name = name_var.get()
            panel.question = question_var.get()
            panel.answer = answer_var.get()

        name_row = tk.Frame(self.right, background=_WHITE, borderwidth=1, relief="solid")
        name_row.place(x=MARGIN, y=MARGIN, width=5 * TOP_MARGIN, height=MARGIN)
        tk.Label(name_row, text="Deck name:", background=_WHITE).place(x=0, y=0)
        tk.Entry(name_row, textvariable=name_var, borderwidth=0).place(
            x=TOP_MARGIN, y=10, width=4 * TOP_MARGIN - 10
        )

        card_width = RIGHT_PANEL_SIZE[0] - 3 * TOP_MARGIN
        card = tk.Frame(self.right, background=_WHITE, borderwidth=1, relief="solid")
        card.place(
            x=2 * MARGIN,
            y=TOP_MARGIN + MARGIN,
            width=card_width,
            height=RIGHT_PANEL_SIZE[1] - 3 * TOP_MARGIN,
        )
        for y, text, variable in (
            (TOP_MARGIN // 2, "Question: ", question_var),
            (TOP_MARGIN * 3 // 2, "Answer: ", answer_var),
        ):
            tk.Label(card, text=text, background=_WHITE).place(x=0, y=y)
            tk.Entry(card, textvariable=variable).place(
                x=int(1.5 * MARGIN), y=y, width=card_width - int(1.5 * MARGIN) - 10
            )

        def next_card() -> None:
            sync()
            panel.save_flashcard()

        def save() -> None:
            sync()
            panel.save_deck()

        tk.Button(self.right, text="Back", command=panel.hide).place(
            x=TOP_MARGIN, y=5 * TOP_MARGIN
        )
        tk.Button(self.right, text="Save", command=save).place(
            x=4 * TOP_MARGIN, y=5 * TOP_MARGIN
        )
        tk.Button(self.right, text="Next", command=next_card).place(
            x=5 * TOP_MARGIN, y=5 * TOP_MARGIN
        )

    def _render_study(self, panel: StudyPanel) -> None:
        tk = self._tk
        stage = panel.stage
        if stage is StudyStage.FINISHED:
            tk.Label(self.right, text=FINISHED_TEXT, background=_RIGHT_COLOUR).place(
                relx=0.5, rely=0.4, anchor="center"
            )
            tk.Button(self.right, text="Back", command=panel.go_back).place(
                x=10 * MARGIN, y=4 * TOP_MARGIN + MARGIN
            )
            return

        card = panel.current_card
        inside = tk.Frame(self.right, background=_WHITE)
        inside.place(
            x=2 * MARGIN,
            y=TOP_MARGIN,
            width=RIGHT_PANEL_SIZE[0] - 3 * TOP_MARGIN,
            height=RIGHT_PANEL_SIZE[1] - 3 * TOP_MARGIN,
        )
        text = card.question if stage is StudyStage.QUESTION else card.answer
        tk.Label(inside, text=text, background=_WHITE, justify="center").place(
            relx=0.5, rely=0.5, anchor="center"
        )
        if stage is StudyStage.QUESTION:
            tk.Button(self.right, text="Show answer", command=panel.show_answer).place(
                x=5 * MARGIN, y=int(4.5 * TOP_MARGIN)
            )
            return
        for x, (rating, label) in zip((0, 2, 5, 8, 10), RATING_LABELS):
            tk.Button(
                self.right, text=label, command=lambda r=rating: panel.answer_with(r)
            ).place(x=x * MARGIN + MARGIN, y=4 * TOP_MARGIN + MARGIN)