"""Full-screen terminal view.

Rendering is done with Rich, single keys are read with click.getchar and
free-text input goes through a questionary prompt. The view state lives in
TrackerView so the key handling can be driven without a terminal.
"""

import logging
from datetime import date
from enum import Enum
from typing import Callable

import click
import questionary
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import tracker
from .core.dates import DateParseError, parse_dates
from .ports.day_store import DayStore

logger = logging.getLogger(__name__)

# POSIX escape sequences and Windows scan codes as returned by click.getchar
UP_KEYS = {"\x1b[A", "\x1bOA", "\xe0H", "\x00H"}
DOWN_KEYS = {"\x1b[B", "\x1bOB", "\xe0P", "\x00P"}
ENTER_KEYS = {"\r", "\n"}
QUIT_KEYS = {"q", "Q", "\x1b"}

HELP_TEXT = """Keybindings:
- Enter to add the current day
- A to add a specific day
- D to delete the selected day
- Up/Down to move
- Esc or Q to exit"""


class InputMode(Enum):
    ADD = "add"
    REMOVE = "remove"


class Action(Enum):
    NONE = "none"
    QUIT = "quit"
    ADD_TODAY = "add_today"
    ADD = "add"
    REMOVE = "remove"
    UP = "up"
    DOWN = "down"


def key_action(key: str) -> Action:
    """Map a key read by click.getchar to a view action."""
    if key in QUIT_KEYS:
        return Action.QUIT
    if key in ENTER_KEYS:
        return Action.ADD_TODAY
    if key in UP_KEYS:
        return Action.UP
    if key in DOWN_KEYS:
        return Action.DOWN
    if key.lower() == "a":
        return Action.ADD
    if key.lower() == "d":
        return Action.REMOVE
    return Action.NONE


class TrackerView:
    """Selection, status message and the exported ranges shown on screen."""

    def __init__(self, store: DayStore, today: date | None = None):
        self.store = store
        self.today = today or tracker.today()
        self.ranges: list[str] = []
        self.selected_index = 0
        self.message = ""
        self.refresh()

    def refresh(self) -> None:
        """Re-read the store and keep the selection inside the list."""
        self.ranges = tracker.export_days(self.store)
        self.selected_index = min(self.selected_index, max(len(self.ranges) - 1, 0))

    @property
    def selected(self) -> str | None:
        if not self.ranges:
            return None
        return self.ranges[self.selected_index]

    def move_selection_up(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1

    def move_selection_down(self) -> None:
        if self.selected_index < len(self.ranges) - 1:
            self.selected_index += 1

    def input_default(self, mode: InputMode) -> str:
        """Pre-filled input: today when adding, the selected row when deleting."""
        if mode is InputMode.ADD:
            return self.today.isoformat()
        return self.selected or ""

    def submit(self, mode: InputMode, text: str | None) -> None:
        """Parse the input and add or delete the dates it names."""
        if text is None or not text.strip():
            return
        try:
            days = parse_dates(text, today=self.today)
        except DateParseError as e:
            self.message = str(e)
            return

        if mode is InputMode.ADD:
            tracker.add_days(self.store, days)
            verb = "Added"
        else:
            tracker.remove_days(self.store, days)
            verb = "Deleted"
        self.message = f"{verb} {len(days)} day{'s' if len(days) != 1 else ''}"
        self.refresh()

    def add_today(self) -> None:
        self.submit(InputMode.ADD, self.today.isoformat())

    def render(self) -> RenderableType:
        items = Text()
        if not self.ranges:
            items.append("No home office days recorded.", style="dim")
        for i, line in enumerate(self.ranges):
            if i:
                items.append("\n")
            items.append(line, style="bold reverse" if i == self.selected_index else "")

        grid = Table.grid(expand=True)
        grid.add_column(ratio=4)
        grid.add_column(ratio=1)
        grid.add_row(
            Panel(items, title="Home Office Days", border_style="cyan"),
            Panel(HELP_TEXT, title="Help", border_style="dim"),
        )

        if self.message:
            return Group(grid, Text(self.message, style="yellow"))
        return grid


def _cancel_bindings() -> KeyBindings:
    """Esc leaves the input box with no result."""
    bindings = KeyBindings()

    @bindings.add("escape", eager=True)
    def _cancel(event) -> None:
        event.app.exit(result=None)

    return bindings


def ask_input(mode: InputMode, default: str, **prompt_kwargs) -> str | None:
    """
    Prompt for a date or `start::end` range, pre-filled with default.

    Returns None when the input is cancelled with Esc. Extra keyword
    arguments go to the underlying prompt session.
    """
    label = "Add" if mode is InputMode.ADD else "Delete"
    # unsafe_ask lets Ctrl+C reach the main loop instead of being swallowed
    return questionary.text(
        f"{label} (YYYY-MM-DD or start::end):",
        default=default,
        key_bindings=_cancel_bindings(),
        **prompt_kwargs,
    ).unsafe_ask()


def run_tui(
    store: DayStore,
    console: Console | None = None,
    getchar: Callable[[], str] = click.getchar,
    ask: Callable[[InputMode, str], str | None] = ask_input,
) -> None:
    """Run the interactive view until the user quits."""
    console = console or Console()
    view = TrackerView(store)

    try:
        while True:
            console.clear()
            console.print(view.render())

            action = key_action(getchar())
            view.message = ""

            match action:
                case Action.QUIT:
                    break
                case Action.ADD_TODAY:
                    view.add_today()
                case Action.ADD:
                    view.submit(InputMode.ADD, ask(InputMode.ADD, view.input_default(InputMode.ADD)))
                case Action.REMOVE:
                    if view.ranges:
                        view.submit(
                            InputMode.REMOVE,
                            ask(InputMode.REMOVE, view.input_default(InputMode.REMOVE)),
                        )
                case Action.UP:
                    view.move_selection_up()
                case Action.DOWN:
                    view.move_selection_down()
    except (KeyboardInterrupt, EOFError):
        logger.debug("TUI interrupted")
    finally:
        console.clear()
