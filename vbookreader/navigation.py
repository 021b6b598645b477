"""Discrete reader commands mapped onto viewport transitions."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import ReaderState


class Command(Enum):
    """Navigation commands the reader understands."""
    TOGGLE = "toggle"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"


def toggle_highlight(state: 'ReaderState') -> None:
    """Highlight the top visible line, or clear the highlight if one exists."""
    viewport = state.viewport
    if not viewport.line_count:
        return
    if viewport.highlight_index is None:
        viewport.set_highlight(viewport.top_visible_index())
    else:
        viewport.clear_highlight()


def move_highlight(state: 'ReaderState', delta: int) -> None:
    """Move the highlight by ``delta`` lines, clamped to the document.

    With no highlight, the first press only establishes one at the top
    visible line and ``delta`` is ignored.
    """
    viewport = state.viewport
    if not viewport.line_count:
        return
    if viewport.highlight_index is None:
        viewport.set_highlight(viewport.top_visible_index())
        return
    next_index = min(viewport.line_count - 1, max(0, viewport.highlight_index + delta))
    viewport.set_highlight(next_index)


class NavigationController:
    """Dispatches ``Command`` values against a reader state."""

    def __init__(self, state: 'ReaderState'):
        self.state = state

    def toggle(self) -> None:
        toggle_highlight(self.state)

    def move(self, delta: int) -> None:
        move_highlight(self.state, delta)

    def move_up(self) -> None:
        self.move(-1)

    def move_down(self) -> None:
        self.move(1)

    def dispatch(self, command: Command) -> None:
        if command is Command.TOGGLE:
            self.toggle()
        elif command is Command.MOVE_UP:
            self.move_up()
        elif command is Command.MOVE_DOWN:
            self.move_down()
