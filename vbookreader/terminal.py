"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select


def printable(text: str) -> str:
    """Replace control characters with spaces so each char fills one cell."""
    return "".join(" " if ord(char) < 32 or ord(char) == 127 else char for char in text)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Virtual screen state for minimal updates
        self._last_rows: list[str] | None = None
        self._last_status: str | None = None
        self._last_left_margin: int | None = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen)
        print(self.term.hide_cursor)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input  # type: ignore
            self._curtsies_input = Input(keynames='curtsies')  # type: ignore
            self._curtsies_input.__enter__()  # type: ignore

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None

    def invalidate_frame(self) -> None:
        """Forget the cached frame so the next update repaints everything."""
        self._last_rows = None
        self._last_status = None
        self._last_left_margin = None

    def _compose_row(self, text: str, view_width: int, highlighted: bool) -> str:
        display = printable(text)[:view_width].ljust(view_width)
        if highlighted:
            return self.term.reverse + display + self.term.normal
        return display

    def _compose_status(self, status: Optional[str]) -> str:
        width = self.term.width
        if status:
            return printable(status)[:width].ljust(width)
        help_text = "F1 for help"
        return (" " * max(0, width - len(help_text) - 1)) + help_text

    def update_frame(
        self,
        rows: list[tuple[str, bool]],
        left_margin: int,
        view_width: int,
        status: Optional[str] = None,
    ) -> None:
        """Paint ``(text, highlighted)`` rows, writing only rows that changed.

        Falls back to a full clear on first paint or when geometry changes.
        """
        need_full_clear = (
            self._last_rows is None
            or self._last_left_margin != left_margin
            or len(self._last_rows) != len(rows)
        )
        if need_full_clear:
            print(self.term.home + self.term.clear, end='')
            self._last_rows = ["" for _ in range(len(rows))]
            self._last_status = None
            self._last_left_margin = left_margin

        for y, (text, highlighted) in enumerate(rows):
            new_disp = self._compose_row(text, view_width, highlighted)
            if new_disp != self._last_rows[y]:
                print(self.term.move(y, left_margin) + new_disp, end='')
                self._last_rows[y] = new_disp

        status_text = self._compose_status(status)
        if status_text != (self._last_status or ""):
            print(self.term.move(self.term.height - 1, 0) + status_text, end='')
            self._last_status = status_text

        print('', end='', flush=True)

    def draw_message(self, message: str, status: Optional[str] = None):
        """Draw a single centered message, e.g. the empty-document placeholder."""
        self.invalidate_frame()
        print(self.term.home + self.term.clear, end='')
        y = max(0, (self.term.height - 1) // 2)
        x = max(0, (self.term.width - len(message)) // 2)
        print(self.term.move(y, x) + message, end='')
        print(self.term.move(self.term.height - 1, 0) + self._compose_status(status), end='', flush=True)

    def draw_panel(self, title: str, lines: list[str], footer: str):
        """Draw a full-screen text panel with a bold title."""
        self.invalidate_frame()
        term = self.term
        print(term.home + term.clear, end='')
        width = term.width
        print(f"{term.move(1, max(0, (width - len(title)) // 2))}{term.bold}{title}{term.normal}", end='')
        top = max(3, (term.height - len(lines)) // 2)
        left = max(0, (width - max((len(line) for line in lines), default=0)) // 2)
        for i, line in enumerate(lines):
            print(f"{term.move(top + i, left)}{line}", end='')
        print(f"{term.move(term.height - 1, 0)}{footer}", end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None on timeout or without input
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # type: ignore
        r, _, _ = select.select([sys.stdin], [], [], max(0.0, float(timeout)))
        if not r:
            return None
        return str(next(self._curtsies_input))  # type: ignore

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
