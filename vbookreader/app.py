"""Main reader application controller."""

import logging
import math
import os
import select
import signal
import sys
import termios
import time
from typing import Optional

from .cache import TextCache, get_cache
from .commands import CommandRegistry
from .constants import ReaderConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .loader import load_cached, load_file
from .metrics import ContainerStyle, TerminalMetricsSource
from .state import ReaderState
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)

HELP_LINES = [
    "",
    "READING                      FILE",
    "  Space     Mark/unmark line   Ctrl-O    Open file",
    "  Up        Previous line      Ctrl-Q    Quit",
    "  Down      Next line          q         Quit",
    "                               F1 / ?    Help",
]


class ReaderApp:
    """Terminal reader: wires input, resize and animation ticks to a ReaderState."""

    def __init__(self, cache: Optional[TextCache] = None, clock=time.monotonic):
        """Initialize the reader components."""
        self.terminal = TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        padding = ReaderConstants.PADDING_COLUMNS
        self.style = ContainerStyle(padding_left=padding, padding_right=padding, line_height=1)
        self.state = ReaderState(
            TerminalMetricsSource(self.terminal.term),
            style=self.style,
            clock=clock,
            viewport_height=self.terminal.height,
        )
        self.state.add_render_listener(self._on_rendered)
        self.cache = cache if cache is not None else get_cache()
        self.command_registry = CommandRegistry()
        self.running = False
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        self.status_message: Optional[str] = None
        self.prompt_mode: Optional[str] = None  # None or 'open_filename'
        self.prompt_input = ""
        self.help_visible = False

    # --- Loading ---
    def load_file(self, filename: str) -> bool:
        """Load a text file and report the outcome on the status line."""
        result = load_file(self.state, filename, self.cache)
        self.status_message = result.status
        return result.ok

    def load_cached(self) -> None:
        """Reopen the last text from the cache, if there is one."""
        result = load_cached(self.state, self.cache)
        if result is not None:
            self.status_message = result.status

    def _on_rendered(self, state: ReaderState) -> None:
        self.terminal.invalidate_frame()

    # --- Signals ---
    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, ReaderConstants.RESIZE_PIPE_MARKER)

    def handle_resize(self) -> None:
        self.terminal.invalidate_frame()
        self.state.handle_resize(viewport_height=self.terminal.height)

    def run(self):
        """Run the main reader loop."""
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    # Disable IXON/IXOFF so Ctrl-Q reaches the reader
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    old_settings = None

                need_draw = True
                while self.running:
                    if need_draw:
                        self._draw()
                        need_draw = False

                    # Sleep until input, a resize, or the next animation tick
                    timeout = self.state.scheduler.next_timeout()
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [], timeout)

                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        if self.running:
                            self.handle_resize()
                            need_draw = True
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            self._handle_key_event(key_event)
                            need_draw = True

                    if self.state.tick():
                        need_draw = True

                if old_settings:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError):
                        pass

        except KeyboardInterrupt:
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    # --- Drawing ---
    def _status_text(self) -> Optional[str]:
        if self.prompt_mode == 'open_filename':
            return f" File to open: {self.prompt_input}"
        if self.status_message:
            return f" {self.status_message}"
        return None

    def visible_rows(self) -> list[tuple[str, bool]]:
        """Rows of the reading column at the current scroll offset."""
        lines = self.state.lines
        top = math.floor(self.state.scroll_offset)
        rows = []
        for y in range(max(0, self.terminal.height)):
            index = top + y
            if 0 <= index < len(lines):
                rows.append((lines[index].text, lines[index].highlighted))
            else:
                rows.append(("", False))
        return rows

    def _draw(self):
        """Draw the current reader state to terminal."""
        if self.help_visible:
            self.terminal.draw_panel("VBOOKREADER HELP", HELP_LINES, " Press any key to continue")
            return
        status = self._status_text()
        if self.state.is_empty:
            self.terminal.draw_message(ReaderConstants.EMPTY_PLACEHOLDER_MESSAGE, status)
            return
        view_width = max(1, self.terminal.width - self.style.padding_left - self.style.padding_right)
        self.terminal.update_frame(
            self.visible_rows(),
            left_margin=int(self.style.padding_left),
            view_width=int(view_width),
            status=status,
        )

    def show_help(self):
        """Show the help screen."""
        self.help_visible = True

    def hide_help(self):
        """Hide the help screen and return to the text."""
        self.help_visible = False
        self.terminal.invalidate_frame()

    def start_open_prompt(self):
        self.prompt_mode = 'open_filename'
        self.prompt_input = ""

    # --- Input ---
    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        if self.help_visible:
            self.hide_help()
            return

        # The prompt owns the keyboard while it is open
        if self.prompt_mode == 'open_filename':
            self._handle_filename_prompt(key_event)
            return

        if self.status_message:
            self.status_message = None

        self.command_registry.execute(self, key_event)

    def _handle_filename_prompt(self, key_event: KeyEvent):
        """Handle keypress during the open-file prompt."""
        if (key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape') or \
           (key_event.key_type == KeyType.CTRL and key_event.value == 'g'):  # ESC or Ctrl-G
            self.prompt_mode = None
            self.prompt_input = ""
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            filename = os.path.expanduser(self.prompt_input.strip())
            self.prompt_mode = None
            self.prompt_input = ""
            if filename:
                self.load_file(filename)
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            if self.prompt_input:
                self.prompt_input = self.prompt_input[:-1]
        elif key_event.key_type == KeyType.REGULAR:
            char = key_event.value
            if len(char) == 1 and ord(char) >= 32:
                self.prompt_input += char
