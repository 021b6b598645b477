"""Test keyboard input handling."""

from unittest.mock import MagicMock

import pytest

from vbookreader.keyboard import KeyboardHandler, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self.term = MagicMock()
        self._key_queue = []

    def get_key(self, timeout=None):
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.mark.parametrize("token, key_type, value", [
    ('<UP>', KeyType.SPECIAL, 'up'),
    ('<DOWN>', KeyType.SPECIAL, 'down'),
    ('<F1>', KeyType.SPECIAL, 'f1'),
    ('<LEFT>', KeyType.SPECIAL, 'left'),
    ('<SPACE>', KeyType.REGULAR, ' '),
    (' ', KeyType.REGULAR, ' '),
    ('<Ctrl-o>', KeyType.CTRL, 'o'),
    ('<Ctrl-q>', KeyType.CTRL, 'q'),
    ('\x0f', KeyType.CTRL, 'o'),
    ('\x11', KeyType.CTRL, 'q'),
    ('<ESC>', KeyType.SPECIAL, 'escape'),
    ('\x1b', KeyType.SPECIAL, 'escape'),
    ('<Ctrl-j>', KeyType.SPECIAL, 'enter'),
    ('\r', KeyType.SPECIAL, 'enter'),
    ('\n', KeyType.SPECIAL, 'enter'),
    ('\x7f', KeyType.SPECIAL, 'backspace'),
    ('<BACKSPACE>', KeyType.SPECIAL, 'backspace'),
    ('q', KeyType.REGULAR, 'q'),
    ('?', KeyType.REGULAR, '?'),
    ('<', KeyType.REGULAR, '<'),
])
def test_parse_key(token, key_type, value):
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key(token)
    event = handler.get_key_event()
    assert event is not None
    assert event.key_type == key_type
    assert event.value == value


def test_ctrl_flag_set():
    handler = KeyboardHandler(MockTerminal())
    event = handler.parse_key('<Ctrl-o>')
    assert event.is_ctrl


def test_no_key_returns_none():
    handler = KeyboardHandler(MockTerminal())
    assert handler.get_key_event(timeout=0) is None
