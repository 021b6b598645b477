"""Tests for toggle and move commands."""

import random

from vbookreader.constants import ReaderConstants
from vbookreader.metrics import FixedMetricsSource
from vbookreader.navigation import Command, move_highlight, toggle_highlight
from vbookreader.scroll import FrameScheduler
from vbookreader.state import ReaderState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_state(text, width=5):
    clock = FakeClock()
    state = ReaderState(FixedMetricsSource(width), scheduler=FrameScheduler(clock), clock=clock)
    state.load_text(text)
    return state


def texts(state):
    return [h.text for h in state.lines]


def test_example_walkthrough():
    state = make_state("abcde fghij\n\nklmno", width=5)
    assert texts(state) == ["abcde", "fghij", ReaderConstants.BLANK_PLACEHOLDER, "klmno"]

    state.dispatch(Command.TOGGLE)
    assert state.highlight_index == 0
    state.dispatch(Command.MOVE_DOWN)
    assert state.highlight_index == 1
    state.dispatch(Command.MOVE_DOWN)
    assert state.highlight_index == 2
    assert state.lines[2].text == ReaderConstants.BLANK_PLACEHOLDER
    state.dispatch(Command.MOVE_DOWN)
    assert state.highlight_index == 3
    assert state.lines[3].text == "klmno"


def test_toggle_twice_clears():
    state = make_state("one\ntwo")
    toggle_highlight(state)
    toggle_highlight(state)
    assert state.highlight_index is None
    assert not any(h.highlighted for h in state.lines)


def test_toggle_selects_top_visible_line():
    state = make_state("\n".join("abc" for _ in range(10)))
    state.surface.scroll_to(4)
    toggle_highlight(state)
    assert state.highlight_index == 4


def test_first_move_establishes_highlight_ignoring_delta():
    state = make_state("\n".join("abc" for _ in range(10)))
    state.surface.scroll_to(2)
    move_highlight(state, 1)
    assert state.highlight_index == 2
    move_highlight(state, -1)
    assert state.highlight_index == 1


def test_boundary_clamp():
    state = make_state("\n".join("abc" for _ in range(6)))
    toggle_highlight(state)
    move_highlight(state, 1000)
    assert state.highlight_index == 5
    move_highlight(state, 1000)
    assert state.highlight_index == 5
    move_highlight(state, -1000)
    assert state.highlight_index == 0
    state.dispatch(Command.MOVE_UP)
    assert state.highlight_index == 0


def test_commands_are_noops_on_empty_document():
    state = make_state("")
    assert state.is_empty
    for command in Command:
        state.dispatch(command)
    assert state.highlight_index is None
    assert not state.animator.animating


def test_every_highlight_change_scrolls():
    state = make_state("\n".join("abc" for _ in range(10)))
    toggle_highlight(state)
    first = state.animator.request
    move_highlight(state, 4)
    assert state.animator.request is not first
    assert state.animator.request.target == 2


def test_single_highlight_invariant():
    state = make_state("lorem ipsum dolor sit amet " * 20, width=7)
    rng = random.Random(0)
    for _ in range(300):
        state.dispatch(rng.choice(list(Command)))
        highlighted = [i for i, h in enumerate(state.lines) if h.highlighted]
        if state.highlight_index is None:
            assert highlighted == []
        else:
            assert highlighted == [state.highlight_index]
