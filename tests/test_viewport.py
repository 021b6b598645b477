"""Tests for highlight bookkeeping and top-visible-line derivation."""

from vbookreader.metrics import FixedMetricsSource
from vbookreader.scroll import FrameScheduler
from vbookreader.state import ReaderState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def highlighted(viewport):
    return [i for i, handle in enumerate(viewport.store) if handle.highlighted]


def make_state(lines=10, width=20):
    clock = FakeClock()
    state = ReaderState(FixedMetricsSource(width), scheduler=FrameScheduler(clock), clock=clock)
    state.load_text("\n".join(f"Line {i}" for i in range(lines)))
    return state


def test_top_visible_index_floors_offset():
    state = make_state()
    state.surface.scroll_to(3.7)
    assert state.viewport.top_visible_index() == 3


def test_top_visible_index_clamps_to_last_line():
    state = make_state()
    state.surface.scroll_to(10)
    assert state.surface.offset == 10
    assert state.viewport.top_visible_index() == 9


def test_top_visible_index_without_lines():
    clock = FakeClock()
    state = ReaderState(FixedMetricsSource(20), clock=clock)
    assert state.viewport.top_visible_index() == 0


def test_set_highlight_marks_exactly_one_handle():
    state = make_state()
    viewport = state.viewport
    assert viewport.set_highlight(2)
    assert highlighted(viewport) == [2]
    assert viewport.set_highlight(5)
    assert highlighted(viewport) == [5]
    assert viewport.highlight_index == 5


def test_set_highlight_out_of_range_is_ignored():
    state = make_state()
    viewport = state.viewport
    viewport.set_highlight(4)
    assert not viewport.set_highlight(10)
    assert not viewport.set_highlight(-1)
    assert viewport.highlight_index == 4
    assert highlighted(viewport) == [4]


def test_clear_highlight():
    state = make_state()
    viewport = state.viewport
    viewport.clear_highlight()
    assert viewport.highlight_index is None
    viewport.set_highlight(3)
    viewport.clear_highlight()
    assert viewport.highlight_index is None
    assert highlighted(viewport) == []


def test_highlight_keeps_two_lines_of_context():
    state = make_state()
    state.viewport.set_highlight(5)
    assert state.animator.request.target == 3


def test_highlight_near_top_scrolls_to_zero():
    state = make_state()
    state.viewport.set_highlight(1)
    assert state.animator.request.target == 0
