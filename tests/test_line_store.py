"""Tests for the line store."""

from vbookreader.constants import ReaderConstants
from vbookreader.line_store import LineStore


def test_build_assigns_offsets_from_box_height():
    store = LineStore()
    handles = store.build(["a", "b", "c"], box_height=1)
    assert [h.offset_top for h in handles] == [0, 1, 2]
    assert store.line_height() == 1
    assert len(store) == 3


def test_line_height_falls_back_to_font_line_height():
    store = LineStore()
    store.build(["a", "b", "c"], box_height=0, font_line_height=1.5)
    assert store.line_height() == 1.5
    assert store.line_top_offset(2) == 3.0


def test_line_height_zero_without_lines():
    store = LineStore()
    store.build([], box_height=1)
    assert store.line_height() == 0
    assert store.total_height() == 0


def test_line_height_zero_without_any_measurement():
    store = LineStore()
    store.build(["a"])
    assert store.line_height() == 0


def test_rebuild_discards_old_handles():
    store = LineStore()
    store.build(["a", "b"], box_height=1)
    old = store[0]
    old.highlighted = True
    store.build(["a", "b"], box_height=1)
    assert store[0] is not old
    assert not any(h.highlighted for h in store)


def test_empty_text_becomes_placeholder():
    store = LineStore()
    store.build([""], box_height=1)
    assert store[0].text == ReaderConstants.BLANK_PLACEHOLDER


def test_line_top_offset_out_of_range():
    store = LineStore()
    store.build(["a"], box_height=1)
    assert store.line_top_offset(1) is None
    assert store.line_top_offset(-1) is None
