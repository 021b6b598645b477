"""Tests for wrapping raw text into display lines."""

from vbookreader.constants import ReaderConstants
from vbookreader.layout import normalize_line_endings, split_paragraphs, wrap_paragraph, wrap_text

BLANK = ReaderConstants.BLANK_PLACEHOLDER

SAMPLE = (
    "It was the best of times, it was the worst of times, it was the age of wisdom.\r\n"
    "\r\n"
    "Supercalifragilisticexpialidocious is a long word.\n"
    "   leading spaces and trailing spaces   \n"
)


def test_example_document():
    """Exact fill hard-breaks, blank paragraph becomes the placeholder."""
    lines = wrap_text("abcde fghij\n\nklmno", 5)
    assert lines == ["abcde", "fghij", BLANK, "klmno"]


def test_breaks_at_last_space():
    assert wrap_paragraph("the quick brown fox", 10) == ["the quick", "brown fox"]


def test_space_at_budget_boundary_is_not_used():
    """Only the first max_chars characters are searched for a space."""
    assert wrap_paragraph("four five six", 9) == ["four", "five six"]


def test_long_token_is_hard_broken():
    assert wrap_paragraph("abcdefghij", 4) == ["abcd", "efgh", "ij"]


def test_leading_space_does_not_count_as_break():
    """A space at position 0 is not a usable break, so the line is hard-broken."""
    assert wrap_paragraph(" abcdef", 3) == [" ab", "cde", "f"]


def test_space_only_paragraph():
    assert wrap_paragraph("     ", 2) == [" ", " ", " "]


def test_empty_paragraph_is_placeholder():
    assert wrap_paragraph("", 10) == [BLANK]


def test_short_paragraph_is_not_padded():
    assert wrap_paragraph("abc", 10) == ["abc"]


def test_crlf_is_normalized():
    assert normalize_line_endings("a\r\nb\r\n") == "a\nb\n"
    assert wrap_text("a\r\nb", 10) == ["a", "b"]


def test_lone_carriage_return_is_content():
    assert wrap_text("a\rb", 10) == ["a\rb"]


def test_trailing_newline_adds_blank_line():
    assert wrap_text("abc\n", 10) == ["abc", BLANK]


def test_empty_text_has_no_lines():
    assert split_paragraphs("") == []
    assert wrap_text("", 10) == []
    assert wrap_text(None, 10) == []


def test_budget_below_one_is_floored():
    assert wrap_text("ab", 0) == ["a", "b"]


def test_wrap_is_idempotent():
    assert wrap_text(SAMPLE, 17) == wrap_text(SAMPLE, 17)


def test_budget_respected():
    for budget in range(1, 30):
        for line in wrap_text(SAMPLE, budget):
            assert len(line) <= budget


def test_lines_reconstruct_paragraph_when_breaking_at_spaces():
    text = "one two three four five six"
    lines = wrap_text(text, 9)
    assert lines == ["one two", "three", "four", "five six"]
    assert " ".join(lines) == text


def test_hard_broken_lines_fill_the_budget():
    lines = wrap_text("x" * 23, 5)
    assert lines == ["xxxxx"] * 4 + ["xxx"]
    assert "".join(lines) == "x" * 23
