"""Reflowing raw text into display lines.

``wrap_text`` is a pure function of ``(text, max_chars)``: calling it
twice with the same arguments gives the same lines, which is what makes
re-wrapping on resize idempotent.
"""

from .constants import ReaderConstants

BLANK = ReaderConstants.BLANK_PLACEHOLDER


def normalize_line_endings(text: str) -> str:
    """Collapse CRLF pairs to LF. Lone CRs are left alone."""
    return (text or "").replace("\r\n", "\n")


def split_paragraphs(text: str) -> list[str]:
    """Split normalized text into paragraphs. Empty text has no paragraphs."""
    normalized = normalize_line_endings(text)
    if not normalized:
        return []
    return normalized.split("\n")


def wrap_paragraph(paragraph: str, max_chars: int) -> list[str]:
    """Wrap one paragraph into lines of at most ``max_chars`` characters.

    Breaks at the last space within the first ``max_chars`` characters and
    drops that space. A token wider than the budget (no space past position
    0) is hard-broken at exactly ``max_chars``. Empty chunks become the
    blank placeholder so every line occupies a row.
    """
    if paragraph == "":
        return [BLANK]

    chunks = []
    remaining = paragraph
    while len(remaining) > max_chars:
        window = remaining[:max_chars + 1]
        break_index = window[:max_chars].rfind(" ")
        if break_index <= 0:
            break_index = max_chars
        chunks.append(remaining[:break_index] or BLANK)
        remaining = remaining[break_index:]
        if remaining.startswith(" "):
            remaining = remaining[1:]

    chunks.append(remaining or BLANK)
    return chunks


def wrap_text(text: str, max_chars: int) -> list[str]:
    """Wrap raw text into display lines in reading order.

    Args:
        text: Raw text; CRLF is normalized to LF first
        max_chars: Character budget per line, at least 1

    Returns:
        Display lines of every paragraph, paragraphs in source order
    """
    max_chars = max(1, max_chars)
    lines: list[str] = []
    for paragraph in split_paragraphs(text):
        lines.extend(wrap_paragraph(paragraph, max_chars))
    return lines
