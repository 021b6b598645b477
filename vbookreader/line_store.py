"""Rendered line handles for one layout pass."""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .constants import ReaderConstants


@dataclass
class LineHandle:
    """On-screen representation of one display line.

    Attributes:
        text: Line content, never an empty string
        offset_top: Vertical offset of the line inside the scroll container
        height: Rendered box height of the line
        highlighted: Whether this line carries the highlight marker
    """
    text: str
    offset_top: float = 0
    height: float = 0
    highlighted: bool = False


class LineStore:
    """Ordered line handles produced from a layout result.

    The store owns no text of its own. Every ``build`` throws away the
    previous handles, so handles have no identity across reflows.
    """

    def __init__(self):
        self._handles: list[LineHandle] = []
        self._line_height: float = 0

    def build(self, display_lines: Sequence[str], box_height: float = 0,
              font_line_height: float = 0) -> list[LineHandle]:
        """Replace all handles with fresh ones for ``display_lines``.

        Args:
            display_lines: Wrapped lines from the layout engine
            box_height: Rendered height of a single line box (0 if unknown)
            font_line_height: Computed line height of the font (0 if unknown)

        Returns:
            The new handles
        """
        handles = []
        offset = 0.0
        for text in display_lines:
            handle = LineHandle(text=text or ReaderConstants.BLANK_PLACEHOLDER,
                                offset_top=offset, height=box_height)
            handles.append(handle)
            offset += box_height or font_line_height
        self._handles = handles
        self._line_height = self._compute_line_height(font_line_height)
        return handles

    def _compute_line_height(self, font_line_height: float) -> float:
        if not self._handles:
            return 0
        return self._handles[0].height or font_line_height or 0

    def line_height(self) -> float:
        """Line height cached from the last build."""
        return self._line_height

    def line_top_offset(self, index: int) -> Optional[float]:
        if 0 <= index < len(self._handles):
            return self._handles[index].offset_top
        return None

    def total_height(self) -> float:
        return len(self._handles) * self._line_height

    @property
    def handles(self) -> list[LineHandle]:
        return list(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __getitem__(self, index: int) -> LineHandle:
        return self._handles[index]

    def __iter__(self) -> Iterator[LineHandle]:
        return iter(self._handles)
