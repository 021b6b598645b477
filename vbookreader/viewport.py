"""Highlight marker and visibility bookkeeping over a ``LineStore``."""

import logging
import math
from typing import Optional

from .constants import ReaderConstants
from .line_store import LineStore
from .scroll import ScrollAnimator, ScrollSurface

logger = logging.getLogger(__name__)


class ViewportState:
    """Tracks the single highlighted line and the topmost visible line.

    At most one handle in the store has ``highlighted`` set, and it is the
    one at ``highlight_index``.
    """

    CONTEXT_LINES: int = ReaderConstants.CONTEXT_LINES

    def __init__(self, store: LineStore, surface: ScrollSurface, animator: ScrollAnimator):
        self.store = store
        self.surface = surface
        self.animator = animator
        self.highlight_index: Optional[int] = None

    @property
    def line_count(self) -> int:
        return len(self.store)

    def top_visible_index(self) -> int:
        """Index of the line at the current scroll offset, clamped into range."""
        if not self.line_count:
            return 0
        line_height = max(self.store.line_height(), 1)
        index = math.floor(self.surface.offset / line_height)
        return min(self.line_count - 1, max(0, index))

    def reset(self) -> None:
        """Forget the highlight after a reflow; the old handles are gone."""
        self.highlight_index = None

    def clear_highlight(self) -> None:
        if self.highlight_index is None:
            return
        if self.highlight_index < self.line_count:
            self.store[self.highlight_index].highlighted = False
        self.highlight_index = None

    def set_highlight(self, index: int) -> bool:
        """Move the highlight to ``index`` and scroll it into place.

        Out-of-range indices are ignored.

        Returns:
            True if the highlight was set
        """
        if index < 0 or index >= self.line_count:
            return False
        if self.highlight_index is not None and self.highlight_index < self.line_count:
            self.store[self.highlight_index].highlighted = False
        self.highlight_index = index
        self.store[index].highlighted = True
        self.scroll_highlight_into_place(index)
        return True

    def scroll_highlight_into_place(self, index: int) -> None:
        """Animate so the line sits ``CONTEXT_LINES`` below the top edge."""
        line_top = self.store.line_top_offset(index)
        if line_top is None:
            return
        target = max(0.0, line_top - self.store.line_height() * self.CONTEXT_LINES)
        logger.debug("Scrolling line %d into place at offset %s", index, target)
        self.animator.animate_to(target)
