"""Owned reader state: raw text, its layout, the highlight and the scroll.

All entry points (load, resize, commands, animation ticks) run to
completion on one thread, so a reflow is atomic from any observer's point
of view.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .layout import wrap_text
from .line_store import LineHandle, LineStore
from .metrics import ContainerStyle, MetricsSource, character_budget
from .navigation import Command, NavigationController
from .scroll import Clock, FrameScheduler, ScrollAnimator, ScrollSurface
from .viewport import ViewportState

logger = logging.getLogger(__name__)

RenderListener = Callable[['ReaderState'], None]


class ReaderState:
    """Everything the reader knows, owned in one place."""

    def __init__(
        self,
        metrics_source: MetricsSource,
        style: Optional[ContainerStyle] = None,
        scheduler: Optional[FrameScheduler] = None,
        clock: Clock = time.monotonic,
        viewport_height: float = 0,
    ):
        self.metrics_source = metrics_source
        self.style = style or ContainerStyle()
        self.raw_text = ""
        self.max_chars = 1
        self.viewport_height = viewport_height
        self.scheduler = scheduler or FrameScheduler(clock)
        self.surface = ScrollSurface()
        self.animator = ScrollAnimator(self.surface, self.scheduler, clock=clock)
        self.store = LineStore()
        self.viewport = ViewportState(self.store, self.surface, self.animator)
        self.navigation = NavigationController(self)
        self._render_listeners: list[RenderListener] = []

    # --- Observable state ---
    @property
    def lines(self) -> list[LineHandle]:
        return self.store.handles

    @property
    def is_empty(self) -> bool:
        return len(self.store) == 0

    @property
    def highlight_index(self) -> Optional[int]:
        return self.viewport.highlight_index

    @property
    def scroll_offset(self) -> float:
        return self.surface.offset

    def add_render_listener(self, listener: RenderListener) -> None:
        self._render_listeners.append(listener)

    def _notify_rendered(self) -> None:
        for listener in self._render_listeners:
            listener(self)

    # --- Reflow ---
    def reflow(self) -> None:
        """Re-measure, re-wrap and rebuild the line store from ``raw_text``.

        Listeners are not notified here; callers notify once the scroll
        offset is final.
        """
        metrics = self.metrics_source.measure(self.style)
        self.max_chars = character_budget(metrics)
        display_lines = wrap_text(self.raw_text, self.max_chars)
        self.animator.cancel()
        self.store.build(display_lines, box_height=metrics.line_height,
                         font_line_height=self.style.line_height)
        self.viewport.reset()
        self.surface.set_bounds(self.store.total_height(), self.viewport_height)
        logger.debug("Reflowed %d chars into %d lines at %d chars/line",
                     len(self.raw_text), len(self.store), self.max_chars)

    def load_text(self, text: Optional[str]) -> None:
        """Replace the document and start reading from the top."""
        self.raw_text = text or ""
        self.reflow()
        self.surface.scroll_to(0)
        self._notify_rendered()

    def handle_resize(self, viewport_height: Optional[float] = None) -> bool:
        """Re-wrap for the new surface size, keeping the raw scroll offset.

        The highlight is dropped because line indices do not survive a
        re-wrap. Does nothing when no text is loaded.

        Returns:
            True if a reflow happened
        """
        if viewport_height is not None:
            self.viewport_height = viewport_height
        if not self.raw_text:
            return False
        cached_offset = self.surface.offset
        self.reflow()
        self.surface.scroll_to(cached_offset)
        self._notify_rendered()
        return True

    # --- Commands ---
    def dispatch(self, command: Command) -> None:
        self.navigation.dispatch(command)

    def tick(self) -> int:
        """Run due animation ticks."""
        return self.scheduler.run_due()
