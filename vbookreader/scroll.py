"""Scroll surface and the cancellable easing animation that drives it.

There is no threading here. The animator schedules ticks on a
``FrameScheduler`` which the application's ``select()`` loop drains, so
``animate_to`` returns immediately and all movement happens on later
ticks. Progress is computed from elapsed clock time, not tick count, so
late or dropped ticks only make the motion coarser.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import ReaderConstants

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def ease_in_out_quad(t: float) -> float:
    """Symmetric in/out quadratic easing for t in [0, 1]."""
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


class ScrollSurface:
    """The container's vertical scroll position.

    Clamping into the scrollable range is the surface's job: callers may
    ask for any offset.
    """

    def __init__(self, offset: float = 0.0, max_offset: float = math.inf):
        self.max_offset = max(0.0, max_offset)
        self.offset = 0.0
        self.scroll_to(offset)

    def set_bounds(self, content_height: float, viewport_height: float) -> None:
        """Recompute the scrollable range and re-clamp the current offset."""
        self.max_offset = max(0.0, content_height - viewport_height)
        self.scroll_to(self.offset)

    def scroll_to(self, offset: float) -> float:
        self.offset = min(self.max_offset, max(0.0, float(offset)))
        return self.offset


class AnimationToken:
    """Live-ness flag for one animation run."""

    def __init__(self):
        self.cancelled = False
        self.finished = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.finished)


@dataclass(frozen=True)
class AnimationRequest:
    start: float
    target: float
    start_time: float
    duration: float

    @property
    def delta(self) -> float:
        return self.target - self.start

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.start_time) / self.duration))

    def offset_at(self, progress: float) -> float:
        if progress >= 1:
            return self.target
        return self.start + self.delta * ease_in_out_quad(progress)


class FrameScheduler:
    """Deadline queue of callbacks run by the owner's event loop.

    ``call_later`` only records the callback; nothing runs until
    ``run_due`` is called. Callbacks scheduled while ``run_due`` is running
    wait for the next call, so a callback that reschedules itself with a
    zero delay cannot starve the loop.
    """

    def __init__(self, clock: Clock = time.monotonic):
        self.clock = clock
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.clock() + max(0.0, delay), next(self._counter), callback))

    def next_timeout(self) -> Optional[float]:
        """Seconds until the next callback is due, or None if idle."""
        if not self._queue:
            return None
        return max(0.0, self._queue[0][0] - self.clock())

    def run_due(self) -> int:
        """Run every callback whose deadline has passed. Returns how many ran."""
        now = self.clock()
        due = []
        while self._queue and self._queue[0][0] <= now:
            due.append(heapq.heappop(self._queue)[2])
        for callback in due:
            callback()
        return len(due)

    def __len__(self) -> int:
        return len(self._queue)


class ScrollAnimator:
    """Runs at most one easing animation against a ``ScrollSurface``.

    A new ``animate_to`` cancels the running token before starting, so a
    superseded run's pending tick sees its token cancelled and stops
    without writing.
    """

    def __init__(
        self,
        surface: ScrollSurface,
        scheduler: FrameScheduler,
        clock: Clock = time.monotonic,
        duration: float = ReaderConstants.SCROLL_DURATION,
        frame_interval: float = ReaderConstants.FRAME_INTERVAL,
    ):
        self.surface = surface
        self.scheduler = scheduler
        self.clock = clock
        self.duration = duration
        self.frame_interval = frame_interval
        self.request: Optional[AnimationRequest] = None
        self._token: Optional[AnimationToken] = None

    @property
    def animating(self) -> bool:
        return self._token is not None and self._token.active

    def cancel(self) -> None:
        if self._token is not None and self._token.active:
            logger.debug("Scroll animation superseded")
            self._token.cancel()
        self._token = None
        self.request = None

    def animate_to(self, target: float) -> AnimationToken:
        """Start animating from the live offset to ``target``."""
        self.cancel()
        token = AnimationToken()
        request = AnimationRequest(
            start=self.surface.offset,
            target=target,
            start_time=self.clock(),
            duration=self.duration,
        )
        self._token = token
        self.request = request
        self.scheduler.call_later(self.frame_interval, lambda: self._step(token, request))
        return token

    def _step(self, token: AnimationToken, request: AnimationRequest) -> None:
        if not token.active:
            return
        progress = request.progress(self.clock())
        self.surface.scroll_to(request.offset_at(progress))
        if progress < 1:
            self.scheduler.call_later(self.frame_interval, lambda: self._step(token, request))
            return
        token.finished = True
        if self._token is token:
            self._token = None
            self.request = None
