"""Measuring the reading surface.

The layout engine never talks to the terminal directly. It asks a
``MetricsSource`` for the available width and the width of one reference
glyph, and turns those into a character budget.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .constants import ReaderConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerStyle:
    """Resolved style of the text container.

    Attributes:
        padding_left: Columns reserved on the left of the text
        padding_right: Columns reserved on the right of the text
        font_size: Font size, for surfaces that render fonts
        font_family: Font family, for surfaces that render fonts
        font_weight: Font weight, for surfaces that render fonts
        line_height: Computed line height of the font
    """
    padding_left: float = 0
    padding_right: float = 0
    font_size: str = "16px"
    font_family: str = "monospace"
    font_weight: str = "400"
    line_height: float = 0


@dataclass(frozen=True)
class WrapMetrics:
    """Result of measuring the container."""
    available_width: float
    reference_char_width: float
    line_height: float = 0


def resolve_char_width(measured: Optional[float], available_width: float) -> float:
    """Apply the fallback chain for the reference glyph width.

    A missing or non-positive measurement falls back to ``available_width / 50``,
    and if that is still non-positive, to a fixed 8 units.
    """
    if measured is not None and measured > 0:
        return measured
    fallback = available_width / ReaderConstants.FALLBACK_WIDTH_DIVISOR
    if fallback > 0:
        logger.debug("Reference glyph unmeasurable, using width/%d = %s",
                     ReaderConstants.FALLBACK_WIDTH_DIVISOR, fallback)
        return fallback
    logger.debug("Reference glyph and width unmeasurable, using %s",
                 ReaderConstants.FALLBACK_CHAR_WIDTH)
    return ReaderConstants.FALLBACK_CHAR_WIDTH


def character_budget(metrics: WrapMetrics) -> int:
    """Maximum characters per display line, floored, never below 1."""
    char_width = resolve_char_width(metrics.reference_char_width, metrics.available_width)
    return max(1, math.floor(max(0, metrics.available_width) / char_width))


class MetricsSource(ABC):
    """Capability interface for measuring a rendering surface."""

    @abstractmethod
    def measure(self, style: ContainerStyle) -> WrapMetrics:
        """Measure available width and reference glyph width under ``style``."""


class FixedMetricsSource(MetricsSource):
    """Metrics source returning fixed values, for tests and headless use."""

    def __init__(self, available_width: float, reference_char_width: float = 1,
                 line_height: float = 1):
        self.available_width = available_width
        self.reference_char_width = reference_char_width
        self.line_height = line_height

    def measure(self, style: ContainerStyle) -> WrapMetrics:
        available = max(0, self.available_width - style.padding_left - style.padding_right)
        return WrapMetrics(
            available_width=available,
            reference_char_width=resolve_char_width(self.reference_char_width, available),
            line_height=self.line_height or style.line_height,
        )


class TerminalMetricsSource(MetricsSource):
    """Measures a blessed terminal.

    Widths are in cells. The terminal owns its font, so the font fields of
    the style are ignored; the reference glyph width comes from
    ``Terminal.length``.
    """

    def __init__(self, term):
        self.term = term

    def _terminal_width(self) -> float:
        try:
            width = int(self.term.width)
        except (TypeError, ValueError, OSError):
            # Detached or hidden terminals report nothing useful
            return 0
        return max(0, width)

    def _glyph_width(self) -> Optional[float]:
        try:
            return float(self.term.length(ReaderConstants.REFERENCE_GLYPH))
        except (TypeError, ValueError, AttributeError):
            return None

    def measure(self, style: ContainerStyle) -> WrapMetrics:
        available = max(0, self._terminal_width() - style.padding_left - style.padding_right)
        return WrapMetrics(
            available_width=available,
            reference_char_width=resolve_char_width(self._glyph_width(), available),
            line_height=style.line_height or 1,
        )
