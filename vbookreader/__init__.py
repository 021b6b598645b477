"""vbookreader - A terminal text reader with a single line marker."""

from .layout import wrap_text, wrap_paragraph
from .line_store import LineHandle, LineStore
from .metrics import ContainerStyle, FixedMetricsSource, MetricsSource, WrapMetrics
from .navigation import Command
from .state import ReaderState

__all__ = [
    'wrap_text',
    'wrap_paragraph',
    'LineHandle',
    'LineStore',
    'ContainerStyle',
    'FixedMetricsSource',
    'MetricsSource',
    'WrapMetrics',
    'Command',
    'ReaderState',
]
