"""Reading text files into the reader and reporting what happened."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .cache import CacheUnavailableError, TextCache
from .constants import ReaderConstants

if TYPE_CHECKING:
    from .state import ReaderState

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of a load, for the status line."""
    ok: bool
    status: str


def read_text_file(path: str) -> str:
    """Read a text file as UTF-8, replacing undecodable bytes.

    Line endings are kept as-is; the layout engine normalizes them.
    """
    with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
        return f.read()


def load_file(state: 'ReaderState', path: str, cache: Optional[TextCache] = None) -> LoadResult:
    """Load ``path`` into ``state`` and remember it in ``cache``.

    A failed read leaves the reader untouched.
    """
    try:
        text = read_text_file(path)
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return LoadResult(False, ReaderConstants.READ_FAILED_MESSAGE)

    state.load_text(text)
    if cache is not None and not cache.save(text):
        return LoadResult(True, ReaderConstants.SAVE_FAILED_MESSAGE)
    return LoadResult(True, ReaderConstants.SAVED_MESSAGE.format(os.path.basename(path)))


def load_cached(state: 'ReaderState', cache: TextCache) -> Optional[LoadResult]:
    """Load the cached text, if any.

    Returns:
        A result when something was loaded or the cache failed, None when
        the cache is simply empty
    """
    try:
        cached = cache.load()
    except CacheUnavailableError:
        return LoadResult(False, ReaderConstants.CACHE_UNAVAILABLE_MESSAGE)
    if not cached:
        return None
    state.load_text(cached)
    return LoadResult(True, ReaderConstants.CACHE_LOADED_MESSAGE)
