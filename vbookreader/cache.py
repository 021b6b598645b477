"""Persistence of the last loaded text.

The reader keeps a single text payload in the user's cache directory so
the last book reopens on the next start.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import ReaderConstants

logger = logging.getLogger(__name__)


class CacheUnavailableError(OSError):
    """The cache directory cannot be read."""


class TextCache:
    """Stores one text payload on disk, written atomically."""

    def __init__(self, cache_dir: Optional[Path] = None):
        self._cache_dir = Path(cache_dir) if cache_dir is not None else Path(
            platformdirs.user_cache_dir(ReaderConstants.CACHE_APP_NAME))
        self._cache_file = self._cache_dir / ReaderConstants.CACHE_FILENAME

    @property
    def path(self) -> Path:
        return self._cache_file

    def load(self) -> Optional[str]:
        """Return the cached text, or None if nothing is cached.

        Raises:
            CacheUnavailableError: if the cache exists but cannot be read
        """
        try:
            with open(self._cache_file, 'r', encoding='utf-8', newline='') as f:
                return f.read() or None
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read cached text from {self._cache_file}: {e}")
            raise CacheUnavailableError(str(e)) from e

    def save(self, text: str) -> bool:
        """Write ``text`` to the cache atomically.

        Returns:
            True if the write succeeded, False otherwise
        """
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create cache directory {self._cache_dir}: {e}")
            return False

        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding='utf-8',
                newline='',
                dir=self._cache_dir,
                suffix='.tmp',
                delete=False
            ) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(text)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, self._cache_file)
            return True
        except OSError as e:
            logger.warning(f"Could not save text to {self._cache_file}: {e}")
            if temp_filename is not None:
                try:
                    os.remove(temp_filename)
                except OSError:
                    pass
            return False


# Global instance
_cache: Optional[TextCache] = None


def get_cache() -> TextCache:
    """Get the global text cache instance."""
    global _cache
    if _cache is None:
        _cache = TextCache()
    return _cache
