"""Persistent JSON cache for translate responses.

Caches raw API responses to avoid redundant API calls.
Entries are keyed by source language, target language and exact text.
"""
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Union

from google_translate.config import (
    CACHE_DIR_MODE,
    CACHE_FILENAME,
    CACHE_JSON_INDENT,
    CACHE_SUBDIR,
)
from google_translate.exceptions import CacheError

logger = logging.getLogger(__name__)


class ResponseCache:
    """JSON-file-backed response cache.

    Features:
    - Three-level mapping: source -> target -> text -> response
    - Lazy load on first use, tracked with an explicit flag
    - Explicit flush; nothing is written until flush() is called
    - Lock around every operation for multi-threaded hosts
    """

    def __init__(self, cache_path: Union[str, Path]):
        """Initialize cache.

        Args:
            cache_path: Path to the JSON cache file
        """
        self.cache_path = Path(cache_path)
        self._entries: dict[str, dict[str, dict[str, dict]]] = {}
        self._loaded = False
        self._lock = threading.RLock()

    @classmethod
    def for_storage_root(cls, storage_root: Union[str, Path]) -> "ResponseCache":
        """Create the cache at its standard location under storage_root."""
        return cls(Path(storage_root) / CACHE_SUBDIR / CACHE_FILENAME)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Read the cache file into memory once per cache object.

        Raises:
            CacheError: File is not valid JSON or a level is not a JSON object
        """
        with self._lock:
            if self._loaded:
                return
            if self.cache_path.is_file():
                self._entries = self._read_file()
                logger.info("Loaded translate cache from %s", self.cache_path)
            else:
                self._entries = {}
                logger.debug("No cache file at %s, starting empty", self.cache_path)
            self._loaded = True

    def _read_file(self) -> dict:
        """Parse the cache file and check its three-level shape.

        Raises:
            CacheError: Invalid JSON, or a level that is not a JSON object
        """
        try:
            data = json.loads(self.cache_path.read_text(encoding='utf-8'))
        except ValueError as exc:
            raise CacheError(f"Cache file {self.cache_path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CacheError(f"Cache file {self.cache_path} does not contain a JSON object")
        for source, by_target in data.items():
            if not isinstance(by_target, dict):
                raise CacheError(f"Cache file {self.cache_path}: entry '{source}' is not an object")
            for target, texts in by_target.items():
                if not isinstance(texts, dict):
                    raise CacheError(
                        f"Cache file {self.cache_path}: entry '{source}/{target}' is not an object"
                    )
        return data

    def contains(self, source: str, target: str, text: str) -> bool:
        with self._lock:
            self.load()
            return text in self._entries.get(source, {}).get(target, {})

    def lookup(self, source: str, target: str, text: str, default: Any = None) -> Any:
        """Return the cached response, or default on a miss.

        Pass a sentinel as default to tell a miss apart from a stored value
        in a single locked call.
        """
        with self._lock:
            self.load()
            return self._entries.get(source, {}).get(target, {}).get(text, default)

    def store(self, source: str, target: str, text: str, response: dict) -> None:
        """Insert or overwrite the response for (source, target, text)."""
        with self._lock:
            self.load()
            by_target = self._entries.setdefault(source, {})
            by_target.setdefault(target, {})[text] = response

    def flush(self) -> Path:
        """Write the whole mapping to the cache file as pretty-printed JSON.

        Returns:
            Path of the written file
        """
        with self._lock:
            self.load()
            folder = self.cache_path.parent
            if not folder.is_dir():
                os.makedirs(folder, mode=CACHE_DIR_MODE, exist_ok=True)
            self.cache_path.write_text(
                json.dumps(self._entries, ensure_ascii=False, indent=CACHE_JSON_INDENT),
                encoding='utf-8'
            )
            logger.info("Flushed %d cached responses to %s", self._count(), self.cache_path)
            return self.cache_path

    def clear(self):
        """Drop all cached responses from memory (disk changes on next flush)"""
        with self._lock:
            self._entries = {}
            self._loaded = True
        logger.info("Cache cleared")

    def snapshot(self) -> dict:
        """Return a copy of the three-level mapping."""
        with self._lock:
            self.load()
            return {
                source: {target: dict(texts) for target, texts in by_target.items()}
                for source, by_target in self._entries.items()
            }

    def _count(self) -> int:
        return sum(
            len(texts)
            for by_target in self._entries.values()
            for texts in by_target.values()
        )

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dict with cache stats (entries, language pairs, path)
        """
        with self._lock:
            self.load()
            pairs = sum(len(by_target) for by_target in self._entries.values())
            return {
                "total_entries": self._count(),
                "language_pairs": pairs,
                "path": str(self.cache_path)
            }
