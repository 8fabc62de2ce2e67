"""Word loaders with a per-process memo of loaded sources.

A loader never raises on bad storage: read and parse failures are logged and
the source contributes an empty sequence, so a test can still be composed
from whatever sources did load.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Dict, Iterable, List, Mapping, Tuple

from .sources import WordSource

logger = logging.getLogger(__name__)

Words = Tuple[str, ...]


class WordLoader:
    """Produces the Words of a WordSource."""

    def load_words(self, source: WordSource) -> Words:
        raise NotImplementedError


class WordSourceCache(WordLoader):
    """Base for storage-format loaders; memoizes by ``source.name``.

    The cache key is the source name only: two sources sharing a name alias
    each other for the lifetime of the cache. Concurrent callers for the same
    key wait on a per-key lock so each name is read at most once. A read that
    finishes after ``clear()`` is returned to its caller but not cached.
    """

    def __init__(self) -> None:
        self._cache: Dict[str, Words] = {}
        self._lock = threading.Lock()
        self._pending: Dict[str, threading.Lock] = {}
        self._generation = 0

    def cache_key(self, source: WordSource) -> str:
        return source.name

    def load_words(self, source: WordSource) -> Words:
        key = self.cache_key(source)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
            key_lock = self._pending.setdefault(key, threading.Lock())

        with key_lock:
            with self._lock:
                if key in self._cache:
                    return self._cache[key]
                generation = self._generation
            words = self._safe_read(source)
            with self._lock:
                if generation == self._generation:
                    self._cache[key] = words
                self._pending.pop(key, None)
            return words

    def _safe_read(self, source: WordSource) -> Words:
        try:
            words = tuple(self._read(source))
        except Exception as exc:
            logger.warning(f"[words-load] failed source={source.name} location={source.location}: {exc}")
            return ()
        logger.debug(f"[words-load] source={source.name} words={len(words)}")
        return words

    def _read(self, source: WordSource) -> Iterable[str]:
        raise NotImplementedError

    def cached_names(self) -> List[str]:
        with self._lock:
            return sorted(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._cache.clear()

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._cache


class LineWordLoader(WordSourceCache):
    """UTF-8 text, one word per line; trailing blank lines are ignored."""

    def _read(self, source: WordSource) -> Iterable[str]:
        with open(source.location, encoding='utf-8') as handle:
            lines = [line.rstrip('\r\n') for line in handle]
        while lines and not lines[-1].strip():
            lines.pop()
        return lines


class JsonWordLoader(WordSourceCache):
    """JSON document with a ``words`` array of strings (``name`` optional)."""

    def _read(self, source: WordSource) -> Iterable[str]:
        with open(source.location, encoding='utf-8') as handle:
            document = json.load(handle)
        if not isinstance(document, dict):
            raise ValueError("dictionary document must be a JSON object")
        words = document.get('words')
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError("'words' must be an array of strings")
        return words


class DispatchingWordLoader(WordLoader):
    """Routes a source to a loader by its file extension.

    Caching happens in the delegates. Unknown extensions yield no words and
    no delegate is called.
    """

    def __init__(self, loaders: Mapping[str, WordLoader]):
        self.loaders: Dict[str, WordLoader] = {
            (ext if ext.startswith('.') else f'.{ext}').lower(): loader
            for ext, loader in loaders.items()
        }

    def load_words(self, source: WordSource) -> Words:
        loader = self.loaders.get(source.extension)
        if loader is None:
            logger.warning(f"[words-load] no loader for extension '{source.extension}' source={source.name}")
            return ()
        return loader.load_words(source)

    def caches(self) -> List[WordSourceCache]:
        return [l for l in self.loaders.values() if isinstance(l, WordSourceCache)]

    def cached_names(self) -> List[str]:
        return sorted({name for cache in self.caches() for name in cache.cached_names()})

    def clear(self) -> None:
        for cache in self.caches():
            cache.clear()


def default_loader(extensions: Iterable[str] = ('.txt', '.json')) -> DispatchingWordLoader:
    """Dispatcher over the built-in formats, restricted to ``extensions``."""
    known = {'.txt': LineWordLoader, '.json': JsonWordLoader}
    wanted = {(e if e.startswith('.') else f'.{e}').lower() for e in extensions}
    return DispatchingWordLoader({ext: cls() for ext, cls in known.items() if ext in wanted})


__all__ = [
    "Words",
    "WordLoader",
    "WordSourceCache",
    "LineWordLoader",
    "JsonWordLoader",
    "DispatchingWordLoader",
    "default_loader",
]
