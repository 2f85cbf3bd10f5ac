"""Small LRU + TTL cache for generated candidate lists."""

from __future__ import annotations

import hashlib
import time
from collections import OrderedDict
from dataclasses import dataclass


@dataclass
class CacheEntry:
    """Cached candidates with the time they were stored."""
    candidates: list[str]
    timestamp: float
    request_hash: str


class LRUCache:
    """LRU cache with TTL, keyed by (model, prompt)."""

    def __init__(self, max_size: int = 100, ttl_secs: int = 300) -> None:
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_size = max_size
        self._ttl_secs = ttl_secs

    @staticmethod
    def compute_hash(model: str, prompt: str) -> str:
        content = f"{model}|{prompt}"
        return hashlib.sha256(content.encode()).hexdigest()[:16]

    def get(self, model: str, prompt: str) -> CacheEntry | None:
        key = self.compute_hash(model, prompt)
        entry = self._cache.get(key)
        if entry is None:
            return None
        if time.time() - entry.timestamp > self._ttl_secs:
            del self._cache[key]
            return None
        self._cache.move_to_end(key)
        return entry

    def set(self, model: str, prompt: str, candidates: list[str]) -> str:
        key = self.compute_hash(model, prompt)
        self._cache.pop(key, None)
        while len(self._cache) >= self._max_size:
            self._cache.popitem(last=False)
        self._cache[key] = CacheEntry(
            candidates=list(candidates),
            timestamp=time.time(),
            request_hash=key,
        )
        return key

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
