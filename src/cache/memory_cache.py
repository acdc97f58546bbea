# src/cache/memory_cache.py — v2
"""In-process cache store (CACHE_BACKEND=memory).

Entries are kept as encoded JSON bytes, the same representation a remote
backend would hold. Expired entries are dropped when read and swept on
every write, so keys that are never read again do not accumulate.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Callable

from pydantic import TypeAdapter

from docrepo.cache.base_cache import BaseCache, V
from docrepo.core.errors import CacheMissError


class MemoryCache(BaseCache):
    """Dictionary-backed cache with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[bytes, float]] = {}

    async def get_decoded(self, key: str, adapter: TypeAdapter[V]) -> V:
        entry = self._entries.get(key)
        if entry is None:
            raise CacheMissError(key)
        data, expires_at = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            raise CacheMissError(key)
        return adapter.validate_json(data)

    async def set_encoded(
        self, key: str, value: Any, adapter: TypeAdapter[Any], ttl: timedelta
    ) -> None:
        data = adapter.dump_json(value, by_alias=True)
        now = self._clock()
        self._evict_expired(now)
        self._entries[key] = (data, now + ttl.total_seconds())

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[arg-type]
        return entry is not None and self._clock() < entry[1]

    def __len__(self) -> int:
        return len(self._entries)
