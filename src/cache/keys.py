# src/cache/keys.py — v1
"""Hierarchical cache keys.

A key is a plain string built by appending segments to a caller-chosen
radical: ``users:_id:<hex>`` or ``users:custom:<sha256>``.
"""

from __future__ import annotations

SEPARATOR = ":"
ID_SEGMENT = "_id"
CUSTOM_SEGMENT = "custom"


class CacheKey(str):
    """String key composable segment by segment."""

    __slots__ = ()

    def add(self, *segments: str) -> CacheKey:
        """Return a new key with segments appended."""
        parts = [self, *segments] if self else list(segments)
        return CacheKey(SEPARATOR.join(parts))
