# src/cache/base_cache.py — v1
"""Abstract cache collaborator used by the cache-aside decorator.

Every operation may fail. The decorator treats read failures as misses
and never lets write or delete failures reach its callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, TypeVar

from pydantic import TypeAdapter

V = TypeVar("V")


class BaseCache(ABC):
    """Unified interface for cache storage backends."""

    @abstractmethod
    async def get_decoded(self, key: str, adapter: TypeAdapter[V]) -> V:
        """Read and decode the value stored under key.

        Raises:
            CacheMissError: If the key is absent or expired.
        """

    @abstractmethod
    async def set_encoded(
        self, key: str, value: Any, adapter: TypeAdapter[Any], ttl: timedelta
    ) -> None:
        """Encode value and store it under key for ttl."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key (absent keys are not an error)."""

    async def close(self) -> None:
        """Release backend resources."""
