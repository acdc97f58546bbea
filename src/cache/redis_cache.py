# src/cache/redis_cache.py — v2
"""Redis-based cache store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for distributed/multi-instance deployments where several
processes share cache entries.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from docrepo.cache.base_cache import BaseCache, V
from docrepo.core.errors import CacheMissError

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class RedisCache(BaseCache):
    """Redis-backed cache store storing JSON-encoded values with TTL."""

    def __init__(
        self,
        redis_url: str | None = None,
        key_prefix: str = "",
        client: Redis | None = None,
    ) -> None:
        if client is None:
            if not redis_url:
                raise ValueError("redis_url or client is required")
            try:
                import redis.asyncio as aioredis
            except ImportError as e:
                raise ImportError(
                    "redis package required: pip install redis"
                ) from e
            client = aioredis.Redis.from_url(redis_url)

        self._client = client
        self._prefix = key_prefix

    async def get_decoded(self, key: str, adapter: TypeAdapter[V]) -> V:
        data = await self._client.get(self._full_key(key))
        if data is None:
            raise CacheMissError(key)
        return adapter.validate_json(data)

    async def set_encoded(
        self, key: str, value: Any, adapter: TypeAdapter[Any], ttl: timedelta
    ) -> None:
        await self._client.set(
            self._full_key(key), adapter.dump_json(value, by_alias=True), ex=ttl
        )

    async def delete(self, key: str) -> None:
        await self._client.delete(self._full_key(key))

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
        logger.debug("Redis cache connection closed")

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}{key}"
