# src/cache/cache_factory.py — v3
"""Factory for cache backend instantiation."""

from __future__ import annotations

from docrepo.cache.base_cache import BaseCache
from docrepo.config.settings import Settings


class UnsupportedCacheBackendError(ValueError):
    """Raised when the configured cache backend is unknown."""


def create_cache(settings: Settings | None = None) -> BaseCache:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to the in-process backend.

    Returns:
        Configured BaseCache implementation.
    """
    backend = "memory" if settings is None else settings.cache_backend

    if backend == "memory":
        from docrepo.cache.memory_cache import MemoryCache
        return MemoryCache()

    if backend == "redis":
        from docrepo.cache.redis_cache import RedisCache
        if settings is None or not settings.cache_redis_url:
            raise ValueError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisCache(
            redis_url=settings.cache_redis_url,
            key_prefix=settings.cache_key_prefix,
        )

    raise UnsupportedCacheBackendError(f"Unsupported cache backend: {backend!r}")
