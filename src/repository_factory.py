# src/repository_factory.py — v1
"""Factory: assemble a gateway, cached or not, from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docrepo.cache.base_cache import BaseCache
from docrepo.cache.cache_factory import create_cache
from docrepo.config.settings import Settings
from docrepo.core.models import DocumentT
from docrepo.store.base_gateway import BaseGateway
from docrepo.store.mongo_gateway import MongoGateway

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

logger = logging.getLogger(__name__)


def create_repository(
    model: type[DocumentT],
    collection: AsyncCollection,
    settings: Settings,
    cache: BaseCache | None = None,
    radical: str | None = None,
) -> BaseGateway[DocumentT]:
    """Create a gateway over collection, wrapped in a cache when enabled.

    Args:
        model: Document model stored in the collection.
        collection: Backing collection handle.
        settings: Application settings (CACHE_ENABLED, CACHE_TTL_SECONDS, ...).
        cache: Shared cache backend; created from settings when omitted.
        radical: Cache namespace; defaults to the collection name.

    Returns:
        MongoGateway, or a CachedGateway around it.
    """
    gateway: BaseGateway[DocumentT] = MongoGateway(collection, model)
    if not settings.cache_enabled:
        return gateway

    namespace = radical or collection.name
    logger.debug(
        "Caching %s under %r for %ss",
        model.__name__, namespace, settings.cache_ttl_seconds,
    )
    return gateway.with_cache(
        cache if cache is not None else create_cache(settings),
        namespace,
        settings.cache_ttl,
    )
