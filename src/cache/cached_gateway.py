# src/cache/cached_gateway.py — v1
"""Cache-aside decorator over a store gateway.

Reads by identifier go to the cache first and fall back to the wrapped
gateway; the fetched document is written back by a detached task that
the caller never waits for. Writes by identifier dispatch a detached
invalidation before touching the store.

Consistency is best effort. A get_by_id racing an update can repopulate
the entry with pre-update data after the invalidation ran, and two cold
reads of the same key both query the store. Both are accepted.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from docrepo.cache.background import BackgroundTasks
from docrepo.cache.base_cache import BaseCache
from docrepo.cache.keys import CUSTOM_SEGMENT, ID_SEGMENT, CacheKey
from docrepo.core.identifier import Identifier
from docrepo.core.models import DocumentT
from docrepo.store.base_gateway import BaseGateway

if TYPE_CHECKING:
    from pymongo.results import InsertManyResult, InsertOneResult

    from docrepo.cache.filter_cache import FilterCachedGateway
    from docrepo.store.projection import ProjectedGateway

logger = logging.getLogger(__name__)


class CachedGateway(BaseGateway[DocumentT]):
    """Gateway-shaped wrapper adding read-through caching by identifier.

    Configuration is fixed at construction; instances are safe to share
    between concurrent callers.
    """

    def __init__(
        self,
        gateway: BaseGateway[DocumentT],
        cache: BaseCache,
        radical: str,
        expiration: timedelta,
        background: BackgroundTasks | None = None,
    ) -> None:
        self._gateway = gateway
        self._cache = cache
        self._radical = CacheKey(radical)
        self._id_radical = self._radical.add(ID_SEGMENT)
        self._expiration = expiration
        self._adapter: TypeAdapter[DocumentT] = TypeAdapter(gateway.model)
        self.model = gateway.model
        self.background = background or BackgroundTasks()

    @property
    def wrapped(self) -> BaseGateway[DocumentT]:
        return self._gateway

    @property
    def expiration(self) -> timedelta:
        return self._expiration

    def cache_key_for(self, id: Identifier) -> CacheKey:
        return self._id_radical.add(id.hex())

    # --- cached operations ---

    async def get_by_id(self, id: Identifier, **options: Any) -> DocumentT:
        # Query options change the document shape; such reads bypass the cache.
        if options:
            return await self._gateway.get_by_id(id, **options)

        key = self.cache_key_for(id)
        try:
            cached = await self._cache.get_decoded(key, self._adapter)
        except Exception as e:
            logger.debug("Cache miss for %s: %s", key, e)
        else:
            logger.debug("Cache hit for %s", key)
            return cached

        document = await self._gateway.get_by_id(id)
        self.background.spawn(
            self._cache.set_encoded(key, document, self._adapter, self._expiration),
            f"populate {key}",
        )
        return document

    async def update_one_by_id(
        self, id: Identifier, update: Any, **options: Any
    ) -> None:
        self._invalidate(id)
        await self._gateway.update_one_by_id(id, update, **options)

    async def delete_one_by_id(self, id: Identifier, **options: Any) -> None:
        self._invalidate(id)
        await self._gateway.delete_one_by_id(id, **options)

    async def find_one_and_update(
        self, filter: Any, update: Any, **options: Any
    ) -> DocumentT:
        document = await self._gateway.find_one_and_update(filter, update, **options)
        id = getattr(document, "id", None)
        if isinstance(id, Identifier):
            self._invalidate(id)
        return document

    def with_custom_filter(self) -> FilterCachedGateway[DocumentT]:
        """Filter-hash layer sharing this decorator's cache and expiration."""
        from docrepo.cache.filter_cache import FilterCachedGateway

        return FilterCachedGateway(
            self._gateway,
            self._cache,
            self._radical.add(CUSTOM_SEGMENT),
            self._expiration,
            self.background,
        )

    # --- pass-through operations ---

    async def find_one(self, filter: Any, **options: Any) -> DocumentT:
        return await self._gateway.find_one(filter, **options)

    async def find(self, filter: Any, **options: Any) -> list[DocumentT]:
        return await self._gateway.find(filter, **options)

    async def insert_one(self, document: DocumentT, **options: Any) -> InsertOneResult:
        return await self._gateway.insert_one(document, **options)

    async def insert_many(
        self, documents: list[DocumentT], **options: Any
    ) -> InsertManyResult:
        return await self._gateway.insert_many(documents, **options)

    async def update_one(self, filter: Any, update: Any, **options: Any) -> None:
        # Entries touched through an arbitrary filter expire on their own.
        await self._gateway.update_one(filter, update, **options)

    async def delete_one(self, filter: Any, **options: Any) -> None:
        await self._gateway.delete_one(filter, **options)

    def select(self, *fields: str) -> ProjectedGateway[DocumentT]:
        return self._gateway.select(*fields)

    def omit(self, *fields: str) -> ProjectedGateway[DocumentT]:
        return self._gateway.omit(*fields)

    def _invalidate(self, id: Identifier) -> None:
        key = self.cache_key_for(id)
        self.background.spawn(self._cache.delete(key), f"invalidate {key}")
