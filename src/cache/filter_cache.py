# src/cache/filter_cache.py — v2
"""Cache-aside layer for queries keyed by filter content.

Keys are the SHA-256 of the filter's canonical extended JSON and the reading
method, so equal filters read the same way share an entry. Field order is
kept as written: filters that differ only in key order hash differently and
simply miss more often.

Entries are never invalidated by writes; they live until expiration.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import timedelta
from typing import Any, Generic

from bson import json_util
from bson.json_util import CANONICAL_JSON_OPTIONS
from pydantic import BaseModel, TypeAdapter

from docrepo.cache.background import BackgroundTasks
from docrepo.cache.base_cache import BaseCache
from docrepo.cache.keys import CacheKey
from docrepo.core.models import DocumentT
from docrepo.store.base_gateway import BaseGateway

logger = logging.getLogger(__name__)


def filter_hash(filter: Any, operation: str | None = None, **options: Any) -> str:
    """Deterministic hex digest of a filter and the query options shaping its result.

    ``operation`` names the reading method, so a single-document read and a
    list read over the same filter land on different keys.

    Raises:
        TypeError: If the filter holds values extended JSON cannot encode.
    """
    payload = filter.model_dump(by_alias=True) if isinstance(filter, BaseModel) else filter
    if operation is not None or options:
        payload = {"filter": payload}
        if operation is not None:
            payload["operation"] = operation
        if options:
            payload["options"] = options
    content = json_util.dumps(payload, json_options=CANONICAL_JSON_OPTIONS)
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


class FilterCachedGateway(Generic[DocumentT]):
    """Read-through cache for find_one / find keyed by filter hash."""

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
        self._expiration = expiration
        self._one_adapter: TypeAdapter[DocumentT] = TypeAdapter(gateway.model)
        self._many_adapter: TypeAdapter[list[DocumentT]] = TypeAdapter(
            list[gateway.model]  # type: ignore[name-defined,valid-type]
        )
        self.model = gateway.model
        self.background = background or BackgroundTasks()

    def cache_key_for(
        self, filter: Any, operation: str = "find_one", **options: Any
    ) -> CacheKey:
        return self._radical.add(filter_hash(filter, operation, **options))

    async def find_one(self, filter: Any, **options: Any) -> DocumentT:
        key = self.cache_key_for(filter, "find_one", **options)
        return await self._read_through(
            key,
            self._one_adapter,
            lambda: self._gateway.find_one(filter, **options),
        )

    async def find(self, filter: Any, **options: Any) -> list[DocumentT]:
        key = self.cache_key_for(filter, "find", **options)
        return await self._read_through(
            key,
            self._many_adapter,
            lambda: self._gateway.find(filter, **options),
        )

    async def _read_through(self, key: CacheKey, adapter: TypeAdapter[Any], fetch: Any) -> Any:
        try:
            cached = await self._cache.get_decoded(key, adapter)
        except Exception as e:
            logger.debug("Cache miss for %s: %s", key, e)
        else:
            logger.debug("Cache hit for %s", key)
            return cached

        result = await fetch()
        self.background.spawn(
            self._cache.set_encoded(key, result, adapter, self._expiration),
            f"populate {key}",
        )
        return result
