# src/store/base_gateway.py — v1
"""Abstract store gateway: typed CRUD over one document collection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Generic

from docrepo.core.identifier import Identifier
from docrepo.core.models import DocumentT

if TYPE_CHECKING:
    from pymongo.results import InsertManyResult, InsertOneResult

    from docrepo.cache.base_cache import BaseCache
    from docrepo.cache.cached_gateway import CachedGateway
    from docrepo.store.projection import ProjectedGateway


class BaseGateway(ABC, Generic[DocumentT]):
    """Unified interface for document collection access.

    Anything implementing this contract can be wrapped by the cache-aside
    decorator returned from with_cache().
    """

    model: type[DocumentT]

    @abstractmethod
    async def get_by_id(self, id: Identifier, **options: Any) -> DocumentT:
        """Fetch the document with the given identifier (NotFoundError if absent)."""

    @abstractmethod
    async def find_one(self, filter: Any, **options: Any) -> DocumentT:
        """Fetch the first matching document (NotFoundError if none)."""

    @abstractmethod
    async def find(self, filter: Any, **options: Any) -> list[DocumentT]:
        """Fetch every matching document."""

    @abstractmethod
    async def find_one_and_update(
        self, filter: Any, update: Any, **options: Any
    ) -> DocumentT:
        """Update atomically, returning the document as it was before."""

    @abstractmethod
    async def insert_one(self, document: DocumentT, **options: Any) -> InsertOneResult:
        """Insert a single document."""

    @abstractmethod
    async def insert_many(
        self, documents: list[DocumentT], **options: Any
    ) -> InsertManyResult:
        """Insert several documents."""

    @abstractmethod
    async def update_one(self, filter: Any, update: Any, **options: Any) -> None:
        """Update one document by filter (NotFoundError / NotUpdatedError)."""

    @abstractmethod
    async def update_one_by_id(
        self, id: Identifier, update: Any, **options: Any
    ) -> None:
        """Update one document by identifier (NotFoundError / NotUpdatedError)."""

    @abstractmethod
    async def delete_one(self, filter: Any, **options: Any) -> None:
        """Delete one document by filter (NotDeletedError if nothing removed)."""

    @abstractmethod
    async def delete_one_by_id(self, id: Identifier, **options: Any) -> None:
        """Delete one document by identifier (NotDeletedError if nothing removed)."""

    @abstractmethod
    def select(self, *fields: str) -> ProjectedGateway[DocumentT]:
        """Start a projection including the given fields."""

    @abstractmethod
    def omit(self, *fields: str) -> ProjectedGateway[DocumentT]:
        """Start a projection excluding the given fields."""

    def with_cache(
        self,
        cache: BaseCache,
        radical: str,
        expiration: timedelta,
    ) -> CachedGateway[DocumentT]:
        """Wrap this gateway in a cache-aside decorator.

        Args:
            cache: Cache collaborator shared by the decorator.
            radical: Namespace prefix for every key the decorator writes.
            expiration: Time-to-live of populated entries.
        """
        from docrepo.cache.cached_gateway import CachedGateway

        return CachedGateway(self, cache, radical, expiration)
