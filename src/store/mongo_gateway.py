# src/store/mongo_gateway.py — v1
"""MongoDB-backed store gateway (pymongo async API)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from docrepo.core.codec import decode_document, encode_document
from docrepo.core.identifier import Identifier
from docrepo.core.models import DocumentT
from docrepo.store import operations
from docrepo.store.base_gateway import BaseGateway
from docrepo.store.projection import ProjectedGateway

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection
    from pymongo.results import InsertManyResult, InsertOneResult


class MongoGateway(BaseGateway[DocumentT]):
    """Typed CRUD over one collection. Holds no state beyond its handles."""

    def __init__(self, collection: AsyncCollection, model: type[DocumentT]) -> None:
        self._collection = collection
        self.model = model

    @property
    def collection(self) -> AsyncCollection:
        return self._collection

    async def get_by_id(self, id: Identifier, **options: Any) -> DocumentT:
        raw = await operations.find_one_by_id(self._collection, id, **options)
        return decode_document(self.model, raw)

    async def find_one(self, filter: Any, **options: Any) -> DocumentT:
        raw = await operations.find_one(self._collection, filter, **options)
        return decode_document(self.model, raw)

    async def find(self, filter: Any, **options: Any) -> list[DocumentT]:
        rows = await operations.find(self._collection, filter, **options)
        return [decode_document(self.model, raw) for raw in rows]

    async def find_one_and_update(
        self, filter: Any, update: Any, **options: Any
    ) -> DocumentT:
        raw = await operations.find_one_and_update(
            self._collection, filter, update, **options
        )
        return decode_document(self.model, raw)

    async def insert_one(self, document: DocumentT, **options: Any) -> InsertOneResult:
        return await self._collection.insert_one(encode_document(document), **options)

    async def insert_many(
        self, documents: list[DocumentT], **options: Any
    ) -> InsertManyResult:
        return await self._collection.insert_many(
            [encode_document(doc) for doc in documents], **options
        )

    async def update_one(self, filter: Any, update: Any, **options: Any) -> None:
        await operations.update_one(self._collection, filter, update, **options)

    async def update_one_by_id(
        self, id: Identifier, update: Any, **options: Any
    ) -> None:
        await operations.update_one_by_id(self._collection, id, update, **options)

    async def delete_one(self, filter: Any, **options: Any) -> None:
        await operations.delete_one(self._collection, filter, **options)

    async def delete_one_by_id(self, id: Identifier, **options: Any) -> None:
        await operations.delete_one_by_id(self._collection, id, **options)

    def select(self, *fields: str) -> ProjectedGateway[DocumentT]:
        return ProjectedGateway(self._collection, self.model).select(*fields)

    def omit(self, *fields: str) -> ProjectedGateway[DocumentT]:
        return ProjectedGateway(self._collection, self.model).omit(*fields)

    def __repr__(self) -> str:
        return f"MongoGateway({self._collection.name!r}, {self.model.__name__})"
