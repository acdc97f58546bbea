# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides an in-memory stand-in for a pymongo async collection, an
in-process cache and a sample document model. No external services.
"""

from __future__ import annotations

import copy
from datetime import timedelta
from types import SimpleNamespace
from typing import Any, Callable

import pytest
from pymongo import ReturnDocument
from pymongo.results import InsertManyResult, InsertOneResult

from docrepo.cache.cached_gateway import CachedGateway
from docrepo.cache.memory_cache import MemoryCache
from docrepo.core.models import Document
from docrepo.store.mongo_gateway import MongoGateway


# === Sample model ===


class User(Document):
    """Minimal document model used across tests."""

    name: str
    email: str = ""
    age: int = 0


# === Fake collection ===


class FakeCursor:
    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self._rows = rows

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for row in self._rows:
            yield row


class FakeCollection:
    """Subset of pymongo's AsyncCollection backed by a list.

    Filters are equality matches on top-level fields; updates support
    ``$set`` only. Set ``fail_with`` to make every call raise.
    """

    def __init__(self, name: str = "users") -> None:
        self.name = name
        self.rows: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    # --- helpers ---

    def _record(self, op: str) -> None:
        self.calls.append(op)
        if self.fail_with is not None:
            raise self.fail_with

    def calls_to(self, op: str) -> int:
        return self.calls.count(op)

    @staticmethod
    def _matches(row: dict[str, Any], filter: dict[str, Any]) -> bool:
        return all(row.get(k) == v for k, v in filter.items())

    @staticmethod
    def _project(row: dict[str, Any], projection: dict[str, int] | None) -> dict[str, Any]:
        if not projection:
            return copy.deepcopy(row)
        includes = [k for k, v in projection.items() if v and k != "_id"]
        if includes:
            out = {k: row[k] for k in includes if k in row}
            if projection.get("_id", 1):
                out["_id"] = row["_id"]
            return copy.deepcopy(out)
        return copy.deepcopy({k: v for k, v in row.items() if projection.get(k, 1)})

    def _first(self, filter: dict[str, Any]) -> dict[str, Any] | None:
        return next((r for r in self.rows if self._matches(r, filter)), None)

    # --- collection API ---

    async def find_one(self, filter, projection=None, **kwargs):
        self._record("find_one")
        row = self._first(filter)
        return None if row is None else self._project(row, projection)

    def find(self, filter, projection=None, **kwargs):
        self._record("find")
        rows = [self._project(r, projection) for r in self.rows if self._matches(r, filter)]
        limit = kwargs.get("limit") or 0
        return FakeCursor(rows[:limit] if limit else rows)

    async def insert_one(self, document, **kwargs):
        self._record("insert_one")
        self.rows.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], acknowledged=True)

    async def insert_many(self, documents, **kwargs):
        self._record("insert_many")
        self.rows.extend(copy.deepcopy(d) for d in documents)
        return InsertManyResult([d["_id"] for d in documents], acknowledged=True)

    async def update_one(self, filter, update, **kwargs):
        self._record("update_one")
        row = self._first(filter)
        if row is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        return SimpleNamespace(matched_count=1, modified_count=self._apply(row, update))

    async def find_one_and_update(
        self, filter, update, projection=None, return_document=ReturnDocument.BEFORE, **kwargs
    ):
        self._record("find_one_and_update")
        row = self._first(filter)
        if row is None:
            return None
        before = self._project(row, projection)
        self._apply(row, update)
        return before if return_document == ReturnDocument.BEFORE else self._project(row, projection)

    async def delete_one(self, filter, **kwargs):
        self._record("delete_one")
        row = self._first(filter)
        if row is None:
            return SimpleNamespace(deleted_count=0)
        self.rows.remove(row)
        return SimpleNamespace(deleted_count=1)

    @staticmethod
    def _apply(row: dict[str, Any], update: dict[str, Any]) -> int:
        changed = 0
        for field, value in update.get("$set", {}).items():
            if row.get(field) != value:
                row[field] = value
                changed = 1
        return changed


# === FIXTURES ===


@pytest.fixture
def user_model() -> type[User]:
    return User


@pytest.fixture
def make_user() -> Callable[..., User]:
    def _make(**fields: Any) -> User:
        fields.setdefault("name", "x")
        return User(**fields)

    return _make


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection("users")


@pytest.fixture
def gateway(collection: FakeCollection) -> MongoGateway[User]:
    return MongoGateway(collection, User)


@pytest.fixture
def memory_cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def cached_gateway(
    gateway: MongoGateway[User], memory_cache: MemoryCache
) -> CachedGateway[User]:
    return gateway.with_cache(memory_cache, "users", timedelta(minutes=5))
