# tests/integration/repository/test_int_cache_aside_flow.py — v1
"""End-to-end repository scenarios: raw gateway, cache-aside and filter layer."""

from __future__ import annotations

from datetime import timedelta

import pytest

from docrepo.cache.memory_cache import MemoryCache
from docrepo.core.errors import NotFoundError, NotUpdatedError
from docrepo.core.identifier import Identifier
from docrepo.store.mongo_gateway import MongoGateway


@pytest.fixture
def repo(collection, user_model):
    return MongoGateway(collection, user_model).with_cache(
        MemoryCache(), "it:users", timedelta(minutes=1)
    )


class TestUserLifecycle:
    @pytest.mark.asyncio
    async def test_insert_read_update_read(self, repo, user_model):
        ident = Identifier.from_hex("65a1f0c2e4b0a1b2c3d4e5f6")
        await repo.insert_one(user_model(id=ident, name="x"))

        first = await repo.get_by_id(ident)
        assert (first.id, first.name) == (ident, "x")
        await repo.background.drain()

        await repo.update_one_by_id(ident, {"$set": {"name": "y"}})
        await repo.background.drain()

        second = await repo.get_by_id(ident)
        assert (second.id, second.name) == (ident, "y")

    @pytest.mark.asyncio
    async def test_noop_update_then_delete(self, repo, make_user):
        user = make_user(name="x")
        await repo.insert_one(user)
        with pytest.raises(NotUpdatedError):
            await repo.update_one_by_id(user.id, {"$set": {"name": "x"}})

        await repo.delete_one_by_id(user.id)
        await repo.background.drain()
        with pytest.raises(NotFoundError):
            await repo.get_by_id(user.id)

    @pytest.mark.asyncio
    async def test_every_inserted_id_is_readable(self, repo, make_user):
        users = [make_user(name=f"u{i}") for i in range(5)]
        await repo.insert_many(users)
        for user in users:
            assert (await repo.get_by_id(user.id)).id == user.id


class TestFilterScenario:
    @pytest.mark.asyncio
    async def test_missing_filter_not_found_everywhere(self, repo):
        with pytest.raises(NotFoundError):
            await repo.wrapped.find_one({"name": "z"})
        with pytest.raises(NotFoundError):
            await repo.with_custom_filter().find_one({"name": "z"})

    @pytest.mark.asyncio
    async def test_projection_and_cache_are_independent(self, repo, make_user):
        user = make_user(name="ada", email="ada@example.com")
        await repo.insert_one(user)
        projected = await repo.select("name").get_by_id(user.id)
        assert projected.name == "ada"
        assert "email" not in projected.model_fields_set
        await repo.background.drain()
        assert repo.background.pending == 0
