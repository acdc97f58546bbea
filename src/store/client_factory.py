# src/store/client_factory.py — v1
"""Factory: MongoDB client and collection handles from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymongo import AsyncMongoClient

from docrepo.config.settings import Settings

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection


def create_mongo_client(settings: Settings) -> AsyncMongoClient:
    """Create an async client for MONGO_URL.

    The client connects lazily; no I/O happens here.
    """
    return AsyncMongoClient(
        settings.mongo_url,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )


def get_collection(
    client: AsyncMongoClient, settings: Settings, name: str
) -> AsyncCollection:
    """Return the named collection in MONGO_DATABASE."""
    return client[settings.mongo_database][name]
