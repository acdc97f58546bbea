# src/store/operations.py — v1
"""Collection-level CRUD helpers translating driver results into errors.

These work on raw mappings so any gateway backed by a pymongo-compatible
async collection can reuse them. Driver errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from pymongo import ReturnDocument

from docrepo.core.errors import NotDeletedError, NotFoundError, NotUpdatedError
from docrepo.core.identifier import Identifier
from docrepo.core.models import ID_FIELD

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection


def id_filter(id: Identifier) -> dict[str, Any]:
    """Filter matching the document with the given identifier."""
    return {ID_FIELD: id.object_id}


async def find_one(
    collection: AsyncCollection, filter: Any, **options: Any
) -> Mapping[str, Any]:
    """Return the first matching document.

    Raises:
        NotFoundError: If nothing matches.
    """
    raw = await collection.find_one(filter, **options)
    if raw is None:
        raise NotFoundError(f"No document in {collection.name} matches {filter!r}")
    return raw


async def find_one_by_id(
    collection: AsyncCollection, id: Identifier, **options: Any
) -> Mapping[str, Any]:
    return await find_one(collection, id_filter(id), **options)


async def find(
    collection: AsyncCollection, filter: Any, **options: Any
) -> list[Mapping[str, Any]]:
    """Return all matching documents (empty list when none match)."""
    cursor = collection.find(filter, **options)
    return [raw async for raw in cursor]


async def find_one_and_update(
    collection: AsyncCollection, filter: Any, update: Any, **options: Any
) -> Mapping[str, Any]:
    """Apply update atomically and return the document as it was before.

    Raises:
        NotFoundError: If nothing matches.
    """
    options.setdefault("return_document", ReturnDocument.BEFORE)
    raw = await collection.find_one_and_update(filter, update, **options)
    if raw is None:
        raise NotFoundError(f"No document in {collection.name} matches {filter!r}")
    return raw


async def update_one(
    collection: AsyncCollection, filter: Any, update: Any, **options: Any
) -> None:
    """Update a single document.

    Raises:
        NotFoundError: If no document matched.
        NotUpdatedError: If a document matched but nothing changed.
    """
    result = await collection.update_one(filter, update, **options)
    if result.matched_count == 0:
        raise NotFoundError(f"No document in {collection.name} matches {filter!r}")
    if result.modified_count == 0:
        raise NotUpdatedError(f"Update left {filter!r} in {collection.name} unchanged")


async def update_one_by_id(
    collection: AsyncCollection, id: Identifier, update: Any, **options: Any
) -> None:
    await update_one(collection, id_filter(id), update, **options)


async def delete_one(
    collection: AsyncCollection, filter: Any, **options: Any
) -> None:
    """Delete a single document.

    Raises:
        NotDeletedError: If no document was removed.
    """
    result = await collection.delete_one(filter, **options)
    if result.deleted_count == 0:
        raise NotDeletedError(f"Nothing deleted from {collection.name} for {filter!r}")


async def delete_one_by_id(
    collection: AsyncCollection, id: Identifier, **options: Any
) -> None:
    await delete_one(collection, id_filter(id), **options)
