# src/store/projection.py — v1
"""Field projection builder producing a narrowed read accessor.

select() and omit() append to the same accumulator and return the
accessor itself, so calls chain. Mixing inclusion and exclusion is left
to the store's projection rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic

from docrepo.core.codec import decode_partial
from docrepo.core.errors import ProjectionRequiredError
from docrepo.core.identifier import Identifier
from docrepo.core.models import DocumentT
from docrepo.store import operations

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

_INCLUDE = 1
_EXCLUDE = 0


class ProjectedGateway(Generic[DocumentT]):
    """Read-only accessor applying an accumulated projection to every query."""

    def __init__(self, collection: AsyncCollection, model: type[DocumentT]) -> None:
        self._collection = collection
        self.model = model
        self._projection: list[tuple[str, int]] = []

    @property
    def projection(self) -> dict[str, int]:
        """Projection document sent to the store (later entries win)."""
        return dict(self._projection)

    def select(self, *fields: str) -> ProjectedGateway[DocumentT]:
        self._projection.extend((name, _INCLUDE) for name in fields)
        return self

    def omit(self, *fields: str) -> ProjectedGateway[DocumentT]:
        self._projection.extend((name, _EXCLUDE) for name in fields)
        return self

    async def get_by_id(self, id: Identifier) -> DocumentT:
        raw = await operations.find_one_by_id(
            self._collection, id, projection=self._required_projection()
        )
        return decode_partial(self.model, raw)

    async def find_one(self, filter: Any, **options: Any) -> DocumentT:
        options["projection"] = self._required_projection()
        raw = await operations.find_one(self._collection, filter, **options)
        return decode_partial(self.model, raw)

    async def find(self, filter: Any, **options: Any) -> list[DocumentT]:
        options["projection"] = self._required_projection()
        rows = await operations.find(self._collection, filter, **options)
        return [decode_partial(self.model, raw) for raw in rows]

    async def find_one_and_update(
        self, filter: Any, update: Any, **options: Any
    ) -> DocumentT:
        options["projection"] = self._required_projection()
        raw = await operations.find_one_and_update(
            self._collection, filter, update, **options
        )
        return decode_partial(self.model, raw)

    def _required_projection(self) -> dict[str, int]:
        # An empty projection would silently fetch every field.
        if not self._projection:
            raise ProjectionRequiredError(
                f"Select or omit at least one field of {self.model.__name__}"
            )
        return self.projection
