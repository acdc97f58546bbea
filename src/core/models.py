# src/core/models.py — v2
"""Shared Pydantic document models.

Every document stored through a gateway is a pydantic model carrying its
identifier under the store's primary key field.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from docrepo.core.identifier import Identifier

ID_FIELD = "_id"


class Document(BaseModel):
    """Base model for stored documents.

    The identifier is generated client-side on construction so a document
    knows its identity before it is inserted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Identifier = Field(default_factory=Identifier.new, alias=ID_FIELD)


DocumentT = TypeVar("DocumentT", bound=BaseModel)
