# src/core/codec.py — v2
"""Conversion between document models and store / cache representations."""

from __future__ import annotations

from typing import Any, Mapping

from bson import ObjectId
from pydantic import BaseModel

from docrepo.core.identifier import NIL_ID, Identifier
from docrepo.core.models import ID_FIELD, DocumentT


def encode_document(document: BaseModel) -> dict[str, Any]:
    """Dump a model to the mapping inserted into the store."""
    return document.model_dump(by_alias=True)


def decode_document(model: type[DocumentT], raw: Mapping[str, Any]) -> DocumentT:
    """Validate a full store document into its model."""
    return model.model_validate(raw)


def decode_partial(model: type[DocumentT], raw: Mapping[str, Any]) -> DocumentT:
    """Build a model from a projected store document.

    Projections omit fields on purpose, so required fields may be missing;
    the model is constructed without validation. The identifier is still
    wrapped so callers always see an Identifier; a projection that drops
    it yields NIL_ID rather than a freshly generated one.
    """
    values = dict(raw)
    oid = values.get(ID_FIELD)
    if isinstance(oid, ObjectId):
        values[ID_FIELD] = Identifier(oid)
    elif ID_FIELD not in values:
        values[ID_FIELD] = NIL_ID
    for name, field in model.model_fields.items():
        if field.alias and field.alias in values:
            values[name] = values.pop(field.alias)
    return model.model_construct(**values)
