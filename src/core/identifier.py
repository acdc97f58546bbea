# src/core/identifier.py — v1
"""Opaque document identifier wrapping a 12-byte BSON ObjectId.

Identifiers render as 24-character lowercase hex strings and round-trip
through that form losslessly. The type plugs into pydantic models: it
validates from an Identifier, an ObjectId or a hex string, dumps to an
ObjectId in python mode (for the store) and to hex in JSON mode (for
the cache).
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from docrepo.core.errors import MalformedIdentifierError


@total_ordering
class Identifier:
    """Primary document identity."""

    __slots__ = ("_oid",)

    def __init__(self, oid: ObjectId) -> None:
        if not isinstance(oid, ObjectId):
            raise TypeError(f"Identifier wraps an ObjectId, got {type(oid).__name__}")
        self._oid = oid

    @classmethod
    def new(cls) -> Identifier:
        """Generate a fresh identifier."""
        return cls(ObjectId())

    @classmethod
    def from_hex(cls, text: str) -> Identifier:
        """Parse a 24-character hex string.

        Raises:
            MalformedIdentifierError: If text is not a valid identifier.
        """
        if not isinstance(text, str) or len(text) != 24:
            raise MalformedIdentifierError(text)
        try:
            return cls(ObjectId(text))
        except (InvalidId, TypeError) as e:
            raise MalformedIdentifierError(text) from e

    @property
    def object_id(self) -> ObjectId:
        return self._oid

    def hex(self) -> str:
        return str(self._oid)

    def is_nil(self) -> bool:
        return self._oid.binary == _NIL_BYTES

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            return self._oid == other._oid
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            return self._oid.binary < other._oid.binary
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._oid)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Identifier('{self.hex()}')"

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Identifier:
        if isinstance(value, Identifier):
            return value
        if isinstance(value, ObjectId):
            return cls(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        raise MalformedIdentifierError(value)

    @staticmethod
    def _serialize(value: Identifier, info: core_schema.SerializationInfo) -> Any:
        if info.mode_is_json():
            return value.hex()
        return value.object_id


_NIL_BYTES = b"\x00" * 12

NIL_ID = Identifier(ObjectId(_NIL_BYTES))
