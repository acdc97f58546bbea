# src/core/errors.py — v1
"""Repository error taxonomy.

Semantic outcomes (not found, not updated, not deleted) are distinct
types so callers can branch on them separately from backend failures,
which are raised unchanged by the underlying driver.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for all docrepo errors."""


class NotFoundError(RepositoryError):
    """No document matched an identifier or filter lookup."""


class NotUpdatedError(RepositoryError):
    """A document matched but the update changed nothing."""


class NotDeletedError(RepositoryError):
    """A delete operation removed no document."""


class ProjectionRequiredError(RepositoryError):
    """A projection accessor was used with no fields selected or omitted."""


class MalformedIdentifierError(RepositoryError, ValueError):
    """Identifier text is not a valid 24-character hex string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Malformed identifier: {value!r}")


class CacheMissError(RepositoryError):
    """Requested key is absent from the cache."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Cache miss: {key}")
