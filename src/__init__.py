# src/__init__.py — v2
"""docrepo: typed document repositories with a cache-aside overlay."""

from docrepo.cache.base_cache import BaseCache
from docrepo.cache.cache_factory import create_cache
from docrepo.cache.cached_gateway import CachedGateway
from docrepo.cache.filter_cache import FilterCachedGateway, filter_hash
from docrepo.cache.memory_cache import MemoryCache
from docrepo.config.settings import ConfigurationError, Settings, load_settings
from docrepo.core.errors import (
    CacheMissError,
    MalformedIdentifierError,
    NotDeletedError,
    NotFoundError,
    NotUpdatedError,
    ProjectionRequiredError,
    RepositoryError,
)
from docrepo.core.identifier import NIL_ID, Identifier
from docrepo.core.models import Document
from docrepo.logging.logger import get_logger, setup_logging, setup_logging_from_settings
from docrepo.repository_factory import create_repository
from docrepo.store.base_gateway import BaseGateway
from docrepo.store.client_factory import create_mongo_client, get_collection
from docrepo.store.mongo_gateway import MongoGateway
from docrepo.store.projection import ProjectedGateway

__version__ = "0.1.0"

__all__ = [
    "NIL_ID",
    "BaseCache",
    "BaseGateway",
    "CacheMissError",
    "CachedGateway",
    "ConfigurationError",
    "Document",
    "FilterCachedGateway",
    "Identifier",
    "MalformedIdentifierError",
    "MemoryCache",
    "MongoGateway",
    "NotDeletedError",
    "NotFoundError",
    "NotUpdatedError",
    "ProjectedGateway",
    "ProjectionRequiredError",
    "RepositoryError",
    "Settings",
    "create_cache",
    "create_mongo_client",
    "create_repository",
    "filter_hash",
    "get_collection",
    "get_logger",
    "load_settings",
    "setup_logging",
    "setup_logging_from_settings",
]
