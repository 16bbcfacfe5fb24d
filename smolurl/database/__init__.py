"""Storage layer for smolurl."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import MappingStore
from .cache import RedisCache
from .memory import MemoryStore
from .models import ShortLink
from .postgres import PostgresStore

__all__ = ["MappingStore", "MemoryStore", "PostgresStore", "RedisCache", "ShortLink", "create_store"]


def create_store(
    database_url: str,
    pool_max_size: int = 10,
    timeout_seconds: float = 5.0,
    logger: Optional[logging.Logger] = None,
) -> MappingStore:
    """Build the store matching the connection string's scheme.

    Raises:
        ValueError: If the scheme is not supported
    """
    scheme = urlparse(database_url).scheme.lower()
    if scheme == "memory":
        return MemoryStore(database_url, logger=logger)
    if scheme in ("postgres", "postgresql"):
        return PostgresStore(
            database_url,
            pool_max_size=pool_max_size,
            timeout_seconds=timeout_seconds,
            logger=logger,
        )
    raise ValueError(f"Unsupported database URL scheme: {scheme or database_url!r}")
