"""Abstract base class for mapping store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import ShortLink


class MappingStore(ABC):
    """Persists code -> URL records and owns the uniqueness constraint on code.

    Implementations must make `insert` atomic with respect to uniqueness: two
    racing inserts of the same code end with exactly one record, and the loser
    sees DuplicateCodeError. Callers never pre-check existence.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Store connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def insert(self, code: str, url: str) -> ShortLink:
        """Insert a new mapping.

        Args:
            code: Normalized (lowercase) code
            url: Destination URL

        Returns:
            The stored ShortLink

        Raises:
            DuplicateCodeError: If the code is already mapped
            StoreUnavailableError: If the backend is unreachable or timed out
        """

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[ShortLink]:
        """Look up a mapping by code.

        Returns:
            The ShortLink, or None if the code is unknown

        Raises:
            StoreUnavailableError: If the backend is unreachable or timed out
        """

    async def ensure_schema(self) -> None:
        """Create backing tables if needed. No-op by default."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""

    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
