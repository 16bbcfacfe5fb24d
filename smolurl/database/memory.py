"""In-memory mapping store, for local runs and tests."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from ..errors import DuplicateCodeError
from .base import MappingStore
from .models import ShortLink


class MemoryStore(MappingStore):
    """Dict-backed store living in the event loop's process."""

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, ShortLink] = {}

    async def insert(self, code: str, url: str) -> ShortLink:
        # Yield once so concurrent callers interleave like they would on real I/O
        await asyncio.sleep(0)

        # No await between the membership test and the assignment
        if code in self._links:
            raise DuplicateCodeError(f"Duplicate key: code '{code}' already exists")
        link = ShortLink(code=code, url=url, created_at=datetime.now(timezone.utc))
        self._links[code] = link

        self.logger.debug(f"Stored {code} -> {url}")
        return link

    async def find_by_code(self, code: str) -> Optional[ShortLink]:
        await asyncio.sleep(0)
        return self._links.get(code)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self._links.clear()

    def __len__(self) -> int:
        return len(self._links)
