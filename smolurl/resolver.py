"""Read path: turn a code into a redirect decision."""

import logging
from dataclasses import dataclass
from typing import Optional

from .database.base import MappingStore
from .database.cache import RedisCache
from .shortcode import CodeGenerator


@dataclass(frozen=True)
class RedirectTarget:
    """Where to send the client. `found` is False for the fallback."""

    location: str
    found: bool


class Resolver:
    """Resolves codes against the store, degrading misses to a fallback URL."""

    def __init__(
        self,
        store: MappingStore,
        fallback_url: str,
        cache: Optional[RedisCache] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize resolver.

        Args:
            store: Mapping store handle
            fallback_url: Destination for codes that don't resolve
            cache: Optional read-through cache
            logger: Optional logger
        """
        self.store = store
        self.fallback_url = fallback_url
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, code: str) -> RedirectTarget:
        """Resolve a code to its destination.

        A miss is a normal outcome and returns the fallback. StoreUnavailableError
        from the store propagates.
        """
        code = (code or "").strip().lower()

        if not CodeGenerator.is_valid_format(code):
            self.logger.debug(f"Malformed code, using fallback: {code!r}")
            return RedirectTarget(self.fallback_url, found=False)

        if self.cache:
            cached_url = await self.cache.get(code)
            if cached_url:
                self.logger.debug(f"Cache hit for {code}")
                return RedirectTarget(cached_url, found=True)

        link = await self.store.find_by_code(code)
        if link is None:
            self.logger.info(f"Code not found: {code}")
            return RedirectTarget(self.fallback_url, found=False)

        if self.cache:
            await self.cache.set(code, link.url)

        self.logger.debug(f"Resolved {code} -> {link.url}")
        return RedirectTarget(link.url, found=True)
