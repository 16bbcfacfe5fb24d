"""Business logic service for smolurl."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .common.url_builder import build_error_url, build_short_url
from .common.validators import LinkRequest, is_reserved_code, validate_link_request
from .database.base import MappingStore
from .database.cache import RedisCache
from .database.models import ShortLink
from .errors import DuplicateCodeError, StoreUnavailableError
from .resolver import RedirectTarget, Resolver
from .result import Err, Ok, Result
from .shortcode import CodeGenerator


@dataclass(frozen=True)
class CreatedLink:
    """A freshly stored link plus its public short URL."""

    link: ShortLink
    short_url: str

    def to_dict(self) -> dict:
        return {**self.link.to_dict(), "link": self.short_url}


class LinkService:
    """Service layer for creating and resolving short links."""

    def __init__(
        self,
        store: MappingStore,
        base_url: str,
        generator: Optional[CodeGenerator] = None,
        cache: Optional[RedisCache] = None,
        error_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.

        Args:
            store: Mapping store handle, owned by the caller
            base_url: Public base URL used to build short links
            generator: Optional code generator (5-character codes by default)
            cache: Optional cache instance
            error_url: Fallback destination (defaults to base_url + "/error")
            logger: Optional logger
        """
        self.store = store
        self.base_url = base_url
        self.generator = generator or CodeGenerator()
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = Resolver(
            store=store,
            fallback_url=error_url or build_error_url(base_url),
            cache=cache,
            logger=self.logger,
        )

    async def create_link(self, request: LinkRequest) -> Result[CreatedLink]:
        """Validate, pick a code, and store a new link.

        Returns:
            Ok(CreatedLink), or Err with ValidationFailedError,
            DuplicateCodeError or StoreUnavailableError
        """
        validation = validate_link_request(request)
        if not validation.ok:
            error = validation.to_error()
            self.logger.info(f"Rejected link request on {error.fields}: {error.message}")
            return Err(error)

        if validation.code:
            code = validation.code.lower()
        else:
            code = self._generate_code()
            if code is None:
                return Err(DuplicateCodeError())

        try:
            link = await self.store.insert(code, validation.url)
        except DuplicateCodeError as e:
            self.logger.info(f"Code already in use: {code} ({e})")
            return Err(DuplicateCodeError())
        except StoreUnavailableError as e:
            return Err(e)

        if self.cache:
            await self.cache.set(link.code, link.url)

        self.logger.info(f"Created short link: {link.code} -> {link.url}")
        return Ok(CreatedLink(link=link, short_url=build_short_url(link.code, self.base_url)))

    def _generate_code(self) -> Optional[str]:
        """Draw a lowercase code that no app route shadows.

        A reserved draw gets one redraw; a second reserved draw returns None.
        """
        for _ in range(2):
            code = self.generator.generate().lower()
            if not is_reserved_code(code):
                return code
            self.logger.info(f"Generated code {code} is reserved, drawing again")
        return None

    async def resolve(self, code: str) -> RedirectTarget:
        """Resolve a code; misses return the fallback destination."""
        return await self.resolver.resolve(code)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()
        cache_healthy = await self.cache.health_check() if self.cache else True

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
