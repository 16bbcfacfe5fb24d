"""Logging middleware."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request."""

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("smolurl.web")

    async def dispatch(self, request: Request, call_next: Callable):
        """Log method, path, status and duration."""
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"- {duration_ms:.2f} ms - {client_ip}"
        )

        return response
