"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import smolurl

from .api import api_router
from .errors import register_exception_handlers
from .middleware.headers import SecurityHeadersMiddleware
from .middleware.logging import LoggingMiddleware
from .web import web_router


def create_app(
    config,
    service_instance=None,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration instance
        service_instance: LinkService; may be None when `lifespan` builds it
        lifespan: Optional lifespan context that sets app.state.service

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="smolurl",
        description="Short links for long URLs",
        version=smolurl.__version__,
        docs_url=None if config.is_production else "/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.service = service_instance

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
