#!/usr/bin/env python3
"""
Main entry point for the smolurl service.

Concurrency: a single async process (FastAPI + asyncpg pool + redis.asyncio)
serves requests concurrently. Run more processes behind a load balancer to
scale out; each opens its own pool and uniqueness is enforced by the database.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - Store connection URL (postgresql://... or memory://)
    DATABASE_CREATE_TABLES - Set to true to create the short_links table
    STORE_TIMEOUT_SECONDS - Bounded wait for each store call
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Public base URL for short links
    ERROR_URL - Redirect target for unknown codes
    ENVIRONMENT - 'production' hides error stacks
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from smolurl.common.logging_config import setup_logging
from smolurl.database import RedisCache, create_store
from smolurl.service import LinkService
from smolurl.shortcode import CodeGenerator
from web_app import create_app


def build_lifespan(config: Config, logger):
    """Lifespan that owns the store and cache handles for the app's lifetime."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting smolurl service...")

        store = create_store(
            config.database_url,
            pool_max_size=config.database_pool_size,
            timeout_seconds=config.store_timeout_seconds,
            logger=logger,
        )
        if config.database_create_tables:
            await store.ensure_schema()

        cache = None
        if config.redis_url:
            logger.info(f"Connecting to Redis at {config.redis_url}")
            cache = RedisCache(
                redis_url=config.redis_url,
                ttl_seconds=config.cache_ttl_seconds,
                logger=logger,
            )
            await cache.connect()
        else:
            logger.info("Redis caching disabled")

        service = LinkService(
            store=store,
            base_url=config.base_url,
            generator=CodeGenerator(length=config.code_length),
            cache=cache,
            error_url=config.fallback_url,
            logger=logger,
        )
        app.state.service = service

        logger.info("Service started successfully")
        try:
            yield
        finally:
            logger.info("Shutting down smolurl service...")
            await service.close()
            app.state.service = None
            logger.info("Service stopped")

    return lifespan


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("smolurl")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    app = create_app(config=config, lifespan=build_lifespan(config, logger))

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
