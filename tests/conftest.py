"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from smolurl.common.logging_config import setup_logging
from smolurl.database.memory import MemoryStore
from smolurl.service import LinkService
from smolurl.shortcode import CodeGenerator
from web_app import create_app

BASE_URL = "https://short.example"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> MemoryStore:
    """In-memory mapping store."""
    return MemoryStore(logger=logger)


@pytest.fixture
def code_generator():
    """Create code generator."""
    return CodeGenerator(length=5)


@pytest.fixture
def service(store, code_generator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(
        store=store,
        base_url=BASE_URL,
        generator=code_generator,
        cache=None,
        logger=logger,
    )


@pytest.fixture
def config() -> Config:
    """Development config pointing at the in-memory store."""
    return Config(
        database_url="memory://",
        base_url=BASE_URL,
        environment="development",
    )


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(config=config, service_instance=service)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
