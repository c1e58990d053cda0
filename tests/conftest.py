"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from config import Config
from ito.database.sqlite import SQLiteLinkStore
from ito.manager import LinkManager
from ito.resolver import RedirectResolver
from ito.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def db_path(tmp_path) -> str:
    """Path of a fresh SQLite file for one test."""
    return str(tmp_path / "data" / "ito.db")


@pytest.fixture
async def store(db_path, logger) -> AsyncGenerator[SQLiteLinkStore, None]:
    """Create an initialized store backed by a temporary file."""
    store = SQLiteLinkStore(db_path=db_path, pool_max_size=3, logger=logger)
    await store.initialize()
    
    yield store
    
    await store.close()


@pytest.fixture
def manager(store, logger) -> LinkManager:
    return LinkManager(store, logger=logger)


@pytest.fixture
def resolver(store, logger) -> RedirectResolver:
    return RedirectResolver(store, logger=logger)


@pytest.fixture
def config(db_path) -> Config:
    return Config(db_path=db_path, pool_size=3)


@pytest.fixture
def app(store, config, logger):
    """Create test FastAPI app."""
    return create_app(store=store, config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456?tab=votes#answer-1",
    ]
