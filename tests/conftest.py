"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlink.common.logging_config import setup_logging
from shortlink.database.memory import InMemoryLinkStore
from shortlink.idgen import IdentifierGenerator
from shortlink.service import ShortLinkService
from web_app import create_app


class ScriptedGenerator(IdentifierGenerator):
    """Generator that hands out a fixed sequence of identifiers."""

    def __init__(self, identifiers):
        super().__init__(length=len(identifiers[0]))
        self._identifiers = list(identifiers)
        self.calls = 0

    def generate(self) -> str:
        identifier = self._identifiers[min(self.calls, len(self._identifiers) - 1)]
        self.calls += 1
        return identifier


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def generator():
    """Create identifier generator."""
    return IdentifierGenerator(length=6)


@pytest.fixture
def store(logger):
    """Create in-process link store."""
    return InMemoryLinkStore(logger=logger)


@pytest.fixture
def service(store, generator, logger) -> ShortLinkService:
    """Create service instance."""
    return ShortLinkService(store=store, generator=generator, logger=logger)


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(database_url="memory://", base_url="http://testserver")


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def scripted_generator():
    """Factory for generators that replay a fixed identifier sequence."""
    return ScriptedGenerator
