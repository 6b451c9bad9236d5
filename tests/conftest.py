"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from daumdic.fetcher import Fetcher
from daumdic.main import app
from daumdic.service import DictionaryService, get_service

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    """Read an HTML fixture page by name (without extension)."""
    return (FIXTURES_DIR / f"{name}.html").read_text(encoding="utf-8")


@pytest.fixture
def load_page() -> Callable[[str], str]:
    """Return a loader for HTML fixture pages."""
    return read_fixture


def make_fetcher(html: str = "") -> MagicMock:
    """Create a fetcher stub returning `html` from both fetch methods."""
    fetcher = MagicMock(spec=Fetcher)
    fetcher.fetch.return_value = html
    fetcher.fetch_async = AsyncMock(return_value=html)
    return fetcher


@pytest.fixture
def fetcher_factory() -> Callable[[str], MagicMock]:
    """Return a factory for fetcher stubs serving the given HTML."""
    return make_fetcher


@pytest.fixture
def stub_fetcher() -> MagicMock:
    """Fetcher stub serving the English fixture page."""
    return make_fetcher(read_fixture("english"))


@pytest.fixture
def stub_service(stub_fetcher: MagicMock) -> DictionaryService:
    """Dictionary service backed by the fetcher stub."""
    return DictionaryService(fetcher=stub_fetcher)


@pytest.fixture
def test_app(stub_service: DictionaryService) -> FastAPI:
    """Create a test FastAPI application."""
    app.dependency_overrides[get_service] = lambda: stub_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
