"""
Pytest configuration and fixtures for seoaudit tests.
"""
from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from seoaudit.services.document import ParsedDocument, parse_document
from seoaudit.services.fetcher import FetchedPage
from tests.fixtures.sample_pages import HOME_PAGE_HTML


# ============================================================================
# Document Fixtures
# ============================================================================

@pytest.fixture
def page_url() -> str:
    """Default URL of the page under audit."""
    return "https://example.com/"


@pytest.fixture
def make_document(page_url: str) -> Callable[..., ParsedDocument]:
    """Build a ParsedDocument from HTML, bound to ``page_url`` by default."""
    def _make(html: str, base_url: str | None = None) -> ParsedDocument:
        return parse_document(html, base_url or page_url)
    return _make


@pytest.fixture
def make_page(page_url: str) -> Callable[..., FetchedPage]:
    """Build a FetchedPage as the fetcher would return it."""
    def _make(html: str, url: str | None = None, final_url: str | None = None, status_code: int = 200) -> FetchedPage:
        url = url or page_url
        return FetchedPage(
            url=url,
            final_url=final_url or url,
            status_code=status_code,
            text=html,
        )
    return _make


@pytest.fixture
def sample_html_page() -> str:
    """Home page HTML with one H1, two H2s, three external and two internal links."""
    return HOME_PAGE_HTML


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def make_mock_client() -> Callable[..., httpx.AsyncClient]:
    """Create an httpx client whose requests are answered by ``handler``."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def mock_httpx_client():
    """Mock httpx client for patching ``httpx.AsyncClient`` construction."""
    mock = AsyncMock()
    mock.get = AsyncMock()
    mock.__aenter__ = AsyncMock(return_value=mock)
    mock.__aexit__ = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_response() -> Callable[..., MagicMock]:
    """Build a response double with the attributes the fetcher reads."""
    def _make(text: str = "", status_code: int = 200, url: str = "https://example.com/") -> MagicMock:
        response = MagicMock()
        response.text = text
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.url = url
        return response
    return _make


# ============================================================================
# FastAPI App Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def app() -> FastAPI:
    """Create test FastAPI application."""
    from seoaudit.main import app as main_app
    return main_app


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
