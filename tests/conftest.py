"""Pytest fixtures and shared test configuration.

Fixtures:
    - fake_model: Scripted model collaborator
    - engine: ConversationEngine over the fake model with no reveal delay
    - make_pdf: Builds small PDFs in memory
    - async_client: HTTPX client for API testing with the fake engine injected
"""

import io
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from nexchat.api import app
from nexchat.api.deps import get_content_service, get_engine
from nexchat.content.service import ContentService
from nexchat.engine import ConversationEngine
from tests.fakes import FakeModel


@pytest.fixture
def fake_model() -> FakeModel:
    """Return a model that answers "Hi there"."""
    return FakeModel()


@pytest.fixture
def engine(fake_model: FakeModel) -> ConversationEngine:
    """Return an engine whose reveal does not wait between ticks."""
    return ConversationEngine(model=fake_model, reveal_interval=0)


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Return a factory for blank PDFs.

    Returns:
        Function taking a page count and optional title, returning PDF bytes.
    """

    def _make(pages: int = 1, title: str | None = None) -> bytes:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=612, height=792)
        if title:
            writer.add_metadata({"/Title": title})
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
async def async_client(
    engine: ConversationEngine, fake_model: FakeModel
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient talking to the app with fakes injected.
    """
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_content_service] = lambda: ContentService(fake_model)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
