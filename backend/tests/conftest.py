"""Shared pytest fixtures for Item Counter tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from itemcounter.counting.router import get_counting_service
from itemcounter.counting.service import CountingService
from itemcounter.main import app


@pytest.fixture
def service():
    return CountingService()


@pytest.fixture
async def client(service):
    """Async test client with the counting service wired into the app."""
    app.dependency_overrides[get_counting_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
