"""Shared pytest fixtures for the rsabreak test suite."""

import pytest
from httpx import ASGITransport, AsyncClient

from rsabreak.main import app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
async def client():
    """Provide an async HTTP test client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
