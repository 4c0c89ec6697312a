"""API test fixtures: FastAPI app driven through httpx.

Invariants:
    - Requests go through ASGITransport (no network, no server process)
    - dependency_overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from artforge.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
