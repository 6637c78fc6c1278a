from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from ping_service.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as async_client:
        yield async_client
