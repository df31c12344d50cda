"""API test fixtures: fresh MovieStore + FastAPI test client.

Invariants:
    - Every test gets its own empty MovieStore
    - get_movie_store dependency overridden, so the lifespan need not run

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real ASGI stack
      (routing, error handlers, serialization) without a network socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from movies_api.api.dependencies import get_movie_store
from movies_api.core.movie_store import MovieStore
from movies_api.main import app


@pytest.fixture
def store():
    return MovieStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_movie_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
