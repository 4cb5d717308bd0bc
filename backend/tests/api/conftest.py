"""Route test fixtures — FastAPI app served through httpx with the test DB.

Invariants:
    - get_db dependency overridden to use the per-test in-memory database
    - db_manager patched so /api/health/ready sees the test engine
    - Lifespan is not run by ASGITransport; no real database is touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from library_api.infrastructure.database import get_db, DatabaseSessionManager
import library_api.infrastructure.database as db_module
from library_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_book(client):
    """Create a book through the API and return its JSON body."""
    async def _make(isbn=123231, title="Dom Casmurro", author="Machado de Assis"):
        res = await client.post(
            "/api/books", json={"title": title, "author": author, "isbn": isbn},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make
