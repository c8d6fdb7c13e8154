"""API test fixtures: async DB + FastAPI test client.

Invariants:
    - Clients run against test_manager (root conftest), so get_db runs unchanged
    - seed_account inserts rows directly, bypassing the routes (inactive accounts)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the SQL used by the routes is
      portable (RETURNING, CURRENT_TIMESTAMP)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.models.login_account import LoginAccount


@pytest.fixture
async def client(test_manager):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seed_account(test_db):
    """Insert a LoginAccount directly; returns the refreshed row."""

    async def _seed(
        username="bob", password="hunter22", name="Bob",
        email="bob@example.com", is_active=True,
    ) -> LoginAccount:
        account = LoginAccount(
            username=username, password=password, name=name,
            email=email, is_active=is_active,
        )
        test_db.add(account)
        await test_db.commit()
        await test_db.refresh(account)
        return account

    return _seed


@pytest.fixture
def register(client):
    """POST /auth/register with the alice payload, fields overridable."""

    async def _register(**overrides):
        payload = {
            "username": "alice",
            "password": "secret1",
            "name": "Alice",
            "email": "a@x.com",
        }
        payload.update(overrides)
        return await client.post("/auth/register", json=payload)

    return _register
