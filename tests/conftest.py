"""Shared fixtures: ASGI test client and a recorder for patched service calls."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Route tests never reach a real database; keep any local .env out of the way
os.environ.setdefault("DB_NAME", "attendance_test")
os.environ.setdefault("AUTO_INIT_DB", "1")

from attendance_api.main import app  # noqa: E402


@pytest.fixture
async def client():
    """Test client without lifespan, so no pool is opened."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def calls():
    """Records (name, args) of every faked service call."""
    return []


@pytest.fixture
def fake(monkeypatch, calls):
    """Replace an async function on a module with a recording fake.

    Usage: fake(module, "name", result) or fake(module, "name", raises=exc).
    """

    def _install(module, name, result=None, raises=None):
        async def _fake(*args, **kwargs):
            calls.append((name, args))
            if raises is not None:
                raise raises
            return result() if callable(result) else result

        monkeypatch.setattr(module, name, _fake)
        return _fake

    return _install
