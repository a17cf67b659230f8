"""Shared pytest fixtures."""

from __future__ import annotations

import os

# Force settings to use test-safe defaults before any import
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from tests.fake_executor import FakeExecutor


@pytest.fixture
def fake_executor():
    """Provide a fresh FakeExecutor."""
    return FakeExecutor()


@pytest.fixture
def test_settings(tmp_path):
    from app.config import Settings

    return Settings(static_dir=str(tmp_path / "dist"), log_level="WARNING")


@pytest.fixture
def fastapi_app(test_settings, fake_executor):
    from app.main import create_app

    return create_app(test_settings, executor=fake_executor)


@pytest.fixture
async def client(fastapi_app):
    """Async test client with the fake executor injected."""
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
