"""Shared test fixtures.

Provides a ``test_client`` for FastAPI and mock Supabase client fixtures
for use across all test modules.
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Settings are instantiated at import time; give them credentials first.
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

# Build the settings singleton now, before any test patches the environment.
import app.core.config  # noqa: E402,F401


def chainable_table_mock() -> MagicMock:
    """Return a mock that supports fluent query chaining."""
    m = MagicMock()
    for method in (
        "select", "insert", "upsert", "update", "delete", "eq", "limit", "order",
    ):
        getattr(m, method).return_value = m
    m.execute.return_value = MagicMock(data=[])
    return m


@pytest.fixture()
def projects_table() -> Generator[MagicMock, None, None]:
    """Patch the projects service client; yields the chainable table mock."""
    table = chainable_table_mock()
    mock_client = MagicMock()
    mock_client.table.return_value = table
    with patch("app.services.projects.get_supabase", return_value=mock_client):
        yield table


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_client.table.return_value = chainable_table_mock()
    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client
