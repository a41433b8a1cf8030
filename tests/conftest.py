"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def start_date() -> date:
    """Fixed project start used by schedule tests."""
    return date(2024, 1, 1)


@pytest.fixture
def client():
    """Test client for the FastAPI application."""
    from planrisk.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
