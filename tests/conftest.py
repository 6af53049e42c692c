"""Pytest configuration file."""

import pytest
from app.common.config import config
from app.main import app
from fastapi.testclient import TestClient

TEST_MAX_DESCRIPTION_LENGTH = 100


@pytest.fixture(autouse=True, scope="session")
def override_max_description_length():
    """Automatically override the maximum description length before the test session."""
    config.max_description_length = TEST_MAX_DESCRIPTION_LENGTH


@pytest.fixture(scope="session")
def max_description_length():
    """Returns the maximum description length accepted by the API during the tests."""
    return TEST_MAX_DESCRIPTION_LENGTH


@pytest.fixture(scope="function")
def test_client():
    """Create a FastAPI test client."""
    return TestClient(app)
