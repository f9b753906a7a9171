"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient with the app lifespan (fresh host per test)."""
    with TestClient(app) as test_client:
        yield test_client
