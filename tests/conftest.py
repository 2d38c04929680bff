"""
Shared test fixtures: test client.
"""

import pytest
from fastapi.testclient import TestClient

from roofcalc.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
