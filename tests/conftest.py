"""
Global test fixtures for the task database provisioner.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- A fixed clock for seed documents
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for document reads and writes. It does not enforce validators.
    """
    import mongomock
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mongomock_db(mock_mongo_client):
    """Provide the mock tasks database."""
    yield mock_mongo_client["myapp"]


# =============================================================================
# Time Fixtures
# =============================================================================

@pytest.fixture
def fixed_now() -> datetime:
    """A fixed, millisecond-aligned timestamp for seed documents."""
    return datetime(2024, 10, 15, 12, 0, 0, tzinfo=timezone.utc)
