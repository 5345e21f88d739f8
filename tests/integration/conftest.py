"""
Integration test fixtures.

These tests require a running MongoDB server, which the mocks cannot stand
in for: they rely on server-side validators, unique indexes and text search.
Set MONGODB_TEST_URI to point at it; tests are skipped when it is unreachable.
"""
import os
from uuid import uuid4

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError


@pytest.fixture(scope="session")
def live_mongo_client():
    """Client for the MongoDB under test, or skip."""
    uri = os.getenv("MONGODB_TEST_URI", "mongodb://localhost:27017")
    client = MongoClient(uri, serverSelectionTimeoutMS=2000)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip(f"No MongoDB reachable at {uri}")
    yield client
    client.close()


@pytest.fixture
def live_db(live_mongo_client):
    """A throwaway database, dropped after the test."""
    name = f"taskdb_test_{uuid4().hex[:12]}"
    yield live_mongo_client[name]
    live_mongo_client.drop_database(name)
