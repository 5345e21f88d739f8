"""
Backend-specific test fixtures.

``mock_db`` stands in for ``pymongo.database.Database`` so tests can assert
the exact commands the reconciler sends, and in which order.
"""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import OperationFailure


@pytest.fixture
def mock_db():
    """
    A MagicMock database whose ``db[name]`` returns one mock per collection.

    Collection mocks are attached to the database mock, so
    ``mock_db.mock_calls`` records database and collection calls in a single
    ordered list (collection calls appear as ``coll_<name>.<method>``).
    """
    db = MagicMock()
    db.name = "myapp"
    db.list_collection_names.return_value = []
    collections = {}

    def _get_collection(name):
        if name not in collections:
            collection = MagicMock()
            collection.index_information.return_value = {}
            db.attach_mock(collection, f"coll_{name}")
            collection.name = name
            collections[name] = collection
        return collections[name]

    db.__getitem__.side_effect = _get_collection
    db.collections = collections
    return db


@pytest.fixture
def index_conflict():
    """Factory for the OperationFailure the server raises on index clashes."""
    def _make(code: int = 86, message: str = "Index with name already exists"):
        return OperationFailure(message, code=code)
    return _make


@pytest.fixture
def call_names():
    """Names of recorded calls, e.g. ``create_collection`` or ``coll_tasks.create_index``."""
    def _names(mock) -> list[str]:
        return [c[0] for c in mock.mock_calls]
    return _names
