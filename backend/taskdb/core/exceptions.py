"""
Errors raised while reconciling the database with its declared state.

Driver errors (``pymongo.errors.PyMongoError``) are not wrapped; they reach
the caller unchanged.
"""


class ReconcileError(Exception):
    """Base class for reconciliation failures."""


class IndexConflictError(ReconcileError):
    """An existing index clashes with a declared one."""

    def __init__(self, collection: str, index_name: str, detail: str = ""):
        self.collection = collection
        self.index_name = index_name
        message = f"Index '{index_name}' on '{collection}' conflicts with an existing index"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
