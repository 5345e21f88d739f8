"""
Database module - MongoDB connection, declarations and reconciliation.
"""
from taskdb.database.connections import (
    get_mongo_client,
    get_database,
    ping,
    close_connections,
)
from taskdb.database.databases import tasks_db
from taskdb.database.reconciler import (
    ensure_collection,
    ensure_indexes,
    seed_if_empty,
    seed_demo_data,
    reconcile,
)
from taskdb.database.accounts import ensure_app_user

__all__ = [
    "get_mongo_client",
    "get_database",
    "ping",
    "close_connections",
    "tasks_db",
    "ensure_collection",
    "ensure_indexes",
    "seed_if_empty",
    "seed_demo_data",
    "reconcile",
    "ensure_app_user",
]
