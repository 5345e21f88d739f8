"""
Database definitions and collection constants.
"""
from taskdb.database.databases import tasks_db

__all__ = ["tasks_db"]
