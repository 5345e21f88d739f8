"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from taskdb.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
    return _mongo_client


def get_database() -> Database:
    """
    Get the pre-selected database.

    The database named in the connection string wins; ``mongo_db`` is the
    fallback for URIs without one.
    """
    client = get_mongo_client()
    return client.get_default_database(default=get_settings().mongo_db)


def ping(db: Database) -> None:
    """Round-trip to the server so auth and network errors surface early."""
    db.command("ping")
    logger.info(f"Connected to MongoDB database '{db.name}'")


def close_connections() -> None:
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
