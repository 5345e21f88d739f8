"""
Task database provisioner.

Creates the users and tasks collections with schema validation, builds their
indexes and seeds demo data into an empty database. Safe to run on every
container start.

Usage:
    python -m taskdb

Environment Variables:
    MONGO_URI: MongoDB connection string, database included
    APP_DB_USER / APP_DB_PASSWORD: Application user to provision (optional)
    SEED_DEMO_DATA: Seed demo data into empty collections (default: true)
    REPLACE_CONFLICTING_INDEXES: Recreate clashing indexes (default: false)
    APP_DB_AUTH_SOURCE: Database the app user is created in (default: admin)
    LOG_LEVEL: Logging level (default: INFO)
"""
import logging

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from taskdb.config import get_settings
from taskdb.core.exceptions import ReconcileError
from taskdb.database.accounts import ensure_app_user
from taskdb.database.connections import close_connections, get_database, ping
from taskdb.database.reconciler import reconcile

logger = logging.getLogger("taskdb")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> int:
    """Run provisioning once. Returns the process exit code."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(settings.log_level)

    try:
        db = get_database()
        ping(db)

        if settings.app_db_user and settings.app_db_password:
            ensure_app_user(
                db,
                settings.app_db_user,
                settings.app_db_password,
                settings.app_db_roles,
                auth_source=settings.app_db_auth_source,
            )

        reconcile(
            db,
            seed=settings.seed_demo_data,
            replace_conflicting_indexes=settings.replace_conflicting_indexes,
        )
    except (PyMongoError, ReconcileError) as e:
        logger.error(f"Initialization failed: {e}")
        return 1
    finally:
        close_connections()

    logger.info("Initialization script completed successfully")
    return 0
