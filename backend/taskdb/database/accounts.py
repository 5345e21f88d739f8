"""
Application database user provisioning.
"""
import logging
from typing import Sequence

from pymongo.database import Database

logger = logging.getLogger(__name__)


def ensure_app_user(
    db: Database,
    username: str,
    password: str,
    roles: Sequence[str],
    auth_source: str = "admin",
) -> None:
    """
    Create the application user, or reset its password and roles.

    The user is stored in ``auth_source`` (the ``authSource`` of the app's
    connection string); roles are granted on ``db``. Requires a connection
    with user administration rights.
    """
    grants = [{"role": role, "db": db.name} for role in roles]
    user_db = db.client[auth_source]

    existing = user_db.command("usersInfo", username).get("users", [])
    if existing:
        logger.info(
            f"Database user '{auth_source}.{username}' exists, updating password and roles"
        )
        user_db.command("updateUser", username, pwd=password, roles=grants)
    else:
        logger.info(
            f"Creating database user '{auth_source}.{username}' with roles {list(roles)} on '{db.name}'"
        )
        user_db.command("createUser", username, pwd=password, roles=grants)
