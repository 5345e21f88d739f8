"""
Schema reconciliation.
Brings collections, validators and indexes in line with their declarations
and seeds demo data into an empty database.

Every step re-checks the live database, so a run that stopped halfway is
finished by running it again.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Sequence

from bson import ObjectId
from pymongo import TEXT
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import OperationFailure

from taskdb.core.exceptions import IndexConflictError
from taskdb.database.databases.tasks_db import COLLECTION_SPECS, Collections
from taskdb.database.fixtures import DEMO_USER_EMAIL, build_demo_tasks, build_demo_user
from taskdb.models.collection import CollectionSpec, IndexSpec

logger = logging.getLogger(__name__)

# Server error codes for an index that clashes with an existing one
INDEX_OPTIONS_CONFLICT = 85
INDEX_KEY_SPECS_CONFLICT = 86
INDEX_CONFLICT_CODES = (INDEX_OPTIONS_CONFLICT, INDEX_KEY_SPECS_CONFLICT)


def ensure_collection(
    db: Database,
    spec: CollectionSpec,
    replace_conflicting_indexes: bool = False,
) -> None:
    """
    Create or update a collection with its validator, then ensure its indexes.

    - If the collection doesn't exist, it is created with the validator.
    - If it exists, the validator is applied in place with ``collMod``;
      existing documents are left untouched.

    Args:
        db: Target database
        spec: Desired collection state
        replace_conflicting_indexes: Drop and recreate indexes that clash
            with a declared one instead of failing

    Raises:
        IndexConflictError: If a declared index clashes with an existing one
        OperationFailure: If the server rejects the validator or an index
    """
    options = spec.validator_options()

    if not db.list_collection_names(filter={"name": spec.name}):
        logger.info(f"Creating collection '{spec.name}' with schema validation")
        db.create_collection(spec.name, **options)
    else:
        logger.info(f"Collection '{spec.name}' already exists, updating validator")
        db.command("collMod", spec.name, **options)

    ensure_indexes(db, spec, replace_conflicting_indexes=replace_conflicting_indexes)


def ensure_indexes(
    db: Database,
    spec: CollectionSpec,
    replace_conflicting_indexes: bool = False,
) -> None:
    """Create every declared index; already-correct indexes are a no-op."""
    for index in spec.indexes:
        collection = db[index.collection]
        logger.info(f"  Ensuring index '{index.name}' on {index.keys}")
        try:
            collection.create_index(index.keys, **index.create_index_options())
        except OperationFailure as exc:
            if exc.code not in INDEX_CONFLICT_CODES:
                raise
            if not replace_conflicting_indexes:
                raise IndexConflictError(index.collection, index.name, str(exc)) from exc
            _replace_index(collection, index)


def _normalize_key(keys: Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    return [
        (field, int(direction) if isinstance(direction, (int, float)) else direction)
        for field, direction in keys
    ]


def _conflicting_indexes(collection: Collection, index: IndexSpec) -> list[str]:
    """Names of existing indexes that block creating ``index``."""
    declared = _normalize_key(index.keys)
    names = []
    for name, info in collection.index_information().items():
        if name == "_id_":
            continue
        existing_key = _normalize_key(info["key"])
        # The server keeps at most one text index per collection
        existing_is_text = any(direction == TEXT for _, direction in existing_key)
        if (
            name == index.name
            or (index.is_text and existing_is_text)
            or existing_key == declared
        ):
            names.append(name)
    return names


def _replace_index(collection: Collection, index: IndexSpec) -> None:
    for name in _conflicting_indexes(collection, index):
        logger.warning(
            f"  Dropping index '{name}' on '{collection.name}' to apply '{index.name}'"
        )
        collection.drop_index(name)
    collection.create_index(index.keys, **index.create_index_options())
    logger.info(f"  Recreated index '{index.name}' on '{collection.name}'")


def seed_if_empty(db: Database, collection_name: str, documents: Sequence[dict]) -> int:
    """
    Insert ``documents`` only when the collection holds no documents.

    The check and the insert are not atomic; a concurrent writer between
    them is tolerated.

    Returns:
        Number of documents inserted (0 when the collection was not empty)
    """
    collection = db[collection_name]
    existing = collection.count_documents({})
    if existing:
        logger.info(
            f"Collection '{collection_name}' has {existing} document(s), skipping seed"
        )
        return 0
    if not documents:
        return 0

    result = collection.insert_many(list(documents), ordered=True)
    logger.info(f"Seeded {len(result.inserted_ids)} document(s) into '{collection_name}'")
    return len(result.inserted_ids)


def seed_demo_data(db: Database, now: Optional[datetime] = None) -> Optional[ObjectId]:
    """
    Seed the demo user, then demo tasks owned by that user.

    When users already has data, tasks are attributed to the existing demo
    user if there is one.

    Returns:
        The owner id of the demo tasks, or None if there is no demo user
    """
    now = now or datetime.now(timezone.utc)
    owner_id = None

    existing_users = db[Collections.USERS].count_documents({})
    if existing_users == 0:
        user_id = ObjectId()
        if seed_if_empty(db, Collections.USERS, [build_demo_user(user_id, now)]):
            owner_id = user_id
    else:
        logger.info(
            f"Collection '{Collections.USERS}' has {existing_users} document(s), skipping seed"
        )

    if owner_id is None:
        demo_user = db[Collections.USERS].find_one({"email": DEMO_USER_EMAIL}, {"_id": 1})
        owner_id = demo_user["_id"] if demo_user else None

    if owner_id is None:
        logger.info("No demo user to own demo tasks, skipping task seed")
        return None

    seed_if_empty(db, Collections.TASKS, build_demo_tasks(owner_id, now))
    return owner_id


def reconcile(
    db: Database,
    specs: Sequence[CollectionSpec] = COLLECTION_SPECS,
    seed: bool = True,
    replace_conflicting_indexes: bool = False,
) -> None:
    """
    Run the full reconciliation: each collection in order, then seeding.

    Stops at the first error; re-running resumes safely.
    """
    logger.info(f"Initializing MongoDB for database: {db.name}")

    for spec in specs:
        ensure_collection(db, spec, replace_conflicting_indexes=replace_conflicting_indexes)

    if seed:
        seed_demo_data(db)
