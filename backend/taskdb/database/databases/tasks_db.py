"""
Tasks database configuration.
Stores application users and their to-do tasks.

Structure:
- users: Accounts, unique by email
- tasks: To-do items owned by a user, soft-deleted via isDeleted
"""
from pymongo import ASCENDING, DESCENDING, TEXT

from taskdb.models.collection import CollectionSpec, IndexSpec


class Collections:
    """Collection names in the tasks database."""
    USERS = "users"
    TASKS = "tasks"


# ==================== Validators ====================

_NULLABLE_DATE = {"bsonType": ["date", "null"]}

USERS_VALIDATOR = {
    "bsonType": "object",
    "required": ["email", "passwordHash", "createdAt"],
    "additionalProperties": False,
    "properties": {
        "_id": {"bsonType": "objectId"},
        "email": {
            "bsonType": "string",
            "description": "User email in lowercase",
            "minLength": 5,
            "maxLength": 320,
        },
        "passwordHash": {
            "bsonType": "string",
            "description": "BCrypt/Argon2 hash of the user's password",
            "minLength": 20,
        },
        "name": {
            "bsonType": ["string", "null"],
            "description": "Optional display name",
            "maxLength": 120,
        },
        "roles": {
            "bsonType": ["array"],
            "description": "User roles",
            "items": {"bsonType": "string"},
            "uniqueItems": False,
        },
        "createdAt": {"bsonType": "date"},
        "updatedAt": _NULLABLE_DATE,
        "lastLoginAt": _NULLABLE_DATE,
        "isActive": {"bsonType": "bool", "description": "Soft delete/disable flag"},
        "meta": {
            "bsonType": ["object", "null"],
            "description": "Arbitrary metadata",
            "additionalProperties": True,
        },
    },
}

CHECKLIST_ITEM_VALIDATOR = {
    "bsonType": "object",
    "required": ["text", "done"],
    "additionalProperties": False,
    "properties": {
        "text": {"bsonType": "string", "minLength": 1, "maxLength": 1000},
        "done": {"bsonType": "bool"},
        "doneAt": _NULLABLE_DATE,
    },
}

TASKS_VALIDATOR = {
    "bsonType": "object",
    "required": ["title", "status", "ownerId", "createdAt"],
    "additionalProperties": False,
    "properties": {
        "_id": {"bsonType": "objectId"},
        "title": {
            "bsonType": "string",
            "description": "Task title",
            "minLength": 1,
            "maxLength": 300,
        },
        "description": {
            "bsonType": ["string", "null"],
            "description": "Optional details",
            "maxLength": 5000,
        },
        "status": {
            "bsonType": "string",
            "enum": ["todo", "in_progress", "done", "archived"],
            "description": "Task status",
        },
        "priority": {
            "bsonType": ["string", "int", "null"],
            "description": "Optional priority (low, medium, high) or numeric",
            "maxLength": 20,
        },
        "dueDate": {"bsonType": ["date", "null"], "description": "Optional due date"},
        "ownerId": {"bsonType": "objectId", "description": "Reference to users._id"},
        "tags": {
            "bsonType": ["array"],
            "description": "Tags for organization",
            "items": {"bsonType": "string"},
        },
        "createdAt": {"bsonType": "date"},
        "updatedAt": _NULLABLE_DATE,
        "completedAt": _NULLABLE_DATE,
        "isDeleted": {"bsonType": "bool", "description": "Soft delete"},
        "checklist": {
            "bsonType": ["array"],
            "description": "Subtasks/checklist items",
            "items": CHECKLIST_ITEM_VALIDATOR,
        },
    },
}


# ==================== Indexes ====================

USERS_INDEXES = [
    IndexSpec(collection=Collections.USERS, name="uniq_email",
              keys=[("email", ASCENDING)], unique=True),
    IndexSpec(collection=Collections.USERS, name="idx_isActive",
              keys=[("isActive", ASCENDING)]),
    IndexSpec(collection=Collections.USERS, name="idx_createdAt_desc",
              keys=[("createdAt", DESCENDING)]),
]

TASKS_INDEXES = [
    IndexSpec(
        collection=Collections.TASKS,
        name="idx_owner_status_deleted_created",
        keys=[
            ("ownerId", ASCENDING),
            ("status", ASCENDING),
            ("isDeleted", ASCENDING),
            ("createdAt", DESCENDING),
        ],
    ),
    IndexSpec(collection=Collections.TASKS, name="idx_dueDate",
              keys=[("dueDate", ASCENDING)]),
    IndexSpec(
        collection=Collections.TASKS,
        name="text_search",
        keys=[("title", TEXT), ("description", TEXT), ("tags", TEXT)],
        weights={"title": 10, "description": 5, "tags": 2},
        default_language="english",
    ),
    IndexSpec(collection=Collections.TASKS, name="idx_isDeleted",
              keys=[("isDeleted", ASCENDING)]),
    IndexSpec(collection=Collections.TASKS, name="idx_status_created_desc",
              keys=[("status", ASCENDING), ("createdAt", DESCENDING)]),
]


# Reconciled in this order: tasks reference users
COLLECTION_SPECS = [
    CollectionSpec(name=Collections.USERS, json_schema=USERS_VALIDATOR, indexes=USERS_INDEXES),
    CollectionSpec(name=Collections.TASKS, json_schema=TASKS_VALIDATOR, indexes=TASKS_INDEXES),
]

