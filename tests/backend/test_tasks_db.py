"""
Tests for the declared users/tasks collections.
"""

from taskdb.database.databases import tasks_db
from taskdb.database.databases.tasks_db import Collections


def _indexes_by_name(spec):
    return {index.name: index for index in spec.indexes}


class TestCollectionOrder:
    """Users must be reconciled before tasks."""

    def test_users_then_tasks(self):
        assert [spec.name for spec in tasks_db.COLLECTION_SPECS] == [
            Collections.USERS,
            Collections.TASKS,
        ]


class TestUsersDeclaration:
    """Tests for the users validator and indexes."""

    def test_validator_required_fields(self):
        schema = tasks_db.USERS_VALIDATOR
        assert schema["required"] == ["email", "passwordHash", "createdAt"]
        assert schema["additionalProperties"] is False

    def test_email_bounds(self):
        email = tasks_db.USERS_VALIDATOR["properties"]["email"]
        assert (email["minLength"], email["maxLength"]) == (5, 320)

    def test_nullable_fields_use_type_unions(self):
        properties = tasks_db.USERS_VALIDATOR["properties"]
        assert properties["name"]["bsonType"] == ["string", "null"]
        assert properties["meta"]["bsonType"] == ["object", "null"]
        assert properties["lastLoginAt"]["bsonType"] == ["date", "null"]

    def test_indexes(self):
        indexes = _indexes_by_name(tasks_db.COLLECTION_SPECS[0])
        assert list(indexes) == ["uniq_email", "idx_isActive", "idx_createdAt_desc"]
        assert indexes["uniq_email"].unique is True
        assert indexes["uniq_email"].keys == [("email", 1)]
        assert indexes["idx_createdAt_desc"].keys == [("createdAt", -1)]


class TestTasksDeclaration:
    """Tests for the tasks validator and indexes."""

    def test_validator_required_fields(self):
        assert tasks_db.TASKS_VALIDATOR["required"] == ["title", "status", "ownerId", "createdAt"]

    def test_status_enum(self):
        status = tasks_db.TASKS_VALIDATOR["properties"]["status"]
        assert status["enum"] == ["todo", "in_progress", "done", "archived"]

    def test_checklist_items_reject_unknown_fields(self):
        items = tasks_db.TASKS_VALIDATOR["properties"]["checklist"]["items"]
        assert items["required"] == ["text", "done"]
        assert items["additionalProperties"] is False

    def test_compound_index_order(self):
        indexes = _indexes_by_name(tasks_db.COLLECTION_SPECS[1])
        assert indexes["idx_owner_status_deleted_created"].keys == [
            ("ownerId", 1),
            ("status", 1),
            ("isDeleted", 1),
            ("createdAt", -1),
        ]
        assert indexes["idx_status_created_desc"].keys == [("status", 1), ("createdAt", -1)]

    def test_text_index_weights(self):
        text = _indexes_by_name(tasks_db.COLLECTION_SPECS[1])["text_search"]
        assert text.text_fields == ["title", "description", "tags"]
        assert text.weights == {"title": 10, "description": 5, "tags": 2}
        assert text.default_language == "english"

    def test_all_indexes_target_tasks(self):
        assert {index.collection for index in tasks_db.TASKS_INDEXES} == {"tasks"}

    def test_index_names(self):
        assert [index.name for index in tasks_db.TASKS_INDEXES] == [
            "idx_owner_status_deleted_created",
            "idx_dueDate",
            "text_search",
            "idx_isDeleted",
            "idx_status_created_desc",
        ]
