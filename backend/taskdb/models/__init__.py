"""
Pydantic models for desired database state and stored documents.
"""
from taskdb.models.collection import (
    CollectionSpec,
    IndexSpec,
    ValidationAction,
    ValidationLevel,
)
from taskdb.models.user import User
from taskdb.models.task import ChecklistItem, Task, TaskStatus

__all__ = [
    "CollectionSpec",
    "IndexSpec",
    "ValidationAction",
    "ValidationLevel",
    "User",
    "Task",
    "TaskStatus",
    "ChecklistItem",
]
