"""
Task document model for the tasks collection.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Range of the server's 32-bit "int" type
_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1


class TaskStatus(str, Enum):
    """Task lifecycle status."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    ARCHIVED = "archived"


class ChecklistItem(BaseModel):
    """One entry of a task checklist."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    text: str = Field(..., min_length=1, max_length=1000)
    done: bool
    done_at: Optional[datetime] = Field(None, alias="doneAt")


class Task(BaseModel):
    """
    Task document as stored in MongoDB.

    ``is_deleted`` is a soft-delete flag; rows are never physically removed
    by the provisioner.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        use_enum_values=True,
    )

    id: Optional[ObjectId] = Field(None, alias="_id")
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = Field(None, max_length=5000)
    status: TaskStatus
    priority: Optional[Union[str, int]] = Field(
        None,
        description="low/medium/high or numeric",
    )
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    owner_id: ObjectId = Field(..., alias="ownerId", description="Reference to users._id")
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")
    is_deleted: bool = Field(False, alias="isDeleted")
    checklist: list[ChecklistItem] = Field(default_factory=list)

    @field_validator("priority")
    @classmethod
    def check_priority(cls, value: Optional[Union[str, int]]) -> Optional[Union[str, int]]:
        if isinstance(value, str) and len(value) > 20:
            raise ValueError("priority must be at most 20 characters")
        if isinstance(value, int) and not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError("numeric priority must fit in 32 bits")
        return value

    def to_document(self) -> dict[str, Any]:
        """Return the camelCase document, without ``_id`` when unset."""
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)
        return document
