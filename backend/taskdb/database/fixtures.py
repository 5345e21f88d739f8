"""
Demo data inserted into an empty database.

The documents are literal fixtures. They go through the document models so a
fixture that no longer matches the collection validators fails here rather
than at the server.
"""
from datetime import datetime

from bson import ObjectId

from taskdb.models.task import ChecklistItem, Task, TaskStatus
from taskdb.models.user import User

DEMO_USER_EMAIL = "demo@example.com"
# Replaced by a real hash when the backend registers users
DEMO_PASSWORD_HASH = "bcrypt$demo-placeholder"


def build_demo_user(user_id: ObjectId, now: datetime) -> dict:
    """Return the demo user document with a caller-supplied identity."""
    user = User(
        id=user_id,
        email=DEMO_USER_EMAIL,
        password_hash=DEMO_PASSWORD_HASH,
        name="Demo User",
        roles=["user"],
        created_at=now,
        is_active=True,
    )
    return user.to_document()


def build_demo_tasks(owner_id: ObjectId, now: datetime) -> list[dict]:
    """Return the demo tasks, all owned by ``owner_id``, in insertion order."""
    tasks = [
        Task(
            title="Welcome to your To-Do app",
            description="Edit or delete this task. Create more to get started.",
            status=TaskStatus.TODO,
            priority="medium",
            owner_id=owner_id,
            tags=["welcome", "getting-started"],
            created_at=now,
            checklist=[
                ChecklistItem(text="Explore the app", done=False),
                ChecklistItem(text="Add a new task", done=False),
            ],
        ),
        Task(
            title="Try completing a task",
            description="Mark this task as done",
            status=TaskStatus.IN_PROGRESS,
            priority="low",
            owner_id=owner_id,
            tags=["demo"],
            created_at=now,
        ),
    ]
    return [task.to_document() for task in tasks]
