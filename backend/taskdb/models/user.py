"""
User document model for the users collection.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class User(BaseModel):
    """
    User document as stored in MongoDB.

    Field names are snake_case in Python and camelCase in the database.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    id: Optional[ObjectId] = Field(None, alias="_id")
    email: EmailStr = Field(..., description="Unique, lowercase email address")
    password_hash: str = Field(
        ...,
        alias="passwordHash",
        min_length=20,
        description="BCrypt/Argon2 hash, opaque to the database",
    )
    name: Optional[str] = Field(None, max_length=120, description="Display name")
    roles: list[str] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    last_login_at: Optional[datetime] = Field(None, alias="lastLoginAt")
    is_active: bool = Field(True, alias="isActive", description="Disable flag")
    # Free-form, arbitrarily nested
    meta: Optional[dict[str, Any]] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not 5 <= len(value) <= 320:
            raise ValueError("email must be between 5 and 320 characters")
        if value != value.lower():
            raise ValueError("email must be lowercase")
        return value

    def to_document(self) -> dict[str, Any]:
        """Return the camelCase document, without ``_id`` when unset."""
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)
        return document
