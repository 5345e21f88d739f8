"""
Desired-state models for collections and their indexes.

These are static configuration: they describe what the database should look
like and are never mutated at runtime.
"""
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pymongo import ASCENDING, DESCENDING, TEXT

IndexDirection = Union[int, str]

_ALLOWED_DIRECTIONS = (ASCENDING, DESCENDING, TEXT)


class ValidationLevel(str, Enum):
    """Which writes the server checks against a collection validator."""
    OFF = "off"
    STRICT = "strict"      # Every insert and update
    MODERATE = "moderate"  # Inserts, and updates to already-valid documents


class ValidationAction(str, Enum):
    """What the server does with a write that fails validation."""
    ERROR = "error"
    WARN = "warn"


class IndexSpec(BaseModel):
    """
    A single index declaration.

    Every index names the collection it belongs to; there is no implicit
    target.
    """
    model_config = ConfigDict(frozen=True)

    collection: str = Field(..., min_length=1, description="Target collection")
    name: str = Field(..., min_length=1, description="Index name, unique per collection")
    keys: list[tuple[str, IndexDirection]] = Field(
        ...,
        min_length=1,
        description="Ordered (field, direction) pairs",
    )
    unique: bool = False
    weights: Optional[dict[str, int]] = None
    default_language: Optional[str] = None

    @field_validator("keys")
    @classmethod
    def check_directions(cls, keys: list[tuple[str, IndexDirection]]) -> list[tuple[str, IndexDirection]]:
        for field, direction in keys:
            if isinstance(direction, bool) or direction not in _ALLOWED_DIRECTIONS:
                raise ValueError(f"Unsupported index direction {direction!r} for '{field}'")
        return keys

    @model_validator(mode="after")
    def check_text_options(self) -> "IndexSpec":
        text_fields = self.text_fields
        if self.weights is not None:
            if not text_fields:
                raise ValueError(f"Index '{self.name}': weights require a text index")
            unknown = set(self.weights) - set(text_fields)
            if unknown:
                raise ValueError(
                    f"Index '{self.name}': weights for non-text fields {sorted(unknown)}"
                )
        if self.default_language is not None and not text_fields:
            raise ValueError(f"Index '{self.name}': default_language requires a text index")
        return self

    @property
    def text_fields(self) -> list[str]:
        return [field for field, direction in self.keys if direction == TEXT]

    @property
    def is_text(self) -> bool:
        return bool(self.text_fields)

    def create_index_options(self) -> dict[str, Any]:
        """Keyword arguments for ``Collection.create_index``."""
        options: dict[str, Any] = {"name": self.name}
        if self.unique:
            options["unique"] = True
        if self.weights is not None:
            options["weights"] = dict(self.weights)
        if self.default_language is not None:
            options["default_language"] = self.default_language
        return options


class CollectionSpec(BaseModel):
    """A collection with its ``$jsonSchema`` validator and indexes."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    json_schema: dict[str, Any] = Field(..., description="$jsonSchema document")
    validation_level: ValidationLevel = ValidationLevel.MODERATE
    validation_action: ValidationAction = ValidationAction.ERROR
    indexes: list[IndexSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_indexes(self) -> "CollectionSpec":
        seen: set[str] = set()
        for index in self.indexes:
            if index.collection != self.name:
                raise ValueError(
                    f"Index '{index.name}' targets '{index.collection}', "
                    f"declared on collection '{self.name}'"
                )
            if index.name in seen:
                raise ValueError(f"Duplicate index name '{index.name}' on '{self.name}'")
            seen.add(index.name)
        if sum(1 for index in self.indexes if index.is_text) > 1:
            raise ValueError(f"Collection '{self.name}' declares more than one text index")
        return self

    def validator_options(self) -> dict[str, Any]:
        """Options shared by the ``create`` and ``collMod`` commands."""
        return {
            "validator": {"$jsonSchema": self.json_schema},
            "validationLevel": self.validation_level.value,
            "validationAction": self.validation_action.value,
        }
