"""
PhotoShare Backend: Record Base Types
======================================

What:  Shared pydantic building blocks for the stored record shapes.
How:   `ObjectIdStr` accepts BSON ObjectIds (as returned by the driver) or
       plain strings and always holds a string. `Record` maps the Mongo
       `_id` key onto an `id` attribute and serializes it back as `_id`.

Extra attributes:
    Documents may carry attributes no model declares. They pass through
    unchanged except that every ObjectId inside them, at any depth, becomes
    its hex string so the response stays JSON-serializable.
"""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def _coerce_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


ObjectIdStr = Annotated[str, BeforeValidator(_coerce_object_id)]


def stringify_object_ids(value: Any) -> Any:
    """Copy of `value` with every nested ObjectId replaced by its string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: stringify_object_ids(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [stringify_object_ids(v) for v in value]
    return value


class StoredModel(BaseModel):
    """Base for anything decoded from a stored document, top-level or embedded."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _stringify_object_ids(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return stringify_object_ids(data)
        return data


class Record(StoredModel):
    """Base for top-level documents; unknown stored attributes pass through."""

    id: ObjectIdStr = Field(alias="_id", description="Record identifier (24-hex ObjectId)")
