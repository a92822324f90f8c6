"""Identifier types shared by the models and repositories."""

from __future__ import annotations

from typing import Annotated, Any, Union

from bson import ObjectId
from pydantic.functional_validators import BeforeValidator

DocumentKey = Union[ObjectId, str]
"""A docID, its hex string, or a record name/username."""


def as_object_id(value: Any) -> ObjectId | None:
    """Return ``value`` as an ObjectId, or None when it cannot be one."""

    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def _require_object_id(value: Any) -> ObjectId:
    object_id = as_object_id(value)
    if object_id is None:
        raise ValueError(f"{value!r} is not an ObjectId or its 24-character hex string")
    return object_id


PyObjectId = Annotated[ObjectId, BeforeValidator(_require_object_id)]

__all__ = ["DocumentKey", "PyObjectId", "as_object_id"]
