from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .identifiers import PyObjectId


class NamedRecordDefinition(BaseModel):
    """Fields accepted when defining a name/description record."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: Optional[str] = None


class NamedRecordDocument(NamedRecordDefinition):
    """A stored name/description record."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: PyObjectId = Field(alias="_id")


__all__ = ["NamedRecordDefinition", "NamedRecordDocument"]
