"""
Record models for the seeding pipeline.

DataObject is what the generator produces; InsertObject is the write-ready
form with an id and target collection.

Dependencies: pydantic
System role: Data structures flowing from generation to batch writes
"""

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CLASS_NAME = "RandClass"


class DataObject(BaseModel):
    """Synthetic record: random text plus placeholder embedding."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Random lowercase hex string")
    vector: list[float] = Field(default_factory=list, description="Embedding vector")


class InsertObject(BaseModel):
    """Object ready to be written to a Weaviate collection."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="Object UUID")
    class_name: str = Field(default=DEFAULT_CLASS_NAME, description="Target collection")
    properties: dict[str, Any] = Field(default_factory=dict, description="Object properties")
    vector: list[float] = Field(default_factory=list, description="Embedding vector")

    @classmethod
    def wrap(cls, obj: DataObject, class_name: str = DEFAULT_CLASS_NAME) -> "InsertObject":
        """Wrap a generated record with a fresh UUID."""
        return cls(
            id=uuid.uuid4(),
            class_name=class_name,
            properties={"content": obj.content},
            vector=obj.vector,
        )
