"""
Collection schema definitions.

Pydantic models describing the collection the seeder writes to.
Converted to weaviate-client config objects by WeaviateStore.

Dependencies: pydantic
System role: Type definitions for schema bootstrapping
"""

from pydantic import BaseModel, Field

from randovec.core.seeding.models.data_object import DEFAULT_CLASS_NAME


class PropertyDefinition(BaseModel):
    """Single collection property."""

    name: str = Field(description="Property name")
    data_type: str = Field(default="text", description="Weaviate data type name")
    description: str | None = Field(default=None, description="Property description")


class CollectionDefinition(BaseModel):
    """Collection descriptor with replication settings."""

    name: str = Field(description="Collection (class) name")
    properties: list[PropertyDefinition] = Field(default_factory=list)
    replication_factor: int = Field(default=1, ge=1, description="Replica count")
    async_replication: bool = Field(default=False, description="Enable async replication")
    vector_name: str = Field(default="default", description="Named self-provided vector")


RAND_CLASS = CollectionDefinition(
    name=DEFAULT_CLASS_NAME,
    properties=[
        PropertyDefinition(name="content", data_type="text", description="Random text"),
    ],
    replication_factor=3,
    async_replication=True,
)
