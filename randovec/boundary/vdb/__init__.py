"""
Vector database boundary.

Exports: WeaviateStore, CollectionDefinition, PropertyDefinition, RAND_CLASS
"""

from randovec.boundary.vdb.collection_schema import (
    RAND_CLASS,
    CollectionDefinition,
    PropertyDefinition,
)
from randovec.boundary.vdb.weaviate_store import WeaviateStore

__all__ = [
    "WeaviateStore",
    "CollectionDefinition",
    "PropertyDefinition",
    "RAND_CLASS",
]
