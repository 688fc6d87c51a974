"""
Models for the seeding pipeline.

Exports: DataObject, InsertObject, BatchOutcome, ImportResult
"""

from .data_object import DataObject, InsertObject
from .import_result import BatchOutcome, ImportResult

__all__ = [
    "DataObject",
    "InsertObject",
    "BatchOutcome",
    "ImportResult",
]
