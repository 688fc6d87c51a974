"""
Task modules for the seeding pipeline.

Exports: DataGenerationTask, BatchChunkingTask, chunk
"""

from .chunking_task import BatchChunkingTask, chunk
from .generation_task import DataGenerationTask, placeholder_vector, rand_string

__all__ = [
    "DataGenerationTask",
    "BatchChunkingTask",
    "chunk",
    "placeholder_vector",
    "rand_string",
]
