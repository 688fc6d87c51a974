"""
Batch chunking task.

Splits the write-ready objects into contiguous fixed-size batches.

Dependencies: None
System role: Second stage of the seeding pipeline
"""

from typing import Sequence, TypeVar

from randovec.core.exceptions import InvalidArgumentError

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Partition ``items`` into order-preserving chunks of ``size``.

    Every chunk but the last has exactly ``size`` items. Empty input yields
    a single empty chunk.

    Raises:
        InvalidArgumentError: When size is not positive
    """
    if size <= 0:
        raise InvalidArgumentError(
            f"chunk size must be positive, got {size}", argument="size"
        )

    chunks: list[list[T]] = []
    start = 0
    while len(items) - start > size:
        chunks.append(list(items[start:start + size]))
        start += size
    chunks.append(list(items[start:]))
    return chunks


class BatchChunkingTask:
    """Split objects into batches of a configured size."""

    def __init__(self, batch_size: int) -> None:
        """
        Initialize chunking task.

        Args:
            batch_size: Objects per batch

        Raises:
            InvalidArgumentError: When batch_size is not positive
        """
        if batch_size <= 0:
            raise InvalidArgumentError(
                f"batch_size must be positive, got {batch_size}", argument="batch_size"
            )
        self.batch_size = batch_size

    def chunk(self, items: Sequence[T]) -> list[list[T]]:
        """Split items into batches of ``batch_size``."""
        return chunk(items, self.batch_size)
