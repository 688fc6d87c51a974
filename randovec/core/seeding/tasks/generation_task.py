"""
Synthetic record generation task.

Produces random hex content paired with a constant placeholder vector.
Stands in for a real embedding pipeline when seeding a collection.

Dependencies: secrets
System role: First stage of the seeding pipeline
"""

import logging
import secrets

from randovec.core.exceptions import InvalidArgumentError
from ..models import DataObject

CONTENT_LENGTH = 10
PLACEHOLDER_VALUE = 0.12345
SAMPLE_SIZE = 5


def rand_string(size: int) -> str:
    """Return ``size`` lowercase hex characters from ``size`` random bytes."""
    return secrets.token_hex(size)[:size]


def placeholder_vector(dim: int) -> list[float]:
    """Return a ``dim``-length vector filled with the placeholder value."""
    return [PLACEHOLDER_VALUE] * max(dim, 0)


class DataGenerationTask:
    """Generate synthetic DataObjects."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        content_length: int = CONTENT_LENGTH,
    ) -> None:
        """
        Initialize generation task.

        Args:
            logger: Logger used for the sample output
            content_length: Length of the random content string
        """
        self._logger = logger or logging.getLogger(__name__)
        self._content_length = content_length

    def generate(self, count: int, vector_dim: int) -> list[DataObject]:
        """
        Generate ``count`` records.

        Args:
            count: Number of records (0 yields an empty list)
            vector_dim: Vector dimension (non-positive yields empty vectors)

        Returns:
            list[DataObject]: Exactly ``count`` records

        Raises:
            InvalidArgumentError: When count is negative
        """
        if count < 0:
            raise InvalidArgumentError(
                f"count must be non-negative, got {count}", argument="count"
            )

        objects = [
            DataObject(
                content=rand_string(self._content_length),
                vector=placeholder_vector(vector_dim),
            )
            for _ in range(count)
        ]

        sample = objects[:SAMPLE_SIZE]
        self._logger.info(
            "partial data: %s",
            [{"content": o.content, "vector_len": len(o.vector)} for o in sample],
        )
        return objects
