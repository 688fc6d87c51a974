"""
Seeding pipeline orchestrator.

Coordinates generation, wrapping, chunking and per-batch writes.
Batch failures are logged and counted; the loop always moves on to the
next batch unless cancellation is requested.

Dependencies: All task modules, randovec.observability
System role: Pipeline orchestration (coordinates only)
"""

import logging
import threading
from typing import TYPE_CHECKING

from randovec.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

from .models import BatchOutcome, ImportResult, InsertObject
from .models.data_object import DEFAULT_CLASS_NAME
from .tasks import BatchChunkingTask, DataGenerationTask

if TYPE_CHECKING:
    from randovec.boundary.vdb.weaviate_store import WeaviateStore


class ImportOrchestrator:
    """Orchestrate a seeding run: generate -> wrap -> chunk -> batch write."""

    def __init__(
        self,
        store: "WeaviateStore",
        logger: logging.Logger | None = None,
        generator: DataGenerationTask | None = None,
        class_name: str = DEFAULT_CLASS_NAME,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            store: Remote store exposing ``batch_write(objects)``
            logger: Shared application logger
            generator: Record generator (built with the same logger if None)
            class_name: Collection the objects are written to
        """
        self._store = store
        self._logger = logger or logging.getLogger(__name__)
        self._generator = generator or DataGenerationTask(logger=self._logger)
        self._class_name = class_name

    def wrap(self, count: int, vector_dim: int) -> list[InsertObject]:
        """Generate ``count`` records and wrap each with a fresh UUID."""
        generated = self._generator.generate(count, vector_dim)
        return [InsertObject.wrap(obj, class_name=self._class_name) for obj in generated]

    def import_data(
        self,
        count: int,
        batch_size: int,
        vector_dim: int,
        cancel_event: threading.Event | None = None,
    ) -> ImportResult:
        """
        Generate ``count`` objects and write them in batches.

        Args:
            count: Number of objects to generate
            batch_size: Objects per batch write
            vector_dim: Vector dimension
            cancel_event: When set, no further batches are issued

        Returns:
            ImportResult: Aggregated per-batch outcomes

        Raises:
            InvalidArgumentError: When count is negative or batch_size is not positive
        """
        chunker = BatchChunkingTask(batch_size)
        insert_objects = self.wrap(count, vector_dim)
        batches = [batch for batch in chunker.chunk(insert_objects) if batch]

        result = ImportResult(total_objects=len(insert_objects), batches_total=len(batches))

        for index, batch in enumerate(batches):
            if cancel_event is not None and cancel_event.is_set():
                result.cancelled = True
                log_with_context(
                    self._logger,
                    logging.WARNING,
                    "import cancelled",
                    batches_issued=index,
                    batches_total=len(batches),
                )
                break

            log_with_context(
                self._logger,
                logging.INFO,
                "adding chunk to db",
                batch_index=index,
                chunk_size=len(batch),
            )

            try:
                self._store.batch_write(batch)
            except Exception as e:
                log_exception_with_context(
                    self._logger,
                    "error importing random vector data to weaviate",
                    e,
                    batch_index=index,
                    chunk_size=len(batch),
                )
                result.outcomes.append(
                    BatchOutcome(index=index, size=len(batch), succeeded=False, error=str(e))
                )
                continue

            result.objects_submitted += len(batch)
            result.outcomes.append(BatchOutcome(index=index, size=len(batch), succeeded=True))
            log_with_context(
                self._logger,
                logging.INFO,
                "added objects to db",
                number_of_objects=result.objects_submitted,
            )

        level = logging.INFO if result.succeeded else logging.ERROR
        log_with_context(
            self._logger,
            level,
            "import finished",
            summary=result.summary(),
            objects_submitted=result.objects_submitted,
            total_objects=result.total_objects,
        )
        return result
