"""
Import result models.

Per-batch outcomes and the aggregate returned by ImportOrchestrator.

Dependencies: pydantic
System role: Return type for ImportOrchestrator.import_data()
"""

from pydantic import BaseModel, Field


class BatchOutcome(BaseModel):
    """Outcome of a single batch write."""

    index: int = Field(description="Zero-based batch position")
    size: int = Field(description="Objects in the batch")
    succeeded: bool = Field(description="Whether the write was accepted")
    error: str | None = Field(default=None, description="Error message on failure")


class ImportResult(BaseModel):
    """Aggregated result of an import run."""

    total_objects: int = Field(description="Objects generated for the run")
    objects_submitted: int = Field(default=0, description="Objects in successful batches")
    batches_total: int = Field(default=0, description="Non-empty batches planned")
    cancelled: bool = Field(default=False, description="Run stopped before all batches were issued")
    outcomes: list[BatchOutcome] = Field(default_factory=list)

    @property
    def batches_succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def batches_failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)

    @property
    def succeeded(self) -> bool:
        """True when every planned batch was issued and accepted."""
        return not self.cancelled and self.batches_failed == 0

    def summary(self) -> str:
        """Human-readable outcome, e.g. ``2 of 3 batches succeeded``."""
        text = f"{self.batches_succeeded} of {self.batches_total} batches succeeded"
        if self.cancelled:
            text += " (cancelled)"
        return text
