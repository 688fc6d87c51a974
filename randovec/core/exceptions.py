"""
Exception hierarchy for randovec.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RandovecException(Exception):
    """Base exception for all randovec errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigError(RandovecException):
    """Raised when a required setting is missing or a run parameter is invalid."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Environment variable or setting that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class InvalidArgumentError(RandovecException):
    """Raised when a function receives an argument outside its domain."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class VectorStoreError(RandovecException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (connect, create_schema, get_schema, batch_write)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StoreConnectionError(VectorStoreError):
    """Raised when the Weaviate client cannot be constructed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, operation="connect", details=details)


class SchemaError(VectorStoreError):
    """Raised when collection creation or retrieval fails."""

    pass


class BatchWriteError(VectorStoreError):
    """Raised when a batch of objects could not be written."""

    def __init__(
        self,
        message: str,
        batch_size: int | None = None,
        failed_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize batch write error.

        Args:
            message: Error message
            batch_size: Number of objects in the rejected batch
            failed_count: Number of objects Weaviate reported as failed
            details: Additional context
        """
        details = details or {}
        if batch_size is not None:
            details["batch_size"] = batch_size
        if failed_count is not None:
            details["failed_count"] = failed_count
        self.failed_count = failed_count
        super().__init__(message, operation="batch_write", details=details)
