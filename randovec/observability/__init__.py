"""Logging configuration and structured logging helpers."""

from randovec.observability.logger import configure_logging

__all__ = ["configure_logging"]
