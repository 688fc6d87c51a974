"""
Logger configuration.

Configures the root handler once per process and hands out the application
logger that is passed to every component.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

APP_LOGGER_NAME = "randovec"

NOISY_LOGGERS = ("httpx", "httpcore", "grpc", "urllib3", "weaviate")


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Log level name or number for the application logger

    Returns:
        logging.Logger: The configured application logger
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handler.setFormatter(formatter)

    root_logger.setLevel(logging.WARNING)
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    app_logger.setLevel(level)
    return app_logger
