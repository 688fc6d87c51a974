"""
Seeder entry point.

Validates configuration, connects to Weaviate, bootstraps the collection and
runs the import. One logger is configured here and injected everywhere else.

Dependencies: randovec.configs, randovec.boundary, randovec.core, randovec.observability
System role: Process initialization and exit status
"""

import argparse
import logging
import signal
import sys
import threading
from types import FrameType
from typing import Any, Sequence

from randovec.boundary.vdb import RAND_CLASS, WeaviateStore
from randovec.configs import load_settings
from randovec.configs.base import BaseSettings
from randovec.core.exceptions import ConfigError, SchemaError, StoreConnectionError
from randovec.core.seeding import ImportOrchestrator
from randovec.observability.log_utils import log_exception_with_context, log_with_context
from randovec.observability.logger import configure_logging

EXIT_OK = 0
EXIT_IMPORT_FAILED = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randovec",
        description="Seed a Weaviate collection with random text/vector objects.",
    )
    parser.add_argument("--num-objects", type=int, default=None, help="Overrides NUM_OBJECTS")
    parser.add_argument("--batch-size", type=int, default=None, help="Overrides BATCH_SIZE")
    parser.add_argument("--vector-size", type=int, default=None, help="Overrides VECTOR_SIZE")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL")
    return parser


def _install_signal_handlers(cancel_event: threading.Event) -> dict[int, Any]:
    """Set cancel_event on SIGINT/SIGTERM; returns the previous handlers."""

    def _handler(signum: int, frame: FrameType | None) -> None:
        cancel_event.set()

    previous: dict[int, Any] = {}
    if threading.current_thread() is not threading.main_thread():
        return previous
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _handler)
    return previous


def _restore_signal_handlers(previous: dict[int, Any]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def run(argv: Sequence[str] | None = None) -> int:
    """
    Run a full seeding pass.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        int: Process exit status
    """
    args = build_parser().parse_args(argv)
    logger = configure_logging(args.log_level or BaseSettings().log_level)

    logger.info("validating env")
    try:
        settings = load_settings(
            num_objects=args.num_objects,
            batch_size=args.batch_size,
            vector_size=args.vector_size,
        )
    except ConfigError as e:
        log_exception_with_context(logger, "invalid configuration", e, field=e.field)
        return EXIT_FATAL

    logger.info("attempting connection to weaviate instance")
    try:
        store = WeaviateStore.connect(settings.weaviate, definition=RAND_CLASS, logger=logger)
    except StoreConnectionError as e:
        log_exception_with_context(logger, "failed to create weaviate client", e)
        return EXIT_FATAL

    with store:
        logger.info("creating schema")
        try:
            store.create_schema()
        except SchemaError as e:
            log_exception_with_context(logger, "error creating class", e)
        try:
            store.get_schema()
        except SchemaError as e:
            log_exception_with_context(logger, "failed to get schema", e)

        seeding = settings.seeding
        log_with_context(
            logger,
            logging.INFO,
            "starting import",
            num_objects=seeding.num_objects,
            batch_size=seeding.batch_size,
            vector_size=seeding.vector_size,
        )

        cancel_event = threading.Event()
        previous = _install_signal_handlers(cancel_event)
        try:
            result = ImportOrchestrator(store, logger=logger).import_data(
                count=seeding.num_objects,
                batch_size=seeding.batch_size,
                vector_dim=seeding.vector_size,
                cancel_event=cancel_event,
            )
        finally:
            _restore_signal_handlers(previous)

    if not result.succeeded:
        logger.error("error importing data: %s", result.summary())
        return EXIT_IMPORT_FAILED

    logger.info("import complete!")
    return EXIT_OK


def main() -> None:
    sys.exit(run())
