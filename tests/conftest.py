"""
Shared test fixtures and configuration for entire test suite.

Provides: environment fixtures, mocked Weaviate client and store, test logger
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

import logging
from unittest.mock import MagicMock

import pytest

SEEDER_ENV_VARS = (
    "WEAVIATE_HTTP_ENDPONT",
    "WEAVIATE_GRPC_ENDPONT",
    "WEAVIATE_API_KEY",
    "WEAVIATE_SECURE",
    "WEAVIATE_SKIP_INIT_CHECKS",
    "WEAVIATE_TIMEOUT_INIT",
    "WEAVIATE_TIMEOUT_QUERY",
    "WEAVIATE_TIMEOUT_INSERT",
    "NUM_OBJECTS",
    "BATCH_SIZE",
    "VECTOR_SIZE",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Remove seeder variables from the environment.

    Also moves into an empty directory so no stray .env file is read.
    """
    for name in SEEDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def weaviate_env(clean_env):
    """Set the required connection variables."""
    clean_env.setenv("WEAVIATE_HTTP_ENDPONT", "weaviate.example.com:443")
    clean_env.setenv("WEAVIATE_GRPC_ENDPONT", "grpc-weaviate.example.com:443")
    clean_env.setenv("WEAVIATE_API_KEY", "test-api-key")
    return clean_env


@pytest.fixture
def test_logger():
    """Logger that propagates to pytest's caplog handler."""
    logger = logging.getLogger("randovec.tests")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def mock_weaviate_client():
    """
    Create mock weaviate-client v4 client.

    Returns:
        MagicMock: Client whose collections report no existing collection and
            whose insert_many succeeds
    """
    client = MagicMock()
    client.collections.exists.return_value = False
    response = MagicMock()
    response.has_errors = False
    response.errors = {}
    client.collections.get.return_value.data.insert_many.return_value = response
    return client


@pytest.fixture
def mock_store():
    """
    Create mock WeaviateStore.

    Returns:
        MagicMock: Store whose batch_write accepts every batch
    """
    store = MagicMock()
    store.batch_write.side_effect = lambda batch: len(batch)
    return store
