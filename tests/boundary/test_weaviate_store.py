"""
Unit tests for the Weaviate store wrapper.

The weaviate-client SDK is mocked; no network access.

Dependencies: pytest, unittest.mock, weaviate-client
System role: Remote Store Client validation
"""

import uuid
from unittest.mock import MagicMock, patch

import pytest
from weaviate.exceptions import WeaviateBaseError

from randovec.boundary.vdb import RAND_CLASS, WeaviateStore
from randovec.configs.weaviate import WeaviateSettings
from randovec.core.exceptions import BatchWriteError, SchemaError, StoreConnectionError
from randovec.core.seeding.models import InsertObject


def _objects(n: int, dim: int = 3) -> list[InsertObject]:
    return [
        InsertObject(properties={"content": f"{i:010x}"}, vector=[0.12345] * dim)
        for i in range(n)
    ]


class TestConnect:
    """Test suite for WeaviateStore.connect."""

    @patch("randovec.boundary.vdb.weaviate_store.weaviate.connect_to_custom")
    def test_connect_passes_endpoints_and_api_key(self, mock_connect, weaviate_env):
        """Test connect splits endpoints and uses secure transport."""
        mock_connect.return_value = MagicMock()

        store = WeaviateStore.connect(WeaviateSettings())

        kwargs = mock_connect.call_args.kwargs
        assert kwargs["http_host"] == "weaviate.example.com"
        assert kwargs["http_port"] == 443
        assert kwargs["http_secure"] is True
        assert kwargs["grpc_host"] == "grpc-weaviate.example.com"
        assert kwargs["grpc_port"] == 443
        assert kwargs["grpc_secure"] is True
        assert kwargs["auth_credentials"] is not None
        assert store.definition == RAND_CLASS

    @patch("randovec.boundary.vdb.weaviate_store.weaviate.connect_to_custom")
    def test_connect_failure_raises_store_connection_error(self, mock_connect, weaviate_env):
        """Test SDK startup errors become StoreConnectionError."""
        mock_connect.side_effect = WeaviateBaseError("unreachable")

        with pytest.raises(StoreConnectionError, match="failed to create weaviate client"):
            WeaviateStore.connect(WeaviateSettings())

    def test_context_manager_closes_client(self, mock_weaviate_client, test_logger):
        """Test leaving the context closes the client."""
        with WeaviateStore(mock_weaviate_client, logger=test_logger):
            pass
        mock_weaviate_client.close.assert_called_once()


class TestCreateSchema:
    """Test suite for WeaviateStore.create_schema."""

    def test_creates_missing_collection(self, mock_weaviate_client, test_logger):
        """Test the collection is created with its property and replication factor."""
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        assert store.create_schema() is True

        kwargs = mock_weaviate_client.collections.create.call_args.kwargs
        assert kwargs["name"] == "RandClass"
        assert [p.name for p in kwargs["properties"]] == ["content"]
        assert kwargs["properties"][0].description == "Random text"
        assert kwargs["replication_config"].factor == 3

    def test_existing_collection_not_recreated(self, mock_weaviate_client, test_logger):
        """Test an existing collection is left alone."""
        mock_weaviate_client.collections.exists.return_value = True
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        assert store.create_schema() is False
        mock_weaviate_client.collections.create.assert_not_called()

    def test_create_failure_raises_schema_error(self, mock_weaviate_client, test_logger):
        """Test SDK errors during creation become SchemaError."""
        mock_weaviate_client.collections.create.side_effect = WeaviateBaseError("forbidden")
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        with pytest.raises(SchemaError) as exc_info:
            store.create_schema()
        assert exc_info.value.details["operation"] == "create_schema"
        assert exc_info.value.details["collection"] == "RandClass"


class TestGetSchema:
    """Test suite for WeaviateStore.get_schema."""

    def test_returns_collection_config(self, mock_weaviate_client, test_logger):
        """Test the collection config dict is returned."""
        config = mock_weaviate_client.collections.get.return_value.config.get.return_value
        config.to_dict.return_value = {"class": "RandClass"}
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        assert store.get_schema() == {"class": "RandClass"}
        mock_weaviate_client.collections.get.assert_called_with("RandClass")

    def test_failure_raises_schema_error(self, mock_weaviate_client, test_logger):
        """Test SDK errors become SchemaError."""
        mock_weaviate_client.collections.get.return_value.config.get.side_effect = (
            WeaviateBaseError("not found")
        )
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        with pytest.raises(SchemaError, match="failed to get schema"):
            store.get_schema()


class TestBatchWrite:
    """Test suite for WeaviateStore.batch_write."""

    def test_writes_batch_with_single_call(self, mock_weaviate_client, test_logger):
        """Test a batch is sent as one insert_many call with ids and named vectors."""
        objects = _objects(3)
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        assert store.batch_write(objects) == 3

        insert_many = mock_weaviate_client.collections.get.return_value.data.insert_many
        insert_many.assert_called_once()
        payload = insert_many.call_args.args[0]
        assert [p.uuid for p in payload] == [o.id for o in objects]
        assert payload[0].properties == {"content": "0000000000"}
        assert payload[0].vector == {"default": [0.12345] * 3}
        mock_weaviate_client.collections.get.assert_called_with("RandClass")

    def test_empty_batch_is_noop(self, mock_weaviate_client, test_logger):
        """Test an empty batch makes no remote call."""
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        assert store.batch_write([]) == 0
        mock_weaviate_client.collections.get.assert_not_called()

    def test_object_errors_raise_batch_write_error(self, mock_weaviate_client, test_logger):
        """Test per-object errors in the response fail the batch."""
        response = MagicMock()
        response.has_errors = True
        response.errors = {0: MagicMock(message="vector length mismatch")}
        mock_weaviate_client.collections.get.return_value.data.insert_many.return_value = response
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        with pytest.raises(BatchWriteError) as exc_info:
            store.batch_write(_objects(2))

        error = exc_info.value
        assert error.failed_count == 1
        assert error.details["batch_size"] == 2
        assert error.details["errors"] == ["vector length mismatch"]

    def test_transport_error_raises_batch_write_error(self, mock_weaviate_client, test_logger):
        """Test SDK exceptions become BatchWriteError."""
        insert_many = mock_weaviate_client.collections.get.return_value.data.insert_many
        insert_many.side_effect = WeaviateBaseError("timeout")
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        with pytest.raises(BatchWriteError, match="batch write failed"):
            store.batch_write(_objects(1))

    def test_socket_error_raises_batch_write_error(self, mock_weaviate_client, test_logger):
        """Test OS-level transport errors become BatchWriteError."""
        insert_many = mock_weaviate_client.collections.get.return_value.data.insert_many
        insert_many.side_effect = ConnectionResetError("reset")
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)

        with pytest.raises(BatchWriteError, match="reset"):
            store.batch_write(_objects(2))

    def test_ids_are_passed_as_uuids(self, mock_weaviate_client, test_logger):
        """Test object ids are UUID instances."""
        store = WeaviateStore(mock_weaviate_client, logger=test_logger)
        store.batch_write(_objects(1))

        payload = mock_weaviate_client.collections.get.return_value.data.insert_many.call_args.args[0]
        assert isinstance(payload[0].uuid, uuid.UUID)
