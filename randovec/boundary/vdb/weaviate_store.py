"""
Weaviate client wrapper.

Provides the schema and batch-write operations the seeder needs on top of
weaviate-client v4. Weaviate SDK errors are translated into the randovec
exception hierarchy at this boundary.

Dependencies: weaviate-client, randovec.configs, randovec.core.exceptions
System role: Remote vector store client for seeding
"""

import logging
from typing import Any, Sequence

import weaviate
from weaviate.classes.config import Configure, DataType, Property
from weaviate.classes.data import DataObject as WeaviateDataObject
from weaviate.classes.init import AdditionalConfig, Auth, Timeout
from weaviate.exceptions import WeaviateBaseError

from randovec.boundary.vdb.collection_schema import RAND_CLASS, CollectionDefinition
from randovec.configs.weaviate import WeaviateSettings
from randovec.core.exceptions import BatchWriteError, SchemaError, StoreConnectionError
from randovec.core.seeding.models import InsertObject
from randovec.observability.log_utils import log_with_context

MAX_REPORTED_ERRORS = 3


class WeaviateStore:
    """
    Weaviate client wrapper for seeding operations.

    Owns the underlying client; use as a context manager or call close().
    """

    def __init__(
        self,
        client: weaviate.WeaviateClient,
        definition: CollectionDefinition = RAND_CLASS,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Wrap an already connected client.

        Args:
            client: Connected weaviate-client v4 client
            definition: Collection the store writes to
            logger: Shared application logger
        """
        self._client = client
        self._definition = definition
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def connect(
        cls,
        settings: WeaviateSettings,
        definition: CollectionDefinition = RAND_CLASS,
        logger: logging.Logger | None = None,
    ) -> "WeaviateStore":
        """
        Create a client connected to the configured Weaviate instance.

        Args:
            settings: Connection settings
            definition: Collection the store writes to
            logger: Shared application logger

        Returns:
            WeaviateStore: Connected store

        Raises:
            StoreConnectionError: When the client cannot be created or connected
        """
        http_host, http_port = settings.http_address
        grpc_host, grpc_port = settings.grpc_address

        try:
            client = weaviate.connect_to_custom(
                http_host=http_host,
                http_port=http_port,
                http_secure=settings.secure,
                grpc_host=grpc_host,
                grpc_port=grpc_port,
                grpc_secure=settings.secure,
                auth_credentials=Auth.api_key(settings.api_key),
                additional_config=AdditionalConfig(
                    timeout=Timeout(
                        init=settings.timeout_init,
                        query=settings.timeout_query,
                        insert=settings.timeout_insert,
                    )
                ),
                skip_init_checks=settings.skip_init_checks,
            )
        except (WeaviateBaseError, OSError) as e:
            raise StoreConnectionError(
                f"failed to create weaviate client: {e}",
                details={"http_host": http_host, "grpc_host": grpc_host},
            ) from e

        return cls(client, definition=definition, logger=logger)

    @property
    def definition(self) -> CollectionDefinition:
        return self._definition

    def close(self) -> None:
        """Close the underlying client connection."""
        self._client.close()

    def __enter__(self) -> "WeaviateStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def create_schema(self, definition: CollectionDefinition | None = None) -> bool:
        """
        Create the collection unless it already exists.

        Args:
            definition: Collection to create (defaults to the store's own)

        Returns:
            bool: True when the collection was created, False when it existed

        Raises:
            SchemaError: When Weaviate rejects the lookup or creation
        """
        definition = definition or self._definition

        try:
            if self._client.collections.exists(definition.name):
                log_with_context(
                    self._logger,
                    logging.INFO,
                    "collection already exists",
                    collection=definition.name,
                )
                return False

            self._client.collections.create(
                name=definition.name,
                properties=[
                    Property(
                        name=prop.name,
                        data_type=DataType(prop.data_type),
                        description=prop.description,
                    )
                    for prop in definition.properties
                ],
                vector_config=Configure.Vectors.self_provided(name=definition.vector_name),
                replication_config=Configure.replication(
                    factor=definition.replication_factor,
                    async_enabled=definition.async_replication,
                ),
            )
        except WeaviateBaseError as e:
            raise SchemaError(
                f"error creating class: {e}",
                operation="create_schema",
                details={"collection": definition.name},
            ) from e

        log_with_context(
            self._logger,
            logging.INFO,
            "collection created",
            collection=definition.name,
            replication_factor=definition.replication_factor,
        )
        return True

    def get_schema(self, name: str | None = None) -> dict[str, Any]:
        """
        Fetch the collection configuration.

        Args:
            name: Collection name (defaults to the store's collection)

        Returns:
            dict: Collection configuration as returned by Weaviate

        Raises:
            SchemaError: When the configuration cannot be retrieved
        """
        name = name or self._definition.name
        try:
            config = self._client.collections.get(name).config.get()
        except WeaviateBaseError as e:
            raise SchemaError(
                f"failed to get schema: {e}",
                operation="get_schema",
                details={"collection": name},
            ) from e

        schema = config.to_dict()
        self._logger.info("schema: %s", schema)
        return schema

    def batch_write(self, objects: Sequence[InsertObject]) -> int:
        """
        Write one batch of objects with a single insert_many call.

        All objects in a batch must target the same collection.

        Args:
            objects: Objects to write

        Returns:
            int: Number of objects written

        Raises:
            BatchWriteError: On transport failure or when Weaviate rejects any object
        """
        if not objects:
            return 0

        collection_name = objects[0].class_name
        vector_name = self._definition.vector_name
        try:
            payload = [
                WeaviateDataObject(
                    properties=obj.properties,
                    uuid=obj.id,
                    vector={vector_name: obj.vector},
                )
                for obj in objects
            ]
            response = self._client.collections.get(collection_name).data.insert_many(payload)
        except (WeaviateBaseError, OSError, ValueError) as e:
            raise BatchWriteError(
                f"batch write failed: {e}",
                batch_size=len(objects),
                details={"collection": collection_name},
            ) from e

        if response.has_errors:
            messages = [err.message for err in list(response.errors.values())[:MAX_REPORTED_ERRORS]]
            raise BatchWriteError(
                f"weaviate rejected {len(response.errors)} of {len(objects)} objects",
                batch_size=len(objects),
                failed_count=len(response.errors),
                details={"collection": collection_name, "errors": messages},
            )

        return len(objects)
