"""Cosmos DB client for the versioned documents store."""

from __future__ import annotations

import logging

from azure.cosmos import PartitionKey
from azure.cosmos.aio import DatabaseProxy
from azure.cosmos.aio import CosmosClient as AzureCosmosClient

from doc_history.config import CosmosConfig

logger = logging.getLogger(__name__)

# Documents and their embedded history live in one item, keyed by document id.
DOCUMENTS_PARTITION_PATH = "/id"


class CosmosClient:
    """Owns the async Cosmos DB client and provisions the documents container."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Create the client, then ensure the database and documents container exist.

        Raises the SDK error when the account cannot be reached; the client is
        closed before it propagates.
        """
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        try:
            self._database = await self._client.create_database_if_not_exists(
                id=self._config.database
            )
            await self._database.create_container_if_not_exists(
                id=self._config.container,
                partition_key=PartitionKey(path=DOCUMENTS_PARTITION_PATH),
            )
        except Exception:
            await self.close()
            raise
        logger.info(
            "Cosmos DB ready — database=%s container=%s",
            self._config.database,
            self._config.container,
        )

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.close()
        self._client = None
        self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized, call initialize() first")
        return self._database

    @property
    def container_name(self) -> str:
        """Name of the provisioned documents container."""
        return self._config.container
