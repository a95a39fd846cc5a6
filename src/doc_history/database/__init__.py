"""Cosmos DB persistence for versioned documents."""

from doc_history.database.client import CosmosClient

__all__ = ["CosmosClient"]
