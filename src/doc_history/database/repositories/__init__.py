"""Repository modules for each Cosmos DB container."""

from doc_history.database.repositories.base import BaseRepository
from doc_history.database.repositories.documents import DocumentRepository

__all__ = [
    "BaseRepository",
    "DocumentRepository",
]
