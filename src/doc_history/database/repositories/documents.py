"""Repository for versioned documents (partitioned by /id)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from doc_history.database.repositories.base import BaseRepository
from doc_history.models.document import VersionedDocument

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

_PREVIOUS_REVISION_QUERY = (
    "SELECT * FROM c WHERE c.id = @id"
    " AND (c.version = @version OR NOT IS_DEFINED(c.version) OR IS_NULL(c.version))"
)


class DocumentRepository(BaseRepository[VersionedDocument]):
    """Store for one versioned document type; serves as the engine's ``RevisionStore``."""

    container_name = "documents"
    model_class = VersionedDocument

    def __init__(
        self,
        database: DatabaseProxy,
        model_class: type[VersionedDocument] = VersionedDocument,
        *,
        container_name: str | None = None,
    ) -> None:
        super().__init__(database, container_name=container_name)
        self.model_class = model_class

    def _to_model(self, item: dict[str, Any]) -> VersionedDocument:
        document = super()._to_model(item)
        document.mark_persisted()
        return document

    async def find_previous(self, document: VersionedDocument) -> VersionedDocument | None:
        """Fetch the stored document at the in-memory version, or one never stamped with a version."""
        results = await self.query(
            _PREVIOUS_REVISION_QUERY,
            [
                {"name": "@id", "value": document.id},
                {"name": "@version", "value": document.version},
            ],
            partition_key=document.id,
        )
        return results[0] if results else None

    async def save(self, document: VersionedDocument) -> VersionedDocument:
        """Persist the document with its history and record it as the stored state."""
        await self.upsert(document)
        document.mark_persisted()
        return document
