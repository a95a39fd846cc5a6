"""Data models for versioned documents and their snapshots."""

from doc_history.models.base import DocumentBase
from doc_history.models.document import DEFAULT_VERSION, VersionedDocument
from doc_history.models.snapshot import Snapshot

__all__ = [
    "DEFAULT_VERSION",
    "DocumentBase",
    "Snapshot",
    "VersionedDocument",
]
