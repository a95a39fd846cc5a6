"""Bounded in-place revision history for mutable documents."""

from doc_history.errors import CapacityMisconfigurationError, VersioningError
from doc_history.models import Snapshot, VersionedDocument
from doc_history.versioning import RevisionEngine, RevisionStore, suspend

__all__ = [
    "CapacityMisconfigurationError",
    "RevisionEngine",
    "RevisionStore",
    "Snapshot",
    "VersionedDocument",
    "VersioningError",
    "suspend",
]
