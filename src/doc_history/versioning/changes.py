"""Change detection restricted to versioned attributes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from doc_history.versioning.filtering import only_versioned

if TYPE_CHECKING:
    from doc_history.models.document import VersionedDocument
    from doc_history.versioning.fields import FieldClassifier

# Timestamp fields that change on every write and never trigger a revision.
IGNORED_CHANGE_FIELDS = frozenset({"updated_at"})


def versioned_changes(
    document: VersionedDocument, classifier: FieldClassifier
) -> dict[str, tuple[Any, Any]]:
    """Return the document's unsaved changes restricted to versioned attributes."""
    raw = {
        name: change
        for name, change in document.changes().items()
        if name not in IGNORED_CHANGE_FIELDS
    }
    return only_versioned(raw, classifier)


def has_versioned_changes(document: VersionedDocument, classifier: FieldClassifier) -> bool:
    return bool(versioned_changes(document, classifier))
