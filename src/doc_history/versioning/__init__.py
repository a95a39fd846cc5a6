"""Revision capture: field classification, filtering, change detection and history."""

from doc_history.versioning.changes import has_versioned_changes, versioned_changes
from doc_history.versioning.engine import RevisionEngine, RevisionStore
from doc_history.versioning.fields import (
    FieldClassifier,
    FieldDescriptor,
    ModelFieldClassifier,
    StaticFieldClassifier,
    versioning_field,
)
from doc_history.versioning.filtering import only_versioned
from doc_history.versioning.history import BoundedHistory
from doc_history.versioning.suspension import suspend

__all__ = [
    "BoundedHistory",
    "FieldClassifier",
    "FieldDescriptor",
    "ModelFieldClassifier",
    "RevisionEngine",
    "RevisionStore",
    "StaticFieldClassifier",
    "has_versioned_changes",
    "only_versioned",
    "suspend",
    "versioned_changes",
    "versioning_field",
]
