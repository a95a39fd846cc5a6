"""Attribute filtering — the projection shared by change detection and snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from doc_history.versioning.fields import FieldClassifier

HISTORY_FIELD = "history"
TRANSLATIONS_SUFFIX = "_translations"


def only_versioned(attributes: Mapping[str, Any], classifier: FieldClassifier) -> dict[str, Any]:
    """Filter an attribute mapping down to the keys that belong in history.

    The history field itself is always dropped. Localized fields are kept under
    ``<name>_translations``; other fields are kept only when versioned.
    Undeclared names are kept unchanged.
    """
    versioned: dict[str, Any] = {}
    for name, value in attributes.items():
        if name == HISTORY_FIELD:
            continue
        descriptor = classifier.classify(name)
        if descriptor.localized:
            versioned[f"{name}{TRANSLATIONS_SUFFIX}"] = value
        elif descriptor.versioned:
            versioned[name] = value
    return versioned
