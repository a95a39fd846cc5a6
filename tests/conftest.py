"""Shared fixtures: a versioned document type and an in-memory revision store."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from doc_history.models.document import VersionedDocument
from doc_history.versioning import RevisionEngine, versioning_field


class InMemoryStore:
    """Dict-backed stand-in for the Cosmos repository."""

    def __init__(self, model_class: type[VersionedDocument]) -> None:
        self.model_class = model_class
        self.items: dict[str, dict[str, Any]] = {}
        self.lookups = 0

    async def find_previous(self, document: VersionedDocument) -> VersionedDocument | None:
        self.lookups += 1
        item = self.items.get(document.id)
        if item is None or item.get("version") not in (document.version, None):
            return None
        loaded = self.model_class.model_validate(copy.deepcopy(item))
        loaded.mark_persisted()
        return loaded

    async def save(self, document: VersionedDocument) -> VersionedDocument:
        document.touch()
        self.items[document.id] = document.model_dump(mode="json")
        document.mark_persisted()
        return document


@pytest.fixture
def article_class() -> type[VersionedDocument]:
    """A fresh document type per test so history limits never leak between tests."""

    class Article(VersionedDocument):
        name: str = ""
        title: dict[str, str] = versioning_field(default_factory=dict, localized=True)
        views: int = versioning_field(0, versioned=False)

    return Article


@pytest.fixture
def store(article_class: type[VersionedDocument]) -> InMemoryStore:
    return InMemoryStore(article_class)


@pytest.fixture
def engine(store: InMemoryStore) -> RevisionEngine:
    return RevisionEngine(store)
