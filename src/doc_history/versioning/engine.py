"""Revision engine — decides when to snapshot a document and commits the result."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from doc_history.models.document import DEFAULT_VERSION
from doc_history.models.snapshot import Snapshot
from doc_history.versioning.changes import has_versioned_changes
from doc_history.versioning.fields import classifier_for
from doc_history.versioning.filtering import only_versioned
from doc_history.versioning.history import BoundedHistory
from doc_history.versioning.suspension import suspend

if TYPE_CHECKING:
    from doc_history.models.document import VersionedDocument
    from doc_history.versioning.fields import FieldClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RevisionState:
    """History bookkeeping captured before a revision, for rollback."""

    history: list[Snapshot]
    version: int
    revised: bool

    @classmethod
    def of(cls, document: VersionedDocument) -> _RevisionState:
        return cls(document.history, document.version, document.revised)

    def restore(self, document: VersionedDocument) -> None:
        document.history = self.history
        document.version = self.version
        document.revised = self.revised


@runtime_checkable
class RevisionStore(Protocol):
    """Persistence operations the engine needs from the document store."""

    async def find_previous(self, document: VersionedDocument) -> VersionedDocument | None:
        """Load the stored state of ``document`` at its current (or unset) version."""
        ...

    async def save(self, document: VersionedDocument) -> VersionedDocument:
        """Persist ``document`` including its history."""
        ...


class RevisionEngine:
    """Capture bounded revision history for versioned documents.

    ``revise`` snapshots the stored baseline when a versioned attribute has
    changed; ``revise_forced`` always snapshots. Both append to the document's
    history, evict the oldest entries over ``max_history`` and bump
    ``version`` by one.
    """

    def __init__(self, store: RevisionStore, classifier: FieldClassifier | None = None) -> None:
        self._store = store
        self._classifier = classifier

    def classifier(self, document: VersionedDocument) -> FieldClassifier:
        """Return the injected classifier, or one built from the document's type."""
        return self._classifier or classifier_for(type(document))

    def versioned_attributes(self, document: VersionedDocument) -> dict[str, Any]:
        """The document's current attributes as they would appear in a snapshot."""
        return only_versioned(document.attributes, self.classifier(document))

    def has_versionable_changes(self, document: VersionedDocument) -> bool:
        return has_versioned_changes(document, self.classifier(document))

    def revisable(self, document: VersionedDocument) -> bool:
        """True when versioned attributes changed and no revision is suspended or pending."""
        return (
            not document.suspended
            and not document.revised
            and self.has_versionable_changes(document)
        )

    async def previous_revision(self, document: VersionedDocument) -> VersionedDocument | None:
        """Resolve the stored baseline for ``document``; store errors propagate unchanged."""
        try:
            return await self._store.find_previous(document)
        except Exception:
            logger.error(
                "Failed to resolve previous revision — document=%s version=%s",
                document.id,
                document.version,
            )
            raise

    async def revise(self, document: VersionedDocument) -> bool:
        """Snapshot the stored baseline if a versioned attribute changed.

        Returns True when a revision was committed.
        """
        if document.suspended:
            logger.debug("Revision skipped, suspended — document=%s", document.id)
            return False
        if document.revised:
            logger.debug("Revision skipped, pending save — document=%s", document.id)
            return False

        previous = await self.previous_revision(document)
        if previous is None:
            logger.debug("Revision skipped, no stored baseline — document=%s", document.id)
            return False
        if not self.has_versionable_changes(document):
            logger.debug("Revision skipped, no versioned changes — document=%s", document.id)
            return False

        self._commit(document, previous)
        return True

    async def revise_forced(self, document: VersionedDocument) -> VersionedDocument:
        """Append a snapshot regardless of changes, then persist the document.

        The stored baseline is snapshotted when one exists, otherwise the
        current state of ``document`` is.
        """
        previous = await self.previous_revision(document)
        prior = _RevisionState.of(document)
        self._commit(document, previous or document)
        return await self._persist(document, prior)

    async def save(self, document: VersionedDocument) -> VersionedDocument:
        """Revise ``document`` when revisable, then persist it.

        A failed write undoes the revision made for it.
        """
        prior = _RevisionState.of(document)
        if self.revisable(document):
            await self.revise(document)
        return await self._persist(document, prior)

    async def versionless(
        self,
        document: VersionedDocument,
        action: Callable[[VersionedDocument], Any] | None = None,
    ) -> Any:
        """Run ``action(document)`` with automatic revisions suspended.

        Awaitable results are awaited inside the suspended scope. Returns the
        action's result, or the document when there is none.
        """
        result = None
        with suspend(document):
            if action is not None:
                result = action(document)
                if inspect.isawaitable(result):
                    result = await result
        return document if result is None else result

    async def _persist(
        self, document: VersionedDocument, prior: _RevisionState
    ) -> VersionedDocument:
        try:
            return await self._store.save(document)
        except Exception:
            prior.restore(document)
            logger.error(
                "Save failed, revision rolled back — document=%s version=%s",
                document.id,
                document.version,
            )
            raise

    def _commit(self, document: VersionedDocument, source: VersionedDocument) -> None:
        snapshot = Snapshot.capture(only_versioned(source.attributes, self.classifier(document)))
        history = BoundedHistory(document.history, type(document).max_history)
        history.append(snapshot)
        evicted = history.evict_if_over_capacity()

        current = document.version if document.version is not None else DEFAULT_VERSION
        document.history = history.snapshots
        document.version = current + 1
        document.revised = True
        logger.info(
            "Document revised — document=%s version=%d history=%d evicted=%d",
            document.id,
            document.version,
            len(history),
            len(evicted),
        )
