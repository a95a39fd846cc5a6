"""Bounded, oldest-first snapshot history."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from doc_history.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class BoundedHistory:
    """An ordered run of snapshots with an optional maximum length.

    Appends go to the end; eviction removes from the front. The instance works
    on its own copy of the snapshots, so callers commit the result explicitly.
    """

    def __init__(self, snapshots: Iterable[Snapshot] = (), limit: int | None = None) -> None:
        self._snapshots = list(snapshots)
        self.limit = limit

    def append(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def evict_if_over_capacity(self) -> list[Snapshot]:
        """Drop the oldest snapshots until the limit holds; return what was dropped.

        After a single append this removes exactly one entry. A limit lowered
        since the last revision trims the backlog in the same pass, so the
        history never stays longer than the current limit.
        """
        evicted: list[Snapshot] = []
        if self.limit is None:
            return evicted
        while len(self._snapshots) > self.limit:
            evicted.append(self._snapshots.pop(0))
        if evicted:
            logger.debug("Evicted %d snapshot(s) over limit=%d", len(evicted), self.limit)
        return evicted

    @property
    def snapshots(self) -> list[Snapshot]:
        return list(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)
