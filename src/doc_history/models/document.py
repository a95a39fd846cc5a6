"""Versioned document model — a mutable record carrying its own bounded history."""

from __future__ import annotations

import copy
from typing import Any, ClassVar

from pydantic import ConfigDict, Field, PrivateAttr, field_validator

from doc_history.errors import CapacityMisconfigurationError
from doc_history.models.base import DocumentBase
from doc_history.models.snapshot import Snapshot

DEFAULT_VERSION = 1


class VersionedDocument(DocumentBase):
    """Base class for documents whose prior states are kept in ``history``.

    Subclasses declare their fields as usual; undeclared attributes are
    accepted and always versioned. ``max_history`` bounds the history length
    for the subclass and is set with :meth:`set_max_history`.
    """

    model_config = ConfigDict(extra="allow")

    max_history: ClassVar[int | None] = None

    version: int = Field(default=DEFAULT_VERSION, ge=DEFAULT_VERSION)
    history: list[Snapshot] = Field(default_factory=list)

    _suspended: bool = PrivateAttr(default=False)
    _revised: bool = PrivateAttr(default=False)
    _persisted: dict[str, Any] | None = PrivateAttr(default=None)

    @field_validator("version", mode="before")
    @classmethod
    def _default_missing_version(cls, value: Any) -> Any:
        # Documents stored before versioning was enabled have no version stamped.
        return DEFAULT_VERSION if value is None else value

    @classmethod
    def set_max_history(cls, limit: int) -> int:
        """Set the maximum number of snapshots retained for this document type."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise CapacityMisconfigurationError(limit)
        cls.max_history = limit
        return limit

    @property
    def suspended(self) -> bool:
        """Whether automatic revision is currently disabled for this instance."""
        return self._suspended

    @suspended.setter
    def suspended(self, value: bool) -> None:
        self._suspended = value

    @property
    def revised(self) -> bool:
        """Whether a revision was committed since the document was last stored."""
        return self._revised

    @revised.setter
    def revised(self, value: bool) -> None:
        self._revised = value

    @property
    def attributes(self) -> dict[str, Any]:
        """The live field set, including dynamic attributes."""
        return self.model_dump(mode="python")

    @property
    def persisted(self) -> bool:
        return self._persisted is not None

    def mark_persisted(self) -> None:
        """Record the current attributes as the last stored state."""
        self._persisted = copy.deepcopy(self.attributes)
        self._revised = False

    def changes(self) -> dict[str, tuple[Any, Any]]:
        """Return ``{name: (old, new)}`` for every attribute that differs from the stored state."""
        current = self.attributes
        previous = self._persisted or {}
        diff: dict[str, tuple[Any, Any]] = {}
        for name in {**previous, **current}:
            old, new = previous.get(name), current.get(name)
            if old != new:
                diff[name] = (old, new)
        return diff
