"""Snapshot model — an immutable historical projection of a document."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Keys never carried into a snapshot: identity belongs to the owning document,
# and a snapshot is never itself versioned.
_STRIPPED_KEYS = ("id", "history", "version")


class Snapshot(BaseModel):
    """A deep-copied, filtered copy of a prior document state.

    Snapshots are leaf values: they have no identity, no nested history, and
    their own ``version`` is always 1.
    """

    model_config = ConfigDict(frozen=True)

    version: Literal[1] = 1
    attributes: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def capture(cls, attributes: Mapping[str, Any]) -> Snapshot:
        """Build a snapshot from already-filtered attributes, de-aliasing every nested value."""
        payload = copy.deepcopy(dict(attributes))
        for key in _STRIPPED_KEYS:
            payload.pop(key, None)
        return cls(attributes=payload)

    def __getitem__(self, key: str) -> Any:
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attributes
