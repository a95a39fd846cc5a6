"""Common fields shared by every Cosmos DB document type."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(UTC)


class DocumentBase(BaseModel):
    """Identity and timestamp fields for a stored document."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
    deleted_at: datetime | None = None

    def touch(self) -> None:
        """Stamp ``updated_at`` with the current time."""
        self.updated_at = _now()
