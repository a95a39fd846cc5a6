"""Exceptions raised by the versioning core."""

from __future__ import annotations


class VersioningError(Exception):
    """Base class for document versioning errors."""


class CapacityMisconfigurationError(VersioningError, ValueError):
    """Raised when a history limit is not a positive integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"History limit must be a positive integer, got {value!r}")
