"""Scoped suspension of automatic revisions on a single document."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doc_history.models.document import VersionedDocument

logger = logging.getLogger(__name__)


@contextmanager
def suspend(document: VersionedDocument) -> Iterator[VersionedDocument]:
    """Disable automatic revision of ``document`` for the duration of the block.

    The flag is a plain toggle: leaving a nested block re-enables revisions.
    """
    document.suspended = True
    logger.debug("Revisions suspended for document %s", document.id)
    try:
        yield document
    finally:
        document.suspended = False
        logger.debug("Revisions resumed for document %s", document.id)
