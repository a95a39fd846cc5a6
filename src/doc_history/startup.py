"""Wiring helpers — build the database client and revision engine from settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.core.exceptions import ServiceRequestError
from azure.cosmos.exceptions import CosmosHttpResponseError

from doc_history.database.client import CosmosClient
from doc_history.database.repositories.documents import DocumentRepository
from doc_history.health import check_emulators
from doc_history.models.document import VersionedDocument
from doc_history.versioning.engine import RevisionEngine

if TYPE_CHECKING:
    from doc_history.config import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB and provision the documents container.

    In development the local emulator is probed first. Raises
    ``ConnectionError`` when the emulator is down or the account cannot be used.
    """
    if settings.app.is_development and not await check_emulators(settings):
        msg = f"Cosmos DB emulator is not reachable at {settings.cosmos.endpoint or '<unset>'}"
        raise ConnectionError(msg)

    cosmos = CosmosClient(settings.cosmos)
    try:
        await cosmos.initialize()
    except (CosmosHttpResponseError, ServiceRequestError) as exc:
        msg = f"Cannot reach Cosmos DB database {settings.cosmos.database!r} at {settings.cosmos.endpoint}"
        raise ConnectionError(msg) from exc
    return cosmos


def init_engine(
    settings: Settings,
    cosmos: CosmosClient,
    document_class: type[VersionedDocument] = VersionedDocument,
) -> RevisionEngine:
    """Build a revision engine storing ``document_class`` in the provisioned container.

    The configured history limit applies only to types without their own.
    """
    limit = settings.versioning.max_history
    if limit is not None and document_class.max_history is None:
        document_class.set_max_history(limit)
    repository = DocumentRepository(
        cosmos.database,
        document_class,
        container_name=cosmos.container_name,
    )
    logger.info(
        "Revision engine ready — model=%s container=%s max_history=%s",
        document_class.__name__,
        cosmos.container_name,
        document_class.max_history,
    )
    return RevisionEngine(repository)
