"""Generic async repository over a single Cosmos DB container."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from doc_history.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import ContainerProxy, DatabaseProxy

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DocumentBase)

# Properties Cosmos adds to every stored item.
COSMOS_SYSTEM_PROPERTIES = frozenset({"_rid", "_self", "_etag", "_attachments", "_ts"})


class BaseRepository(Generic[T]):
    """Typed data access for one container; subclasses set ``container_name`` and ``model_class``."""

    container_name: ClassVar[str]
    model_class: type[T]

    def __init__(self, database: DatabaseProxy, *, container_name: str | None = None) -> None:
        self._container: ContainerProxy = database.get_container_client(
            container_name or self.container_name
        )

    def _to_model(self, item: dict[str, Any]) -> T:
        data = {key: value for key, value in item.items() if key not in COSMOS_SYSTEM_PROPERTIES}
        return self.model_class.model_validate(data)

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a single item, or None when it does not exist."""
        try:
            item = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        return self._to_model(item)

    async def query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
        *,
        partition_key: str | None = None,
    ) -> list[T]:
        """Run a parameterized SQL query and validate each result."""
        kwargs: dict[str, Any] = {"query": query, "parameters": parameters or []}
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        return [self._to_model(item) async for item in self._container.query_items(**kwargs)]

    async def upsert(self, model: T) -> T:
        """Create or replace ``model``, stamping ``updated_at``."""
        model.touch()
        await self._container.upsert_item(body=model.model_dump(mode="json"))
        logger.debug("Upserted %s id=%s", self.model_class.__name__, model.id)
        return model
