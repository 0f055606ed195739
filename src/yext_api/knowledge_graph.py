"""Calls to the Knowledge Graph API.

See: https://hitchhikers.yext.com/docs/knowledgeapis/knowledgegraph/
"""

import logging
from typing import TypeVar, cast

import httpx

from yext_api.client import Client
from yext_api.config import Config
from yext_api.entities import Entity
from yext_api.errors.exceptions import NotFoundError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


class KnowledgeGraphApi:
    """Provides access to the Knowledge Graph API.

    Args:
        config: Settings for the account to call.
        http_client: Optional httpx client, passed through to Client.
    """

    def __init__(self, config: Config, *, http_client: httpx.AsyncClient | None = None):
        self._client = Client(config, http_client=http_client)

    @property
    def client(self) -> Client:
        return self._client

    async def create_entity(self, entity_id: str, entity_type: str, entity: EntityT) -> EntityT:
        """Call the Entities: Create endpoint.

        Args:
            entity_id: External id to assign to the new entity.
            entity_type: Type of entity to create, like ``"location"`` or ``"faq"``.
            entity: Data for the new entity. It is not modified.

        Returns:
            The full newly created entity.
        """
        body = {**entity, "meta": {**(entity.get("meta") or {}), "id": entity_id}}
        api_response = await self._client.call("POST", "entities", {"entityType": entity_type}, body)
        return cast(EntityT, api_response["response"])

    async def get_entity(self, entity_id: str) -> Entity | None:
        """Call the Entities: Get endpoint.

        Returns:
            The requested entity, or None if no such entity exists.
        """
        try:
            api_response = await self._client.call("GET", f"entities/{entity_id}")
        except NotFoundError:
            logger.debug(f"Entity {entity_id!r} not found")
            return None
        return cast(Entity, api_response["response"])

    async def update_entity(self, entity_id: str, entity: EntityT) -> EntityT:
        """Call the Entities: Update endpoint.

        Args:
            entity_id: External id of the entity to update.
            entity: Fields to change; sent as-is.

        Returns:
            The full updated entity.
        """
        api_response = await self._client.call("PUT", f"entities/{entity_id}", body=entity)
        return cast(EntityT, api_response["response"])

    async def delete_entity(self, entity_id: str) -> bool:
        """Call the Entities: Delete endpoint.

        Returns:
            True if the entity was deleted, False if no such entity existed.
        """
        try:
            await self._client.call("DELETE", f"entities/{entity_id}")
        except NotFoundError:
            logger.debug(f"Entity {entity_id!r} not found; nothing deleted")
            return False
        return True
