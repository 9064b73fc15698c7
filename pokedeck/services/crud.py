"""
Generic CRUD request handling.

One handler serves every resource family; the descriptor supplies schemas
and failure messages, the store supplies persistence. Storage failures are
logged and replaced by the descriptor's fixed message for the operation.
"""

import logging
from typing import Any

from pydantic import BaseModel

from pokedeck.db.store import ResourceStore
from pokedeck.models.descriptor import ResourceDescriptor
from pokedeck.models.errors import NotFoundError, OperationFailedError, StorageError
from pokedeck.services.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


class CrudHandler:
    """List, get, create, update and delete for one resource family."""

    def __init__(self, descriptor: ResourceDescriptor, store: ResourceStore) -> None:
        self.descriptor = descriptor
        self.store = store
        self.messages = descriptor.messages

    async def list_all(self) -> list[BaseModel]:
        try:
            return await self.store.find_many()
        except StorageError as exc:
            raise self._failed("list", self.messages.list_failed) from exc

    async def get(self, resource_id: int) -> BaseModel:
        try:
            record = await self.store.find_by_id(resource_id)
        except StorageError as exc:
            raise self._failed("get", self.messages.get_failed) from exc
        if record is None:
            raise NotFoundError(self.messages.not_found)
        return record

    async def create(self, payload: Any) -> BaseModel:
        data = validate_create(self.descriptor, payload)
        try:
            return await self.store.create(data)
        except StorageError as exc:
            raise self._failed("create", self.messages.create_failed) from exc

    async def update(self, resource_id: int, payload: Any) -> BaseModel:
        """
        Merge the supplied fields into an existing record.

        The existence check and the update are separate store calls and are
        not atomic; a failure in either reports the same message.
        """
        changes = validate_update(self.descriptor, payload)
        try:
            existing = await self.store.find_by_id(resource_id)
        except StorageError as exc:
            raise self._failed("update", self.messages.update_failed) from exc
        if existing is None:
            raise NotFoundError(self.messages.not_found)

        try:
            return await self.store.update(resource_id, changes)
        except StorageError as exc:
            raise self._failed("update", self.messages.update_failed) from exc

    async def delete(self, resource_id: int) -> None:
        # No existence check here, unlike update; missing ids are the store's call.
        try:
            await self.store.delete(resource_id)
        except StorageError as exc:
            raise self._failed("delete", self.messages.delete_failed) from exc

    def _failed(self, operation: str, message: str) -> OperationFailedError:
        logger.exception("Storage failure during %s %s", self.descriptor.name, operation)
        return OperationFailedError(message)
