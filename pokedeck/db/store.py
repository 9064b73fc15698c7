"""
Storage gateway.

Per-resource data access: find-many, find-by-id, create, update-by-id and
delete-by-id. Any failure surfaces as StorageError; callers never inspect
the underlying cause.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Protocol

from pydantic import BaseModel
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pokedeck.models.db import Base
from pokedeck.models.descriptor import ResourceDescriptor
from pokedeck.models.errors import RecordNotFoundError, StorageError

logger = logging.getLogger(__name__)

# asyncpg raises refused or dropped connections as bare OSError, not wrapped by SQLAlchemy
DATABASE_ERRORS = (SQLAlchemyError, OSError)


class ResourceStore(Protocol):
    """Data access for one resource family."""

    async def find_many(self) -> list[BaseModel]:
        """Every record of the resource."""
        ...

    async def find_by_id(self, resource_id: int) -> BaseModel | None:
        """The record with this id, or None."""
        ...

    async def create(self, data: dict[str, Any]) -> BaseModel:
        """Store a new record and return it with its assigned id."""
        ...

    async def update(self, resource_id: int, data: dict[str, Any]) -> BaseModel:
        """Merge the given fields into an existing record and return it."""
        ...

    async def delete(self, resource_id: int) -> None:
        """Remove a record permanently."""
        ...


class StorageGateway(Protocol):
    """Hands out the store bound to a resource family."""

    def store_for(self, descriptor: ResourceDescriptor) -> ResourceStore: ...

    async def ping(self) -> None:
        """Raise StorageError unless the backing store answers."""
        ...


@asynccontextmanager
async def storage_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Translate database failures inside the block into StorageError."""
    try:
        yield
    except DATABASE_ERRORS as exc:
        try:
            await session.rollback()
        except DATABASE_ERRORS:
            logger.warning("Rollback after failed %s also failed", operation, exc_info=True)
        raise StorageError(f"{operation} failed") from exc


class SQLResourceStore:
    """ResourceStore backed by a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession, descriptor: ResourceDescriptor) -> None:
        self.session = session
        self.descriptor = descriptor
        self._orm = descriptor.orm_model

    async def find_many(self) -> list[BaseModel]:
        async with self._storage_errors("find_many"):
            result = await self.session.execute(select(self._orm).order_by(self._orm.id))
            rows = result.scalars().all()
        return [self._to_model(row) for row in rows]

    async def find_by_id(self, resource_id: int) -> BaseModel | None:
        async with self._storage_errors("find_by_id"):
            row = await self.session.get(self._orm, resource_id)
        if row is None:
            return None
        return self._to_model(row)

    async def create(self, data: dict[str, Any]) -> BaseModel:
        async with self._storage_errors("create"):
            row = self._orm(**data)
            self.session.add(row)
            await self.session.commit()
            await self.session.refresh(row)
        return self._to_model(row)

    async def update(self, resource_id: int, data: dict[str, Any]) -> BaseModel:
        async with self._storage_errors("update"):
            row = await self._fetch_existing(resource_id)
            for field_name, value in data.items():
                setattr(row, field_name, value)
            await self.session.commit()
            await self.session.refresh(row)
        return self._to_model(row)

    async def delete(self, resource_id: int) -> None:
        async with self._storage_errors("delete"):
            row = await self._fetch_existing(resource_id)
            await self.session.delete(row)
            await self.session.commit()

    async def _fetch_existing(self, resource_id: int) -> Base:
        row = await self.session.get(self._orm, resource_id)
        if row is None:
            msg = f"No {self.descriptor.name} with id={resource_id}"
            raise RecordNotFoundError(msg)
        return row

    def _to_model(self, row: Base) -> BaseModel:
        """Convert an ORM row to the resource's read model."""
        return self.descriptor.read_schema.model_validate(row)

    def _storage_errors(self, operation: str) -> AbstractAsyncContextManager[None]:
        return storage_errors(self.session, f"{operation} on {self._orm.__tablename__}")


class SQLStorageGateway:
    """StorageGateway sharing one session across resource stores."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def store_for(self, descriptor: ResourceDescriptor) -> ResourceStore:
        return SQLResourceStore(self.session, descriptor)

    async def ping(self) -> None:
        async with storage_errors(self.session, "ping"):
            await self.session.execute(text("SELECT 1"))
