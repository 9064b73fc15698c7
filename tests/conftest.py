from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from pokedeck.api.auth import InvalidTokenError, Principal, get_token_verifier
from pokedeck.api.crud import get_gateway
from pokedeck.main import app
from pokedeck.models.descriptor import ResourceDescriptor
from pokedeck.models.errors import RecordNotFoundError, StorageError

VALID_TOKEN = "mockedToken"


class FakeStore:
    """
    In-memory ResourceStore.

    Every call is recorded in ``calls``. Operation names added to ``failing``
    raise StorageError, the way a broken database would.
    """

    def __init__(self, descriptor: ResourceDescriptor) -> None:
        self.descriptor = descriptor
        self.records: dict[int, dict[str, Any]] = {}
        self.failing: set[str] = set()
        self.calls: list[tuple[Any, ...]] = []
        self._next_id = 1

    def seed(self, *records: dict[str, Any]) -> None:
        for record in records:
            stored = self._read(record).model_dump()
            self.records[stored["id"]] = stored
            self._next_id = max(self._next_id, stored["id"] + 1)

    def called(self, operation: str) -> bool:
        return any(call[0] == operation for call in self.calls)

    def _enter(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if operation in self.failing:
            raise StorageError("Database error")

    def _read(self, record: dict[str, Any]) -> BaseModel:
        return self.descriptor.read_schema.model_validate(record)

    async def find_many(self) -> list[BaseModel]:
        self._enter("find_many")
        return [self._read(record) for record in self.records.values()]

    async def find_by_id(self, resource_id: int) -> BaseModel | None:
        self._enter("find_by_id", resource_id)
        record = self.records.get(resource_id)
        return self._read(record) if record is not None else None

    async def create(self, data: dict[str, Any]) -> BaseModel:
        self._enter("create", data)
        record = {"id": self._next_id, **data}
        self._next_id += 1
        self.records[record["id"]] = record
        return self._read(record)

    async def update(self, resource_id: int, data: dict[str, Any]) -> BaseModel:
        self._enter("update", resource_id, data)
        if resource_id not in self.records:
            raise RecordNotFoundError(f"No record with id={resource_id}")
        self.records[resource_id].update(data)
        return self._read(self.records[resource_id])

    async def delete(self, resource_id: int) -> None:
        self._enter("delete", resource_id)
        self.records.pop(resource_id, None)


class FakeGateway:
    """StorageGateway handing out one FakeStore per resource family."""

    def __init__(self) -> None:
        self.stores: dict[str, FakeStore] = {}
        self.reachable = True

    def store_for(self, descriptor: ResourceDescriptor) -> FakeStore:
        if descriptor.name not in self.stores:
            self.stores[descriptor.name] = FakeStore(descriptor)
        return self.stores[descriptor.name]

    async def ping(self) -> None:
        if not self.reachable:
            raise StorageError("ping failed")


class StaticTokenVerifier:
    """Accepts exactly one token."""

    def verify(self, token: str) -> Principal:
        if token != VALID_TOKEN:
            raise InvalidTokenError("unknown token")
        return Principal(subject="ash", claims={"sub": "ash"})


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def token_verifier() -> StaticTokenVerifier:
    return StaticTokenVerifier()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the one token the static verifier accepts."""
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
async def client(
    gateway: FakeGateway, token_verifier: StaticTokenVerifier
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async test client backed by in-memory stores."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
