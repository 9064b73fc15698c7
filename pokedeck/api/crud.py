"""
Generic CRUD endpoints.

Builds the five routes of a resource family from its descriptor:

    GET    /<resources>         list          200
    GET    /<resources>/{id}    get           200 / 404
    POST   /<resources>         create        201        (bearer)
    PATCH  /<resources>/{id}    update        200 / 404  (bearer)
    DELETE /<resources>/{id}    delete        204        (bearer)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from pokedeck.api.auth import Principal, require_principal
from pokedeck.db.database import get_session
from pokedeck.db.store import SQLStorageGateway, StorageGateway
from pokedeck.models.descriptor import ResourceDescriptor
from pokedeck.models.errors import ValidationError
from pokedeck.services.crud import CrudHandler
from pokedeck.services.validation import INVALID_BODY_MESSAGE


async def get_gateway(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> StorageGateway:
    """Dependency providing the storage gateway for the request."""
    return SQLStorageGateway(session)


async def read_json_body(request: Request) -> Any:
    """Decode the request body; malformed JSON is a validation failure."""
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationError(
            INVALID_BODY_MESSAGE,
            details=[{"field": "body", "message": "Body must be valid JSON", "type": "json_invalid"}],
        ) from exc


def build_crud_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Create the router serving one resource family."""
    router = APIRouter(prefix=descriptor.prefix, tags=[descriptor.tag])
    read_schema = descriptor.read_schema

    def get_handler(
        gateway: Annotated[StorageGateway, Depends(get_gateway)],
    ) -> CrudHandler:
        return CrudHandler(descriptor, gateway.store_for(descriptor))

    Handler = Annotated[CrudHandler, Depends(get_handler)]
    Authorized = Annotated[Principal, Depends(require_principal)]

    @router.get("", response_model=list[read_schema], name=f"list_{descriptor.name}s")
    async def list_resources(handler: Handler) -> list[BaseModel]:
        return await handler.list_all()

    @router.get("/{resource_id}", response_model=read_schema, name=f"get_{descriptor.name}")
    async def get_resource(resource_id: int, handler: Handler) -> BaseModel:
        return await handler.get(resource_id)

    # Principal is declared ahead of the handler so the gate runs first,
    # and the body is only read once it has passed.
    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{descriptor.name}",
    )
    async def create_resource(
        request: Request,
        _principal: Authorized,
        handler: Handler,
    ) -> BaseModel:
        payload = await read_json_body(request)
        return await handler.create(payload)

    @router.patch("/{resource_id}", response_model=read_schema, name=f"update_{descriptor.name}")
    async def update_resource(
        resource_id: int,
        request: Request,
        _principal: Authorized,
        handler: Handler,
    ) -> BaseModel:
        payload = await read_json_body(request)
        return await handler.update(resource_id, payload)

    @router.delete(
        "/{resource_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{descriptor.name}",
    )
    async def delete_resource(
        resource_id: int,
        _principal: Authorized,
        handler: Handler,
    ) -> Response:
        await handler.delete(resource_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
