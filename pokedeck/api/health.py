"""
Liveness and readiness checks.

``/ready`` asks the storage gateway to answer a ping, the same gateway the
resource routes use, so a test double or alternate store is checked too.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from pokedeck.api.crud import get_gateway
from pokedeck.db.store import StorageGateway
from pokedeck.models.errors import StorageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    database: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Process is up; dependencies are not checked."""
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    gateway: Annotated[StorageGateway, Depends(get_gateway)],
) -> HealthResponse:
    """Process can serve requests; 503 while storage is unreachable."""
    try:
        await gateway.ping()
    except StorageError:
        logger.warning("Readiness check failed", exc_info=True)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", database="disconnected")
    return HealthResponse(status="ready", database="connected")
