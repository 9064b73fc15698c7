import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokedeck.api import (
    attacks_router,
    decks_router,
    health_router,
    pokemon_cards_router,
)
from pokedeck.api.errors import register_error_handlers
from pokedeck.config import settings
from pokedeck.db.database import dispose_db, init_db


def configure_logging(level: str) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    configure_logging(settings.log_level)
    await init_db()
    yield
    await dispose_db()


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("pokedeck"),
    lifespan=lifespan,
)

app.include_router(attacks_router)
app.include_router(decks_router)
app.include_router(pokemon_cards_router)
app.include_router(health_router)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
