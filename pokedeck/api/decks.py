"""Deck API endpoints."""

from pokedeck.api.crud import build_crud_router
from pokedeck.models.descriptor import DECKS

router = build_crud_router(DECKS)
