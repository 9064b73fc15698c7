"""Pokemon card API endpoints, served under ``/pokemon-cards``."""

from pokedeck.api.crud import build_crud_router
from pokedeck.models.descriptor import POKEMON_CARDS

router = build_crud_router(POKEMON_CARDS)
