from pokedeck.api.attacks import router as attacks_router
from pokedeck.api.decks import router as decks_router
from pokedeck.api.health import router as health_router
from pokedeck.api.pokemon_cards import router as pokemon_cards_router

__all__ = [
    "attacks_router",
    "decks_router",
    "health_router",
    "pokemon_cards_router",
]
