from pokedeck.models.descriptor import (
    ALL_RESOURCES,
    ATTACKS,
    DECKS,
    POKEMON_CARDS,
    ResourceDescriptor,
    ResourceMessages,
)
from pokedeck.models.errors import (
    ApiError,
    AuthorizationError,
    FailureKind,
    NotFoundError,
    OperationFailedError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)
from pokedeck.models.resources import (
    Attack,
    AttackCreate,
    AttackUpdate,
    Deck,
    DeckCreate,
    DeckUpdate,
    PokemonCard,
    PokemonCardCreate,
    PokemonCardUpdate,
)

__all__ = [
    "ALL_RESOURCES",
    "ATTACKS",
    "DECKS",
    "POKEMON_CARDS",
    "ApiError",
    "Attack",
    "AttackCreate",
    "AttackUpdate",
    "AuthorizationError",
    "Deck",
    "DeckCreate",
    "DeckUpdate",
    "FailureKind",
    "NotFoundError",
    "OperationFailedError",
    "PokemonCard",
    "PokemonCardCreate",
    "PokemonCardUpdate",
    "RecordNotFoundError",
    "ResourceDescriptor",
    "ResourceMessages",
    "StorageError",
    "ValidationError",
]
