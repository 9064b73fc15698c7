"""
Resource descriptors.

A descriptor is everything the generic CRUD machinery needs to know about one
resource family: its schemas, its table and the user-facing failure messages.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from pokedeck.models.db import AttackDB, Base, DeckDB, PokemonCardDB
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


@dataclass(frozen=True)
class ResourceMessages:
    """Fixed error strings returned for each failure path."""

    list_failed: str
    get_failed: str
    not_found: str
    create_failed: str
    update_failed: str
    delete_failed: str


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Describes one resource family.

    Attributes:
        name: Resource name used in logs (e.g., "attack")
        prefix: URL prefix of the resource collection
        read_schema: Model the store returns and responses serialize
        create_schema: Model a create body must satisfy
        update_schema: Model a partial update body must satisfy
        orm_model: Table backing the resource
        messages: Failure messages for each operation
    """

    name: str
    prefix: str
    read_schema: type[BaseModel]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    orm_model: type[Base]
    messages: ResourceMessages

    @property
    def tag(self) -> str:
        return self.prefix.strip("/")


ATTACKS = ResourceDescriptor(
    name="attack",
    prefix="/attacks",
    read_schema=Attack,
    create_schema=AttackCreate,
    update_schema=AttackUpdate,
    orm_model=AttackDB,
    messages=ResourceMessages(
        list_failed="Failed to fetch attacks",
        get_failed="Failed to fetch attack",
        not_found="Attack not found",
        create_failed="Failed to create the attack",
        update_failed="Failed to update the attack",
        delete_failed="Failed to delete the attack",
    ),
)

DECKS = ResourceDescriptor(
    name="deck",
    prefix="/decks",
    read_schema=Deck,
    create_schema=DeckCreate,
    update_schema=DeckUpdate,
    orm_model=DeckDB,
    messages=ResourceMessages(
        list_failed="Failed to fetch decks",
        get_failed="Failed to fetch deck",
        not_found="Deck not found",
        create_failed="Failed to create the deck",
        update_failed="Failed to update the deck",
        delete_failed="Failed to delete the deck",
    ),
)

POKEMON_CARDS = ResourceDescriptor(
    name="pokemon_card",
    prefix="/pokemon-cards",
    read_schema=PokemonCard,
    create_schema=PokemonCardCreate,
    update_schema=PokemonCardUpdate,
    orm_model=PokemonCardDB,
    messages=ResourceMessages(
        list_failed="Failed to fetch pokemonCards",
        get_failed="Failed to fetch PokemonCard",
        not_found="PokemonCard not found",
        create_failed="Failed to create the PokemonCard",
        update_failed="Failed to update the PokemonCard",
        delete_failed="Failed to delete the PokemonCard",
    ),
)

ALL_RESOURCES = (ATTACKS, DECKS, POKEMON_CARDS)
