"""
Request and response models for the three resources.

Each resource has a read model (what the store reports), a create model (all
mandatory fields) and an update model (any subset of fields). Wire names are
camelCase; attributes are snake_case.
"""

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


Identifier = Annotated[StrictInt, Field(gt=0)]
Text = Annotated[StrictStr, Field(min_length=1), AfterValidator(_not_blank)]


class ResourceModel(BaseModel):
    """Read model; built from ORM rows or store doubles."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ResourceInput(BaseModel):
    """Create/update payload; unknown fields are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class PartialUpdate(ResourceInput):
    """Update payload; omitted fields stay untouched, explicit nulls are refused."""

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(key for key, value in data.items() if value is None)
            if nulls:
                raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return data


# --- Attack ---


class Attack(ResourceModel):
    id: int
    name: str
    type_id: int
    damages: int


class AttackCreate(ResourceInput):
    name: Text
    type_id: Identifier
    damages: StrictInt


class AttackUpdate(PartialUpdate):
    name: Text | None = None
    type_id: Identifier | None = None
    damages: StrictInt | None = None


# --- Deck ---


class Deck(ResourceModel):
    id: int
    name: str
    owner_id: int
    cards: list[int] = Field(default_factory=list)


class DeckCreate(ResourceInput):
    name: Text
    owner_id: Identifier
    cards: list[Identifier] = Field(default_factory=list)


class DeckUpdate(PartialUpdate):
    name: Text | None = None
    owner_id: Identifier | None = None
    cards: list[Identifier] | None = None


# --- PokemonCard ---


class PokemonCard(ResourceModel):
    id: int
    name: str
    pokedex_id: int
    type_id: int
    image_url: str
    life_points: int
    weight: int
    height: int
    attack_id: int
    weakness_id: int


class PokemonCardCreate(ResourceInput):
    name: Text
    pokedex_id: StrictInt
    type_id: Identifier
    image_url: Text
    life_points: StrictInt
    weight: StrictInt
    height: StrictInt
    attack_id: Identifier
    weakness_id: Identifier


class PokemonCardUpdate(PartialUpdate):
    name: Text | None = None
    pokedex_id: StrictInt | None = None
    type_id: Identifier | None = None
    image_url: Text | None = None
    life_points: StrictInt | None = None
    weight: StrictInt | None = None
    height: StrictInt | None = None
    attack_id: Identifier | None = None
    weakness_id: Identifier | None = None
