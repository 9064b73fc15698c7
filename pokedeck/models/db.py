"""
SQLAlchemy ORM models for persistent storage.

Type, owner and card references are plain integers; the type enumeration and
the owning principals live outside this service.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class AttackDB(TimestampMixin, Base):
    """An attack a pokemon card can carry."""

    __tablename__ = "attacks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    type_id: Mapped[int] = mapped_column(Integer)
    damages: Mapped[int] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<AttackDB(id={self.id}, name={self.name})>"


class DeckDB(TimestampMixin, Base):
    """
    A player's deck.

    Card references are stored as a JSON list and passed through untouched.
    """

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    owner_id: Mapped[int] = mapped_column(Integer, index=True)
    cards: Mapped[list[int]] = mapped_column(JSON, default=list)

    def __repr__(self) -> str:
        return f"<DeckDB(id={self.id}, name={self.name}, owner_id={self.owner_id})>"


class PokemonCardDB(TimestampMixin, Base):
    """A pokemon card."""

    __tablename__ = "pokemon_cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    pokedex_id: Mapped[int] = mapped_column(Integer)
    type_id: Mapped[int] = mapped_column(Integer)
    image_url: Mapped[str] = mapped_column(Text)
    life_points: Mapped[int] = mapped_column(Integer)
    weight: Mapped[int] = mapped_column(Integer)
    height: Mapped[int] = mapped_column(Integer)
    attack_id: Mapped[int] = mapped_column(Integer, ForeignKey("attacks.id"))
    weakness_id: Mapped[int] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<PokemonCardDB(id={self.id}, name={self.name})>"
