"""
Pokedeck services.

Request handling shared by every resource family.
"""

from pokedeck.services.crud import CrudHandler
from pokedeck.services.validation import validate_create, validate_update

__all__ = [
    "CrudHandler",
    "validate_create",
    "validate_update",
]
