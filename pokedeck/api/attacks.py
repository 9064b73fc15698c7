"""
Attack API endpoints.

Attacks are referenced by pokemon cards through ``attackId``.
"""

from pokedeck.api.crud import build_crud_router
from pokedeck.models.descriptor import ATTACKS

router = build_crud_router(ATTACKS)
