from pokedeck.db.database import dispose_db, get_session, init_db
from pokedeck.db.store import (
    ResourceStore,
    SQLResourceStore,
    SQLStorageGateway,
    StorageGateway,
)

__all__ = [
    "ResourceStore",
    "SQLResourceStore",
    "SQLStorageGateway",
    "StorageGateway",
    "dispose_db",
    "get_session",
    "init_db",
]
