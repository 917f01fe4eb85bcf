"""Repository implementations for the Items API.

Implements Repository pattern with Dependency Inversion principle.
"""

from items_api.infrastructure.database.repositories.base import BaseRepository, ItemStore
from items_api.infrastructure.database.repositories.items import ItemRepository
from items_api.infrastructure.database.repositories.memory import InMemoryItemRepository

__all__ = [
    "BaseRepository",
    "ItemStore",
    "ItemRepository",
    "InMemoryItemRepository",
]
