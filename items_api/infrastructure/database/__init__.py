"""Database module for the Items API.

Provides Supabase client singleton and repository pattern for item storage.
"""

from items_api.infrastructure.database.client import SupabaseClient
from items_api.infrastructure.database.models import PROCESSED_STATUS, Item
from items_api.infrastructure.database.repositories import (
    BaseRepository,
    InMemoryItemRepository,
    ItemRepository,
    ItemStore,
)

__all__ = [
    "SupabaseClient",
    "Item",
    "PROCESSED_STATUS",
    "BaseRepository",
    "ItemStore",
    "ItemRepository",
    "InMemoryItemRepository",
]
