"""Infrastructure modules for the Items API.

- Database: Supabase client singleton and item repositories
- Health: Dependency health checks
"""

# Database
from items_api.infrastructure.database import (
    BaseRepository,
    InMemoryItemRepository,
    Item,
    ItemRepository,
    ItemStore,
    SupabaseClient,
)

# Health
from items_api.infrastructure.health import check_item_store, get_health_status

__all__ = [
    # Database
    "SupabaseClient",
    "Item",
    "BaseRepository",
    "ItemStore",
    "ItemRepository",
    "InMemoryItemRepository",
    # Health
    "check_item_store",
    "get_health_status",
]
