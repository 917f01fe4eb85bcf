"""Base repository interfaces for the Items API.

Implements Repository pattern with Dependency Inversion principle.
Supabase-backed repositories inherit from BaseRepository; anything the
batch processor and item service talk to implements ItemStore.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from items_api.infrastructure.database.client import SupabaseClient
from items_api.infrastructure.database.models import Item

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository for database operations.

    Provides dependency inversion - depend on repository interface, not concrete tables.
    """

    def __init__(self, client: Optional[SupabaseClient] = None):
        """Initialize repository with Supabase client."""
        self._client: SupabaseClient = client or SupabaseClient()

    @property
    def db(self):
        """Get Supabase client instance."""
        return self._client.client

    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""
        pass


class ItemStore(ABC):
    """Store contract for items.

    Implementations must be safe to call from several worker threads at once.
    Failures to read or write are raised as PersistenceError.
    """

    backend = "unknown"

    @abstractmethod
    def list_all_ids(self) -> List[int]:
        """Return every known item id, in ascending order."""

    @abstractmethod
    def get(self, item_id: int) -> Optional[Item]:
        """Return the item for item_id, or None if it does not exist."""

    @abstractmethod
    def put(self, item: Item) -> Item:
        """Insert (id is None) or update an item; return the persisted copy."""

    @abstractmethod
    def list_all(self) -> List[Item]:
        """Return every stored item."""

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an item; deleting a missing id is a no-op."""
