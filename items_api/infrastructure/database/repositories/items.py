"""Items repository for the Items API.

Handles CRUD operations for the items table through Supabase.
Unlike the logging-only repositories this store never fails silently: a
rejected read or write is logged and raised as PersistenceError.
"""

from typing import List, Optional

from items_api.config import config
from items_api.core.errors import PersistenceError
from items_api.core.logging import logger
from items_api.infrastructure.database.models import Item
from items_api.infrastructure.database.repositories.base import BaseRepository, ItemStore


class ItemRepository(BaseRepository[Item], ItemStore):
    """Repository for items table operations."""

    backend = "supabase"

    def table_name(self) -> str:
        """Return table name."""
        return config.items_table()

    def list_all_ids(self) -> List[int]:
        """Get ids of all items ordered by id.

        Returns:
            List of item ids (snapshot at call time)

        Raises:
            PersistenceError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("id").order("id").execute()
            return [row["id"] for row in result.data or []]

        except Exception as e:
            logger.error("item_ids_fetch_failed", error=str(e))
            raise PersistenceError("list_all_ids", str(e)) from e

    def get(self, item_id: int) -> Optional[Item]:
        """Get a single item by id.

        Args:
            item_id: Item id

        Returns:
            Item or None if not found

        Raises:
            PersistenceError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("*").eq("id", item_id).execute()

            if not result.data:
                return None

            return Item.from_row(result.data[0])

        except Exception as e:
            logger.error("item_fetch_failed", item_id=item_id, error=str(e))
            raise PersistenceError("get", str(e), item_id) from e

    def put(self, item: Item) -> Item:
        """Insert a new item or overwrite an existing one.

        Args:
            item: Item to persist (id None means insert)

        Returns:
            Item as stored, with its assigned id

        Raises:
            PersistenceError: If the write fails or returns no row
        """
        try:
            table = self.db.table(self.table_name())
            if item.id is None:
                result = table.insert(item.to_row()).execute()
            else:
                result = table.upsert(item.to_row()).execute()

        except Exception as e:
            logger.error("item_save_failed", item_id=item.id, error=str(e))
            raise PersistenceError("put", str(e), item.id) from e

        if not result.data:
            logger.error("item_save_failed", item_id=item.id, error="no row returned")
            raise PersistenceError("put", "no row returned", item.id)

        return Item.from_row(result.data[0])

    def list_all(self) -> List[Item]:
        """Get all items ordered by id.

        Raises:
            PersistenceError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("*").order("id").execute()
            return [Item.from_row(row) for row in result.data or []]

        except Exception as e:
            logger.error("item_list_failed", error=str(e))
            raise PersistenceError("list_all", str(e)) from e

    def delete(self, item_id: int) -> None:
        """Delete an item by id.

        Raises:
            PersistenceError: If the delete fails
        """
        try:
            self.db.table(self.table_name()).delete().eq("id", item_id).execute()

        except Exception as e:
            logger.error("item_delete_failed", item_id=item_id, error=str(e))
            raise PersistenceError("delete", str(e), item_id) from e
