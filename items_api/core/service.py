"""Item service for the Items API.

Thin layer between the router and the item store.
"""

from typing import List, Optional

from items_api.core.batch import BatchProcessor, ProcessingResult
from items_api.core.errors import ItemNotFoundError
from items_api.infrastructure.database.models import Item
from items_api.infrastructure.database.repositories.base import ItemStore


class ItemService:
    """CRUD operations plus bulk processing over one ItemStore."""

    def __init__(self, store: ItemStore, processor: Optional[BatchProcessor] = None):
        self.store = store
        self.processor = processor or BatchProcessor(store)

    def find_all(self) -> List[Item]:
        return self.store.list_all()

    def find_by_id(self, item_id: int) -> Item:
        """Get an item or raise ItemNotFoundError."""
        item = self.store.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def save(self, item: Item) -> Item:
        return self.store.put(item)

    def delete_by_id(self, item_id: int) -> None:
        self.store.delete(item_id)

    async def process_all(self) -> ProcessingResult:
        return await self.processor.process_all()
