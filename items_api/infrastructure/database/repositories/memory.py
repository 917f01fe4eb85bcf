"""In-memory item store for the Items API.

Used when Supabase is not configured and as the store in tests.
"""

import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from items_api.infrastructure.database.models import Item
from items_api.infrastructure.database.repositories.base import ItemStore


class InMemoryItemRepository(ItemStore):
    """Thread-safe dict-backed item store with auto-incrementing ids.

    Returns copies so callers never share an Item instance with the store.
    """

    backend = "memory"

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._lock = threading.Lock()
        self._items: Dict[int, Item] = {}
        self._next_id = 1
        for item in items or []:
            self.put(item)

    def list_all_ids(self) -> List[int]:
        with self._lock:
            return sorted(self._items)

    def get(self, item_id: int) -> Optional[Item]:
        with self._lock:
            item = self._items.get(item_id)
            return replace(item) if item is not None else None

    def put(self, item: Item) -> Item:
        with self._lock:
            item_id = item.id
            if item_id is None:
                item_id = self._next_id
            self._next_id = max(self._next_id, item_id + 1)

            stored = replace(item, id=item_id)
            self._items[item_id] = stored
            return replace(stored)

    def list_all(self) -> List[Item]:
        with self._lock:
            return [replace(self._items[item_id]) for item_id in sorted(self._items)]

    def delete(self, item_id: int) -> None:
        with self._lock:
            self._items.pop(item_id, None)
