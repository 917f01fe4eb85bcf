"""FastAPI dependencies for the Items API.

Dependency injection functions for route handlers.
"""

from fastapi import Depends, Request

from items_api.core.service import ItemService
from items_api.infrastructure.database.repositories.base import ItemStore


def get_item_store(request: Request) -> ItemStore:
    """Get the item store from app state.

    Args:
        request: FastAPI request object

    Returns:
        ItemStore chosen by create_app (Supabase or in-memory)
    """
    return request.app.state.item_store


def get_item_service(store: ItemStore = Depends(get_item_store)) -> ItemService:
    """Dependency to get an ItemService bound to the app's store."""
    return ItemService(store)
