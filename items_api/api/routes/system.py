"""System routes for the Items API."""

from fastapi import APIRouter, Depends

from items_api.api.dependencies import get_item_store
from items_api.infrastructure.database.repositories.base import ItemStore
from items_api.infrastructure.health import get_health_status

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(store: ItemStore = Depends(get_item_store)):
    """Health check with item store probing. Returns service status, version and dependency health."""
    return await get_health_status(store)
