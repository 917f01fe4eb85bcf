"""Routes for the Items API."""

from items_api.api.routes import items, system

__all__ = ["items", "system"]
