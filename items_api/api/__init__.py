"""HTTP layer for the Items API."""

from items_api.api.app import create_app

__all__ = ["create_app"]
