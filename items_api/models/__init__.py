"""Pydantic models for the Items API.

- base: Shared item fields and validation rules
- items: Item request and response models
"""

from items_api.models.base import EMAIL_PATTERN, BaseItemModel
from items_api.models.items import ItemRequest, ItemResponse

__all__ = [
    "EMAIL_PATTERN",
    "BaseItemModel",
    "ItemRequest",
    "ItemResponse",
]
