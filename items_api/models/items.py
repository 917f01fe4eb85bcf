"""Item-related Pydantic models for the Items API.

These models handle item create/update payloads and item responses.
"""

from typing import Optional
from pydantic import BaseModel, Field

from items_api.infrastructure.database.models import Item
from items_api.models.base import BaseItemModel


class ItemRequest(BaseItemModel):
    """Request for POST /api/items and PUT /api/items/{id}.

    Any id in the payload is ignored; the store assigns it on create and the
    path decides it on update.
    """
    id: Optional[int] = Field(
        None,
        description="Ignored on input"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Test Item",
                    "description": "Description",
                    "status": "NEW",
                    "email": "test@email.com"
                }
            ]
        }
    }

    def to_item(self, item_id: Optional[int] = None) -> Item:
        return Item(
            id=item_id,
            name=self.name,
            description=self.description,
            status=self.status,
            email=self.email,
        )


class ItemResponse(BaseModel):
    """Item as returned by every item endpoint.

    Mirrors stored data as-is, so rows written outside the API still serialize.
    """
    id: int
    name: str
    description: Optional[str] = None
    status: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_item(cls, item: Item) -> "ItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            status=item.status,
            email=item.email,
        )
