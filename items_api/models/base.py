"""Base Pydantic models for the Items API.

Shared item fields inherited by the request and response models.
"""

from typing import Optional
from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@(.+)$"


class BaseItemModel(BaseModel):
    """Fields every item representation carries."""
    name: str = Field(
        ...,
        min_length=1,
        description="Item name (must not be empty)"
    )
    description: Optional[str] = Field(
        None,
        description="Free-text description"
    )
    status: Optional[str] = Field(
        None,
        description="Status tag (bulk processing sets 'PROCESSED')"
    )
    email: Optional[str] = Field(
        None,
        pattern=EMAIL_PATTERN,
        description="Contact email; must look like local@domain"
    )
