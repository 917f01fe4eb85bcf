"""Database models for the Items API.

Type-safe dataclasses representing database records.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

PROCESSED_STATUS = "PROCESSED"


@dataclass
class Item:
    """Represents a row in the items table."""

    id: Optional[int]
    name: str
    description: Optional[str] = None
    status: Optional[str] = None
    email: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """Column mapping for inserts; a missing id lets the store assign one."""
        row = asdict(self)
        if row["id"] is None:
            del row["id"]
        return row

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Item":
        return cls(
            id=row.get("id"),
            name=row["name"],
            description=row.get("description"),
            status=row.get("status"),
            email=row.get("email"),
        )
