"""Batch processing models for the Items API.

Type-safe models for per-item outcomes and whole-batch results.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from items_api.infrastructure.database.models import Item


class UnitStatus(str, Enum):
    """Terminal states of a single unit of work."""

    COMPLETED = "completed"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass
class UnitOutcome:
    """What one unit of work produced for one item id."""

    item_id: int
    status: UnitStatus
    item: Optional[Item] = None
    error: Optional[BaseException] = None

    @classmethod
    def completed(cls, item_id: int, item: Item) -> "UnitOutcome":
        return cls(item_id=item_id, status=UnitStatus.COMPLETED, item=item)

    @classmethod
    def absent(cls, item_id: int) -> "UnitOutcome":
        return cls(item_id=item_id, status=UnitStatus.ABSENT)

    @classmethod
    def failed(cls, item_id: int, error: BaseException) -> "UnitOutcome":
        return cls(item_id=item_id, status=UnitStatus.FAILED, error=error)


@dataclass
class ProcessingResult:
    """Result of one successful process-all run."""

    batch_id: str
    total_ids: int
    processed: int
    absent: int
    processing_time_seconds: float
    items: List[Item] = field(default_factory=list)
    timestamp: str = ""

    @classmethod
    def create(
        cls,
        batch_id: str,
        outcomes: List[UnitOutcome],
        processing_time: float,
    ) -> "ProcessingResult":
        """Factory method merging settled outcomes, keeping snapshot order."""
        items = [o.item for o in outcomes if o.status == UnitStatus.COMPLETED and o.item is not None]
        absent = sum(1 for o in outcomes if o.status == UnitStatus.ABSENT)

        return cls(
            batch_id=batch_id,
            total_ids=len(outcomes),
            processed=len(items),
            absent=absent,
            processing_time_seconds=round(processing_time, 2),
            items=items,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    def by_id(self) -> Dict[int, Item]:
        """Processed items keyed by id."""
        return {item.id: item for item in self.items if item.id is not None}
