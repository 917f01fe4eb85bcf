"""Error taxonomy for the Items API.

Separates benign absences (an id that no longer resolves) from failures that
must fail a whole bulk-processing call.
"""

import asyncio
import concurrent.futures
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ItemNotFoundError(Exception):
    """Raised when an item id does not resolve to a stored item."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item not found with id: {item_id}")


class PersistenceError(Exception):
    """Raised when the item store rejects a read or a write."""

    def __init__(self, operation: str, message: str, item_id: Optional[int] = None):
        self.operation = operation
        self.item_id = item_id
        target = f" (id={item_id})" if item_id is not None else ""
        super().__init__(f"Store {operation} failed{target}: {message}")


class FailureKind(str, Enum):
    """Failure categories for a single unit of work.

    - CANCELLED: the unit's wait was interrupted or its future was cancelled
    - PERSISTENCE: the store rejected the unit's read or write
    - UNEXPECTED: anything else raised inside the unit
    """

    CANCELLED = "cancelled"
    PERSISTENCE = "persistence"
    UNEXPECTED = "unexpected"


def classify_failure(error: BaseException) -> FailureKind:
    """Map an exception raised by a unit of work onto a FailureKind."""
    if isinstance(error, (asyncio.CancelledError, concurrent.futures.CancelledError)):
        return FailureKind.CANCELLED
    if isinstance(error, PersistenceError):
        return FailureKind.PERSISTENCE
    return FailureKind.UNEXPECTED


@dataclass
class UnitFailure:
    """One failed unit of work inside a batch."""

    item_id: int
    kind: FailureKind
    error: BaseException

    def describe(self) -> str:
        detail = str(self.error) or type(self.error).__name__
        return f"item {self.item_id} [{self.kind.value}]: {detail}"


class BatchProcessingError(Exception):
    """Aggregate failure of a bulk-processing call.

    Carries every unit failure observed once the whole batch settled.
    """

    def __init__(self, batch_id: str, failures: List[UnitFailure]):
        self.batch_id = batch_id
        self.failures = failures
        first = failures[0].describe() if failures else "no failures recorded"
        super().__init__(
            f"Batch {batch_id} failed: {len(failures)} unit(s) failed; first: {first}"
        )
