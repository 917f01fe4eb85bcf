"""Batch processing module for the Items API.

Provides process-all orchestration over the item store.

Components:
- BatchProcessor: Main orchestrator
- ProcessingResult: Type-safe result model
- UnitOutcome / UnitStatus: Per-item outcome of one unit of work
- get_worker_pool / shutdown_worker_pool: Shared bounded worker pool
"""

from items_api.core.batch.models import ProcessingResult, UnitOutcome, UnitStatus
from items_api.core.batch.pool import get_worker_pool, shutdown_worker_pool
from items_api.core.batch.processor import BatchProcessor

__all__ = [
    "BatchProcessor",
    "ProcessingResult",
    "UnitOutcome",
    "UnitStatus",
    "get_worker_pool",
    "shutdown_worker_pool",
]
