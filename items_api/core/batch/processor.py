"""Batch processor for the Items API.

Marks every stored item as PROCESSED, one unit of work per item id, on the
shared worker pool.
"""

import asyncio
import secrets
import time
from concurrent.futures import Executor
from typing import List, Optional, Union

from items_api.config import config
from items_api.core.batch.models import ProcessingResult, UnitOutcome, UnitStatus
from items_api.core.batch.pool import get_worker_pool
from items_api.core.errors import BatchProcessingError, UnitFailure, classify_failure
from items_api.core.logging import logger
from items_api.infrastructure.database.models import PROCESSED_STATUS
from items_api.infrastructure.database.repositories.base import ItemStore


class BatchProcessor:
    """Orchestrates process-all runs over an item store.

    Each unit of work owns exactly one item id and returns its own
    UnitOutcome. Outcomes are merged in one place, after every unit has
    settled, so no collection or counter is shared between workers.
    The run is all-or-nothing: any failed unit fails the whole call.
    """

    def __init__(
        self,
        store: ItemStore,
        pool: Optional[Executor] = None,
        processing_delay: Optional[float] = None,
    ):
        """Initialize batch processor.

        Args:
            store: ItemStore to read ids and items from and write results to
            pool: Executor to run units on (defaults to the shared worker pool)
            processing_delay: Seconds of simulated work per unit
                (defaults to ITEM_PROCESSING_DELAY_SECONDS)
        """
        self.store = store
        self._pool = pool
        if processing_delay is None:
            processing_delay = config.item_processing_delay_seconds()
        self.processing_delay = processing_delay

    @property
    def pool(self) -> Executor:
        return self._pool or get_worker_pool()

    async def process_all(self, batch_id: Optional[str] = None) -> ProcessingResult:
        """Process every item known to the store at call time.

        Args:
            batch_id: Optional batch ID (generated if not provided)

        Returns:
            ProcessingResult holding every processed item, in id-snapshot order

        Raises:
            BatchProcessingError: If any unit of work failed
            PersistenceError: If the id snapshot could not be read
        """
        if batch_id is None:
            batch_id = f"batch_{int(time.time() * 1000)}_{secrets.token_urlsafe(8)}"

        start_time = time.time()
        loop = asyncio.get_running_loop()
        pool = self.pool

        item_ids: List[int] = await asyncio.to_thread(self.store.list_all_ids)

        logger.info("batch_processing_started", batch_id=batch_id, total_ids=len(item_ids))

        futures = [loop.run_in_executor(pool, self._process_one, item_id) for item_id in item_ids]

        # Barrier: resolves only once every unit has completed or failed.
        # Shielded so cancelling the caller leaves queued units to run.
        try:
            settled = await asyncio.shield(asyncio.gather(*futures, return_exceptions=True))
        except asyncio.CancelledError:
            logger.warning(
                "batch_processing_cancelled",
                batch_id=batch_id,
                pending=sum(1 for f in futures if not f.done()),
            )
            raise

        outcomes = [
            self._to_outcome(batch_id, item_id, raw) for item_id, raw in zip(item_ids, settled)
        ]

        failures = [
            UnitFailure(item_id=o.item_id, kind=classify_failure(o.error), error=o.error)
            for o in outcomes
            if o.status == UnitStatus.FAILED and o.error is not None
        ]
        if failures:
            logger.error(
                "batch_processing_failed",
                batch_id=batch_id,
                total_ids=len(item_ids),
                failed=len(failures),
                kinds=sorted({f.kind.value for f in failures}),
            )
            raise BatchProcessingError(batch_id, failures)

        result = ProcessingResult.create(
            batch_id=batch_id,
            outcomes=outcomes,
            processing_time=time.time() - start_time,
        )

        logger.info(
            "batch_processing_completed",
            batch_id=batch_id,
            processed=result.processed,
            absent=result.absent,
            processing_time=result.processing_time_seconds,
        )
        return result

    def _process_one(self, item_id: int) -> UnitOutcome:
        """Unit of work: load, mark PROCESSED, persist. Runs on a pool thread."""
        if self.processing_delay > 0:
            time.sleep(self.processing_delay)

        item = self.store.get(item_id)
        if item is None:
            return UnitOutcome.absent(item_id)

        item.status = PROCESSED_STATUS
        saved = self.store.put(item)
        return UnitOutcome.completed(item_id, saved)

    def _to_outcome(
        self, batch_id: str, item_id: int, raw: Union[UnitOutcome, BaseException]
    ) -> UnitOutcome:
        if isinstance(raw, BaseException):
            logger.warning(
                "item_unit_failed",
                batch_id=batch_id,
                item_id=item_id,
                kind=classify_failure(raw).value,
                error=str(raw) or type(raw).__name__,
            )
            return UnitOutcome.failed(item_id, raw)

        if raw.status == UnitStatus.ABSENT:
            logger.debug("item_unit_absent", batch_id=batch_id, item_id=item_id)
        return raw
