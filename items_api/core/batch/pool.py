"""Process-wide worker pool for bulk item processing.

One fixed-size ThreadPoolExecutor is shared by every process-all call for the
lifetime of the process, so concurrency stays bounded no matter how many ids
a batch holds.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from items_api.config import config
from items_api.core.logging import logger

_pool_lock = threading.Lock()
_pool: Optional[ThreadPoolExecutor] = None


def get_worker_pool() -> ThreadPoolExecutor:
    """Get the shared worker pool, creating it on first use."""
    global _pool
    if _pool is None:
        with _pool_lock:
            if _pool is None:
                max_workers = config.batch_max_workers()
                _pool = ThreadPoolExecutor(
                    max_workers=max_workers, thread_name_prefix="item-worker"
                )
                logger.info("worker_pool_started", max_workers=max_workers)
    return _pool


def shutdown_worker_pool(wait: bool = True) -> None:
    """Shut the shared pool down; in-flight units are allowed to finish.

    A later get_worker_pool() call starts a fresh pool.
    """
    global _pool
    with _pool_lock:
        pool, _pool = _pool, None

    if pool is not None:
        pool.shutdown(wait=wait)
        logger.info("worker_pool_stopped", waited=wait)
