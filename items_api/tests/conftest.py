"""Shared fixtures for Items API tests."""

from concurrent.futures import ThreadPoolExecutor
from typing import List

import pytest

from items_api.infrastructure.database.models import Item


@pytest.fixture
def two_items() -> List[Item]:
    return [
        Item(id=1, name="Test Item", description="Description", status="NEW", email="test@email.com"),
        Item(id=2, name="Second Item", description="Description 2", status="NEW", email="test2@email.com"),
    ]


@pytest.fixture
def worker_pool():
    """Private 10-worker pool so tests do not touch the process-wide one."""
    pool = ThreadPoolExecutor(max_workers=10, thread_name_prefix="test-worker")
    yield pool
    pool.shutdown(wait=True)
