"""Health check functions for the Items API.

Tests connectivity to the item store.
"""

import asyncio
from typing import Any, Dict

from items_api.infrastructure.database.repositories import ItemStore


async def check_item_store(store: ItemStore, timeout: float = 2.0) -> Dict[str, Any]:
    """Test item store connectivity with a minimal query.

    Returns:
        Dict with status ("healthy", "timeout", "unavailable"), the backend
        name and optional error message
    """
    backend = store.backend

    try:
        ids = await asyncio.wait_for(asyncio.to_thread(store.list_all_ids), timeout=timeout)
        return {"status": "healthy", "backend": backend, "items": len(ids)}

    except asyncio.TimeoutError:
        return {"status": "timeout", "backend": backend, "error": f"Request timed out after {timeout}s"}

    except Exception as e:
        return {"status": "unavailable", "backend": backend, "error": str(e)[:100]}
