"""Health check endpoint handler for the Items API.

Provides /health payload with dependency testing.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from items_api.config import config
from items_api.infrastructure.database.repositories import ItemStore
from items_api.infrastructure.health.checks import check_item_store


async def get_health_status(store: ItemStore, service_name: str = "items-api") -> Dict[str, Any]:
    """Get comprehensive health status.

    Args:
        store: Item store to probe
        service_name: Service name for response

    Returns:
        Dict with overall status and dependency health
    """
    store_health = await check_item_store(store)
    overall_status = "healthy" if store_health.get("status") == "healthy" else "degraded"

    return {
        "status": overall_status,
        "service": service_name,
        "version": "1.0.0",
        "worker_pool": {"max_workers": config.batch_max_workers()},
        "dependencies": {"store": store_health},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
