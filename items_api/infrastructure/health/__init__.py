"""Health monitoring module for the Items API.

Provides health check payloads and dependency testing.
"""

from items_api.infrastructure.health.checks import check_item_store
from items_api.infrastructure.health.endpoints import get_health_status

__all__ = [
    "check_item_store",
    "get_health_status",
]
