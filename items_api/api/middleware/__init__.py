"""Middleware for the Items API."""

from items_api.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
