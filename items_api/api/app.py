"""FastAPI application factory for the Items API."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from items_api.api.middleware import request_id_middleware
from items_api.api.routes import items, system
from items_api.config import config
from items_api.core.batch import shutdown_worker_pool
from items_api.core.errors import ItemNotFoundError, PersistenceError
from items_api.core.logging import logger
from items_api.infrastructure.database.repositories import (
    InMemoryItemRepository,
    ItemRepository,
    ItemStore,
)


def default_item_store() -> ItemStore:
    """Supabase-backed store when configured, otherwise an in-memory one."""
    if config.is_configured():
        return ItemRepository()

    logger.warning(
        "item_store_in_memory",
        reason="Supabase not configured",
        missing=config.get_missing_config(),
    )
    return InMemoryItemRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Let in-flight units finish before the process exits.
    shutdown_worker_pool(wait=True)


async def item_not_found_handler(request: Request, exc: ItemNotFoundError):
    return JSONResponse(status_code=404, content={"success": False, "error": str(exc)})


async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.info("request_validation_failed", path=request.url.path, errors=messages)
    return JSONResponse(status_code=400, content={"success": False, "error": ", ".join(messages)})


def create_app(item_store: Optional[ItemStore] = None) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability."""
    app = FastAPI(
        title="items-api",
        description=(
            "CRUD API over items with a bulk endpoint that marks every item "
            "PROCESSED concurrently on a bounded worker pool."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)

    # Error mapping
    app.add_exception_handler(ItemNotFoundError, item_not_found_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    app.include_router(system.router)
    app.include_router(items.router)

    # Store item store for route access
    app.state.item_store = item_store if item_store is not None else default_item_store()

    return app
