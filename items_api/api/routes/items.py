"""Item routes for the Items API - CRUD plus bulk processing."""

import asyncio
from typing import List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from items_api.api.dependencies import get_item_service
from items_api.config import config
from items_api.core.errors import BatchProcessingError
from items_api.core.logging import logger
from items_api.core.service import ItemService
from items_api.models import ItemRequest, ItemResponse

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.get("", response_model=List[ItemResponse])
async def get_all_items(service: ItemService = Depends(get_item_service)):
    """List every stored item."""
    items = await asyncio.to_thread(service.find_all)
    return [ItemResponse.from_item(item) for item in items]


@router.get("/process", response_model=List[ItemResponse])
async def process_items(service: ItemService = Depends(get_item_service)):
    """Mark every stored item as PROCESSED and return the processed items.

    All-or-nothing: if any item fails, the response is a 500 with no items.
    The wait is bounded by BATCH_TIMEOUT_SECONDS.
    """
    timeout = config.batch_timeout_seconds()

    try:
        result = await asyncio.wait_for(service.process_all(), timeout=timeout)

    except asyncio.TimeoutError:
        logger.error("process_items_timeout", timeout_seconds=timeout)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": f"Batch processing did not finish within {timeout}s",
            },
        )

    except BatchProcessingError as e:
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": str(e),
                "batch_id": e.batch_id,
                "failed": len(e.failures),
            },
        )

    return [ItemResponse.from_item(item) for item in result.items]


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item_by_id(item_id: int, service: ItemService = Depends(get_item_service)):
    """Get one item; 404 if it does not exist."""
    item = await asyncio.to_thread(service.find_by_id, item_id)
    return ItemResponse.from_item(item)


@router.post("", response_model=ItemResponse, status_code=201)
async def create_item(
    request_data: ItemRequest, service: ItemService = Depends(get_item_service)
):
    """Create an item. The store assigns the id.

    - **name**: Item name (required, non-empty)
    - **email**: Optional, must look like local@domain
    """
    saved = await asyncio.to_thread(service.save, request_data.to_item())
    logger.info("item_created", item_id=saved.id)
    return ItemResponse.from_item(saved)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    request_data: ItemRequest,
    service: ItemService = Depends(get_item_service),
):
    """Replace an existing item; 404 if it does not exist."""
    await asyncio.to_thread(service.find_by_id, item_id)
    saved = await asyncio.to_thread(service.save, request_data.to_item(item_id))
    logger.info("item_updated", item_id=item_id)
    return ItemResponse.from_item(saved)


@router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: int, service: ItemService = Depends(get_item_service)):
    """Delete an existing item; 404 if it does not exist."""
    await asyncio.to_thread(service.find_by_id, item_id)
    await asyncio.to_thread(service.delete_by_id, item_id)
    logger.info("item_deleted", item_id=item_id)
    return Response(status_code=204)
