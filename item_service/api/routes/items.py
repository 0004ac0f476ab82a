"""Item routes for the item service - CRUD plus batch processing."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from item_service.api.dependencies import get_batch_processor, get_item_repository
from item_service.core.batch import BatchProcessor
from item_service.core.exceptions import BatchProcessingError, ItemNotFoundError
from item_service.core.logging import logger
from item_service.infrastructure.database.repositories import ItemRepository
from item_service.models import ItemRequest

router = APIRouter(tags=["Items"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.get("/items")
async def list_items(repo: ItemRepository = Depends(get_item_repository)):
    """List all items."""
    try:
        items = repo.find_all()
    except Exception as e:
        logger.error("item_list_failed", error=str(e))
        return _error(500, f"Failed to list items: {str(e)}")

    logger.info("items_listed", count=len(items))
    return JSONResponse(content=[item.to_dict() for item in items])


@router.get("/items/process")
async def process_items(processor: BatchProcessor = Depends(get_batch_processor)):
    """Mark every item as PROCESSED and return the items that were saved.

    Waits for the whole batch. Items that fail to load or save are left out
    of the response and logged.

    - **200**: processed items
    - **204**: nothing was processed
    - **500**: the batch could not run (e.g. ids could not be listed)
    """
    try:
        result = await processor.run_batch()
    except BatchProcessingError as e:
        logger.error("process_items_failed", batch_id=e.batch_id, error=str(e))
        return _error(500, f"Batch processing failed: {str(e)}")

    if not result.items:
        logger.warning("no_items_processed", batch_id=result.batch_id, failed=result.failed)
        return Response(status_code=204)

    return JSONResponse(content=[item.to_dict() for item in result.items])


@router.post("/items")
async def create_item(
    item_data: ItemRequest,
    repo: ItemRepository = Depends(get_item_repository),
):
    """Create a new item.

    - **name**: Item name (required, max 50 characters)
    - **description**: Optional description (max 200 characters)
    - **status**: Status label (required)
    - **email**: Optional email address
    """
    try:
        saved = repo.save(item_data.to_item())
    except Exception as e:
        logger.error("item_create_failed", error=str(e))
        return _error(500, f"Failed to create item: {str(e)}")

    logger.info("item_created", item_id=saved.id)
    return JSONResponse(status_code=201, content=saved.to_dict())


@router.get("/items/{item_id}")
async def get_item(item_id: int, repo: ItemRepository = Depends(get_item_repository)):
    """Get a single item by ID."""
    try:
        item = repo.find_by_id(item_id)
    except Exception as e:
        logger.error("item_fetch_failed", item_id=item_id, error=str(e))
        return _error(500, f"Failed to fetch item: {str(e)}")

    if item is None:
        return _error(404, f"Item {item_id} not found")

    return JSONResponse(content=item.to_dict())


@router.put("/items/{item_id}")
async def update_item(
    item_id: int,
    item_data: ItemRequest,
    repo: ItemRepository = Depends(get_item_repository),
):
    """Replace an existing item. The path id is forced onto the payload."""
    try:
        if repo.find_by_id(item_id) is None:
            return _error(404, f"Item {item_id} not found")

        updated = repo.save(item_data.to_item(item_id=item_id))
    except Exception as e:
        logger.error("item_update_failed", item_id=item_id, error=str(e))
        return _error(500, f"Failed to update item: {str(e)}")

    logger.info("item_updated", item_id=item_id)
    return JSONResponse(content=updated.to_dict())


@router.delete("/items/{item_id}")
async def delete_item(item_id: int, repo: ItemRepository = Depends(get_item_repository)):
    """Delete an item."""
    try:
        if not repo.exists_by_id(item_id):
            raise ItemNotFoundError(item_id)

        repo.delete_by_id(item_id)
    except ItemNotFoundError as e:
        logger.warning("item_delete_not_found", item_id=item_id)
        return _error(404, str(e))
    except Exception as e:
        logger.error("item_delete_failed", item_id=item_id, error=str(e))
        return _error(500, f"Failed to delete item: {str(e)}")

    logger.info("item_deleted", item_id=item_id)
    return Response(status_code=204)
