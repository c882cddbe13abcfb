import logging
from fastapi import APIRouter, HTTPException, status
from partshop.schemas.inventory import InventoryItem, ItemCreateRequest, ItemDraft, ItemPatch
from partshop.services.coordinator import check_for_low_stock
from partshop.services.item_service import (
    DuplicateItemId,
    ItemNotFound,
    create_item,
    delete_item,
    list_items,
    patch_item,
    replace_item,
)
from typing import Dict, List, Any

log = logging.getLogger("uvicorn")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()

# Responses use the stored document shape: camelCase aliases, no nulls
_WIRE = dict(response_model_by_alias=True, response_model_exclude_none=True)


@router.get("", response_model=List[InventoryItem], **_WIRE)
async def list_items_endpoint():
    """Returns the whole collection as a plain JSON array."""
    try:
        items = await list_items()
        return [item.to_schema() for item in items]
    except Exception as e:
        log.error(f"Error listing items: {e}")
        raise HTTPException(status_code=500, detail="Server failed to list items.")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InventoryItem, **_WIRE)
async def create_item_endpoint(payload: ItemCreateRequest):
    """
    Creates an item. When the body carries an id (the client's provisional id)
    the store keeps it, otherwise a new one is assigned.
    """
    try:
        item = await create_item(payload)
        log.info(f"Item {item.id} '{item.name}' created.")
        return item.to_schema()
    except DuplicateItemId as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        log.error(f"Error creating item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server failed to create item."
        )


@router.put("/{item_id}", response_model=InventoryItem, **_WIRE)
async def replace_item_endpoint(item_id: str, payload: ItemDraft):
    """Replaces every field of an existing item."""
    try:
        item = await replace_item(item_id, payload)
        return item.to_schema()
    except ItemNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        log.error(f"Error replacing item {item_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update item.")


@router.patch("/{item_id}", response_model=InventoryItem, **_WIRE)
async def patch_item_endpoint(item_id: str, payload: ItemPatch):
    """
    Updates only the fields present in the body (e.g. {"quantity": 4} after a sale).
    """
    try:
        item = await patch_item(item_id, payload)
        schema = item.to_schema()
        check_for_low_stock(schema)
        return schema
    except ItemNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        log.error(f"Error patching item {item_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update stock.")


@router.delete("/{item_id}")
async def delete_item_endpoint(item_id: str) -> Dict[str, Any]:
    try:
        await delete_item(item_id)
        log.info(f"Item {item_id} deleted.")
        return {}
    except ItemNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        log.error(f"Error deleting item {item_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete item.")
