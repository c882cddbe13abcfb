"""Server-side persistence of the /items collection on top of Tortoise ORM."""
import uuid
from typing import Dict, List, Optional

from tortoise.transactions import in_transaction

from partshop.models.inventory import InventoryItem
from partshop.schemas.inventory import ItemCreateRequest, ItemDraft, ItemPatch


class ItemNotFound(ValueError):
    pass


class DuplicateItemId(ValueError):
    pass


async def list_items() -> List[InventoryItem]:
    """Returns the whole collection, newest first."""
    return await InventoryItem.all()


async def get_item(item_id: str) -> Optional[InventoryItem]:
    return await InventoryItem.get_or_none(id=item_id)


async def create_item(payload: ItemCreateRequest) -> InventoryItem:
    """
    Stores a new item. A client-chosen id (the provisional id of an optimistic add)
    is kept as-is so the echoed document matches what the client already shows.
    """
    item_id = payload.id or uuid.uuid4().hex
    fields = payload.model_dump(exclude={"id"})

    async with in_transaction() as conn:
        if await InventoryItem.filter(id=item_id).using_db(conn).exists():
            raise DuplicateItemId(f"Item {item_id} already exists.")
        return await InventoryItem.create(id=item_id, using_db=conn, **fields)


async def replace_item(item_id: str, payload: ItemDraft) -> InventoryItem:
    """Full replace: every field is overwritten, the id in the path wins."""
    async with in_transaction() as conn:
        item = await InventoryItem.get_or_none(id=item_id).using_db(conn)
        if not item:
            raise ItemNotFound(f"Item {item_id} not found.")

        fields = payload.model_dump(exclude={"id"})
        item.update_from_dict(fields)
        await item.save(using_db=conn)
    return item


async def patch_item(item_id: str, payload: ItemPatch) -> InventoryItem:
    """Partial update: only the fields present in the request body change."""
    changes: Dict = payload.changes()
    async with in_transaction() as conn:
        item = await InventoryItem.get_or_none(id=item_id).using_db(conn)
        if not item:
            raise ItemNotFound(f"Item {item_id} not found.")

        if changes:
            item.update_from_dict(changes)
            await item.save(update_fields=[*changes.keys(), "updated_at"], using_db=conn)
    return item


async def delete_item(item_id: str) -> None:
    deleted = await InventoryItem.filter(id=item_id).delete()
    if not deleted:
        raise ItemNotFound(f"Item {item_id} not found.")
