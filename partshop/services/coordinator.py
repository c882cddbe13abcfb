"""
Optimistic Mutation Coordinator.

Owns the authoritative in-memory collection. Every mutation is applied locally
first (before the first await, so it is visible immediately), then sent to the
store. Store failures never propagate: they set `unreachable`, and only a failed
add is rolled back. A failed update, delete or buy stays applied locally.
"""
import logging
import time
from typing import Callable, List, Optional

from partshop.core.errors import StoreUnreachable
from partshop.schemas.inventory import InventoryItem, ItemDraft
from partshop.services.store import ItemStore

log = logging.getLogger(__name__)


def check_for_low_stock(item: InventoryItem) -> None:
    """Logs an alert when an item is at or below its threshold."""
    if item.is_out_of_stock:
        log.warning(f"ALERT: Item {item.id} '{item.name}' is out of stock.")
    elif item.is_low_stock:
        log.warning(
            f"ALERT: Low stock for item {item.id} '{item.name}'! "
            f"Qty: {item.quantity} (threshold {item.min_stock_threshold})"
        )


class InventoryCoordinator:
    def __init__(self, store: ItemStore, clock: Callable[[], float] = time.time):
        self.store = store
        self.items: List[InventoryItem] = []
        self.unreachable = False
        self.is_loading = False
        self.pending_delete_id: Optional[str] = None
        self._clock = clock
        self._last_provisional = 0

    # ----------- Queries -----------

    def get(self, item_id: str) -> Optional[InventoryItem]:
        return next((item for item in self.items if item.id == item_id), None)

    # ----------- Loading -----------

    async def reload(self) -> None:
        """Fetches the full collection and replaces local state."""
        self.is_loading = True
        self.unreachable = False
        try:
            self.items = await self.store.list_items()
            log.info(f"Loaded {len(self.items)} items from store.")
        except StoreUnreachable as e:
            log.error(f"Database Error: {e}")
            self.unreachable = True
        finally:
            self.is_loading = False

    # ----------- Mutations -----------

    def _provisional_id(self) -> str:
        """Millisecond timestamp, bumped when needed so it stays unique for the session."""
        candidate = max(int(self._clock() * 1000), self._last_provisional + 1)
        taken = {item.id for item in self.items}
        while str(candidate) in taken:
            candidate += 1
        self._last_provisional = candidate
        return str(candidate)

    async def add_item(self, draft: ItemDraft) -> InventoryItem:
        item = draft.with_id(self._provisional_id())
        self.items = [item, *self.items]

        try:
            await self.store.create_item(item)
            check_for_low_stock(item)
        except StoreUnreachable as e:
            log.error(f"Error adding item: {e}")
            self.unreachable = True
            # Revert: the provisional item must not stay visible
            self.items = [i for i in self.items if i.id != item.id]
        return item

    async def update_item(self, item: InventoryItem) -> None:
        """Full replace by id. Not rolled back on failure."""
        self.items = [item if i.id == item.id else i for i in self.items]

        try:
            await self.store.replace_item(item)
            check_for_low_stock(item)
        except StoreUnreachable as e:
            log.error(f"Error updating item: {e}")
            self.unreachable = True

    def request_delete(self, item_id: str) -> None:
        """First phase of a delete: only remembers which item awaits confirmation."""
        self.pending_delete_id = item_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self) -> None:
        item_id = self.pending_delete_id
        if item_id is None:
            return
        self.items = [i for i in self.items if i.id != item_id]
        self.pending_delete_id = None

        try:
            await self.store.delete_item(item_id)
        except StoreUnreachable as e:
            log.error(f"Error deleting item: {e}")
            self.unreachable = True

    async def buy_item(self, item_id: str) -> None:
        """Sells one unit. No-op (and no store call) for unknown or out-of-stock items."""
        current = self.get(item_id)
        if current is None or current.quantity <= 0:
            return

        updated = current.model_copy(update={"quantity": current.quantity - 1})
        self.items = [updated if i.id == item_id else i for i in self.items]

        try:
            await self.store.patch_item(item_id, {"quantity": updated.quantity})
            check_for_low_stock(updated)
        except StoreUnreachable as e:
            log.error(f"Error buying item: {e}")
            self.unreachable = True
