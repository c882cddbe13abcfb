"""
Item Store Client.

A thin request layer over the remote /items collection. One attempt per call,
no retries: every transport error or non-2xx status is raised as
StoreUnreachable and handled by the coordinator.
"""
import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from pydantic import ValidationError

from partshop.core import config
from partshop.core.errors import StoreUnreachable
from partshop.schemas.inventory import InventoryItem, ItemDraft

log = logging.getLogger(__name__)


class ItemStore(Protocol):
    """Contract shared by the remote and the local store implementations."""

    async def list_items(self) -> List[InventoryItem]: ...

    async def create_item(self, item: ItemDraft) -> Optional[Dict[str, Any]]: ...

    async def replace_item(self, item: InventoryItem) -> Optional[Dict[str, Any]]: ...

    async def patch_item(self, item_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    async def delete_item(self, item_id: str) -> None: ...


class HttpItemStore:
    """Talks to a REST-like collection endpoint at {base_url}/items."""

    def __init__(
        self,
        base_url: str = config.STORE_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        # No timeout: a hung request resolves only when the transport itself gives up
        self._client = client or httpx.AsyncClient(transport=transport, timeout=None)

    def _url(self, item_id: Optional[str] = None) -> str:
        url = f"{self.base_url}/items"
        return f"{url}/{item_id}" if item_id is not None else url

    async def _request(self, operation: str, method: str, url: str, json: Any = None) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise StoreUnreachable(operation, str(e) or type(e).__name__) from e
        if not resp.is_success:
            raise StoreUnreachable(operation, f"HTTP {resp.status_code}")
        return resp

    @staticmethod
    def _body(resp: httpx.Response) -> Optional[Dict[str, Any]]:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None

    async def list_items(self) -> List[InventoryItem]:
        resp = await self._request("list", "GET", self._url())
        try:
            return [InventoryItem.model_validate(doc) for doc in resp.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise StoreUnreachable("list", f"unexpected payload: {e}") from e

    async def create_item(self, item: ItemDraft) -> Optional[Dict[str, Any]]:
        resp = await self._request("create", "POST", self._url(), json=item.to_wire())
        return self._body(resp)

    async def replace_item(self, item: InventoryItem) -> Optional[Dict[str, Any]]:
        resp = await self._request("replace", "PUT", self._url(item.id), json=item.to_wire())
        return self._body(resp)

    async def patch_item(self, item_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        resp = await self._request("patch", "PATCH", self._url(item_id), json=fields)
        return self._body(resp)

    async def delete_item(self, item_id: str) -> None:
        await self._request("delete", "DELETE", self._url(item_id))

    async def aclose(self) -> None:
        await self._client.aclose()


def build_store(backend: str = config.STORE_BACKEND) -> ItemStore:
    """Picks the store implementation configured by STORE_BACKEND."""
    if backend == "local":
        from partshop.services.local_store import LocalItemStore
        return LocalItemStore(config.LOCAL_STORE_PATH)
    if backend == "http":
        return HttpItemStore(config.STORE_BASE_URL)
    raise ValueError(f"Unknown STORE_BACKEND '{backend}'. Expected 'http' or 'local'.")
