"""
Item store persisted to a local JSON file.

Same contract as HttpItemStore, for running the shop on a single machine with
no backend process. File errors surface as StoreUnreachable.
"""
import json
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from partshop.core.errors import StoreUnreachable
from partshop.schemas.inventory import InventoryItem, ItemDraft


class LocalItemStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self, operation: str) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            docs = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            # ValueError covers both bad JSON and bytes that are not UTF-8
            raise StoreUnreachable(operation, f"cannot read {self.path}: {e}") from e
        if not isinstance(docs, list) or not all(isinstance(doc, dict) for doc in docs):
            raise StoreUnreachable(operation, f"{self.path} does not hold a list of items")
        return docs

    def _save(self, operation: str, docs: List[Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(docs, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreUnreachable(operation, f"cannot write {self.path}: {e}") from e

    @staticmethod
    def _index(docs: List[Dict[str, Any]], item_id: str) -> Optional[int]:
        for i, doc in enumerate(docs):
            if doc.get("id") == item_id:
                return i
        return None

    async def list_items(self) -> List[InventoryItem]:
        docs = self._load("list")
        try:
            return [InventoryItem.model_validate(doc) for doc in docs]
        except ValidationError as e:
            raise StoreUnreachable("list", f"corrupt item in {self.path}: {e}") from e

    async def create_item(self, item: ItemDraft) -> Dict[str, Any]:
        docs = self._load("create")
        doc = item.to_wire()
        doc.setdefault("id", uuid.uuid4().hex)
        if self._index(docs, doc["id"]) is not None:
            raise StoreUnreachable("create", f"item {doc['id']} already exists")
        docs.insert(0, doc)
        self._save("create", docs)
        return doc

    async def replace_item(self, item: InventoryItem) -> Dict[str, Any]:
        docs = self._load("replace")
        idx = self._index(docs, item.id)
        if idx is None:
            raise StoreUnreachable("replace", f"item {item.id} not found")
        docs[idx] = item.to_wire()
        self._save("replace", docs)
        return docs[idx]

    async def patch_item(self, item_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        docs = self._load("patch")
        idx = self._index(docs, item_id)
        if idx is None:
            raise StoreUnreachable("patch", f"item {item_id} not found")
        docs[idx] = {**docs[idx], **fields, "id": item_id}
        self._save("patch", docs)
        return docs[idx]

    async def delete_item(self, item_id: str) -> None:
        docs = self._load("delete")
        idx = self._index(docs, item_id)
        if idx is None:
            raise StoreUnreachable("delete", f"item {item_id} not found")
        del docs[idx]
        self._save("delete", docs)
