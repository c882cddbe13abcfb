"""Add/edit form state: numeric fields are held as Burmese-digit strings."""
from dataclasses import dataclass, replace

from partshop.core.numerals import decode, decode_int, encode
from partshop.schemas.assistant import AIAnalysisResponse
from partshop.schemas.inventory import (
    DEFAULT_MIN_STOCK_THRESHOLD,
    BikeSection,
    InventoryItem,
    ItemDraft,
    VehicleType,
)
from partshop.services.assistant import apply_suggestion


@dataclass
class ItemForm:
    name: str = ""
    vehicle_type: VehicleType = VehicleType.BICYCLE
    section: BikeSection = BikeSection.ACCESSORIES
    price: str = ""
    quantity: str = ""
    description: str = ""
    min_stock_threshold: str = encode(DEFAULT_MIN_STOCK_THRESHOLD)

    @classmethod
    def blank(cls) -> "ItemForm":
        return cls()

    @classmethod
    def from_item(cls, item: InventoryItem) -> "ItemForm":
        """Pre-fills the edit form, showing existing numbers in Burmese digits."""
        return cls(
            name=item.name,
            vehicle_type=item.vehicle_type,
            section=item.section,
            price=encode(item.price),
            quantity=encode(item.quantity),
            description=item.description or "",
            min_stock_threshold=encode(item.min_stock_threshold),
        )

    def with_suggestion(self, result: AIAnalysisResponse) -> "ItemForm":
        return replace(self, description=apply_suggestion(result))

    def to_draft(self) -> ItemDraft:
        # Unparseable numbers become 0 rather than a validation error
        return ItemDraft(
            name=self.name,
            vehicle_type=self.vehicle_type,
            section=self.section,
            price=decode(self.price),
            quantity=decode_int(self.quantity),
            description=self.description,
            min_stock_threshold=decode_int(self.min_stock_threshold),
        )

    def to_item(self, item_id: str) -> InventoryItem:
        return self.to_draft().with_id(item_id)
