from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class VehicleType(str, Enum):
    BICYCLE = "bicycle"
    MOTORBIKE = "motorbike"


class BikeSection(str, Enum):
    COCKPIT = "Cockpit"          # Handlebars, Stem, Brakes, Shifters
    FRAME = "Frame"              # Frame, Saddle, Seatpost, Fork
    DRIVETRAIN = "Drivetrain"    # Chain, Pedals, Derailleur, Crankset, Engine
    WHEELS = "Wheels"            # Tires, Rims, Spokes, Hubs
    ACCESSORIES = "Accessories"  # Lights, Locks, etc.


# Shop-floor labels shown next to each part category
SECTION_LABELS: Dict[BikeSection, str] = {
    BikeSection.WHEELS: "ဘီးများ",
    BikeSection.FRAME: "ကိုယ်ထည်",
    BikeSection.DRIVETRAIN: "အင်ဂျင်/မောင်းနှင်",
    BikeSection.COCKPIT: "လက်ကိုင်",
    BikeSection.ACCESSORIES: "အပိုပစ္စည်း",
}

DEFAULT_MIN_STOCK_THRESHOLD = 3


class ItemDraft(BaseModel):
    """An inventory item before the store has given it an identity (add flow)."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Part name (e.g., Tire 26x1.95).")
    vehicle_type: VehicleType = Field(..., alias="type", description="Vehicle the part fits.")
    section: BikeSection = Field(..., description="Part category on the vehicle diagram.")
    price: float = Field(..., ge=0, description="Unit selling price.")
    quantity: int = Field(..., ge=0, description="Units in stock.")
    description: str = Field("", description="Free text, may be empty.")
    min_stock_threshold: int = Field(
        DEFAULT_MIN_STOCK_THRESHOLD, ge=0, alias="minStockThreshold",
        description="At or below this quantity (and above zero) the item is low stock.",
    )
    image: Optional[str] = Field(None, description="Optional image URL.")

    def to_wire(self) -> Dict:
        """JSON document as stored on the remote /items resource."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def with_id(self, item_id: str) -> "InventoryItem":
        return InventoryItem(id=item_id, **self.model_dump())


class InventoryItem(ItemDraft):
    """The sole persistent entity."""
    id: str = Field(..., min_length=1, description="Unique identifier within the collection.")

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0

    @property
    def is_low_stock(self) -> bool:
        return 0 < self.quantity <= self.min_stock_threshold


class ItemPatch(BaseModel):
    """Sparse set of fields for a partial update. Only the fields explicitly set are sent."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    vehicle_type: Optional[VehicleType] = Field(None, alias="type")
    section: Optional[BikeSection] = None
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    min_stock_threshold: Optional[int] = Field(None, ge=0, alias="minStockThreshold")
    image: Optional[str] = None

    @field_validator(
        "name", "vehicle_type", "section", "price", "quantity", "description", "min_stock_threshold"
    )
    @classmethod
    def not_null(cls, value):
        # Only image may be cleared; every other column is non-nullable
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value

    def changes(self) -> Dict:
        """Python-named fields that were explicitly provided."""
        return self.model_dump(exclude_unset=True)


class ItemCreateRequest(ItemDraft):
    """POST body: a draft, optionally carrying a client-chosen id."""
    id: Optional[str] = Field(None, min_length=1)
