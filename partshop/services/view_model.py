from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from partshop.schemas.inventory import BikeSection, InventoryItem, VehicleType


@dataclass(frozen=True)
class InventoryView:
    """What the catalog screen shows for the active filters."""
    filtered_items: List[InventoryItem] = field(default_factory=list)
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    total_value: float = 0
    total_quantity: int = 0


def matches_search(item: InventoryItem, search_query: str) -> bool:
    query = search_query.lower()
    return query in item.name.lower() or query in item.description.lower()


def derive_view(
    items: Sequence[InventoryItem],
    vehicle_type: VehicleType,
    selected_section: Optional[BikeSection] = None,
    search_query: str = "",
) -> InventoryView:
    """
    Pure function of the collection and the active filters.

    The counters and totals cover every item of the active vehicle type; the
    section and search filters only narrow `filtered_items`.
    """
    of_type = [item for item in items if item.vehicle_type == vehicle_type]

    filtered = [
        item for item in of_type
        if (selected_section is None or item.section == selected_section)
        and matches_search(item, search_query)
    ]

    return InventoryView(
        filtered_items=filtered,
        low_stock_count=sum(1 for item in of_type if item.is_low_stock),
        out_of_stock_count=sum(1 for item in of_type if item.is_out_of_stock),
        total_value=sum(item.price * item.quantity for item in of_type),
        total_quantity=sum(item.quantity for item in of_type),
    )
