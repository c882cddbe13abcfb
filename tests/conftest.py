import pytest
import pytest_asyncio

from partshop.core.db import close_db, init_db
from partshop.schemas.inventory import BikeSection, InventoryItem, VehicleType


def make_item(item_id="1", name="Tire", quantity=5, threshold=3, price=1000.0,
              vehicle_type=VehicleType.BICYCLE, section=BikeSection.WHEELS, description=""):
    """Builds an InventoryItem with sensible defaults for tests."""
    return InventoryItem(
        id=item_id,
        name=name,
        vehicle_type=vehicle_type,
        section=section,
        price=price,
        quantity=quantity,
        description=description,
        min_stock_threshold=threshold,
    )


@pytest.fixture
def item_factory():
    return make_item


@pytest_asyncio.fixture
async def db(tmp_path):
    """Tortoise on a throwaway sqlite file, one per test."""
    await init_db(f"sqlite://{tmp_path / 'partshop-test.sqlite3'}")
    yield
    await close_db()
