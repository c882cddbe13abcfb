# partshop/scripts/seed_data.py
import asyncio
from partshop.core.db import init_db, close_db
from partshop.models.inventory import InventoryItem
from partshop.schemas.inventory import BikeSection, VehicleType

STARTER_CATALOG = [
    # (id, name, vehicle type, section, price, quantity, threshold, description)
    ("seed-1", "Tire 26x1.95", VehicleType.BICYCLE, BikeSection.WHEELS, 15000, 12, 4, "Mountain bike tire"),
    ("seed-2", "Brake Lever Set", VehicleType.BICYCLE, BikeSection.COCKPIT, 8000, 3, 3, ""),
    ("seed-3", "Chain 116L", VehicleType.BICYCLE, BikeSection.DRIVETRAIN, 6500, 0, 2, "8-speed chain"),
    ("seed-4", "Saddle Comfort", VehicleType.BICYCLE, BikeSection.FRAME, 12000, 5, 2, ""),
    ("seed-5", "LED Headlight", VehicleType.BICYCLE, BikeSection.ACCESSORIES, 9500, 8, 3, "USB rechargeable"),
    ("seed-6", "Spark Plug", VehicleType.MOTORBIKE, BikeSection.DRIVETRAIN, 4000, 20, 5, ""),
    ("seed-7", "Rear Tire 2.75-17", VehicleType.MOTORBIKE, BikeSection.WHEELS, 35000, 2, 3, ""),
    ("seed-8", "Side Mirror", VehicleType.MOTORBIKE, BikeSection.COCKPIT, 7000, 6, 2, "Pair"),
]

async def seed():
    for item_id, name, vehicle_type, section, price, qty, threshold, description in STARTER_CATALOG:
        item, created = await InventoryItem.get_or_create(
            id=item_id,
            defaults={
                "name": name,
                "vehicle_type": vehicle_type,
                "section": section,
                "price": price,
                "quantity": qty,
                "min_stock_threshold": threshold,
                "description": description,
            },
        )
        print(f"{'Created' if created else 'Kept'}: {item.id} {item.name} (qty {item.quantity})")

    print("Inventory seeded.")

async def main():
    await init_db()
    await seed()
    await close_db()

if __name__ == "__main__":
    asyncio.run(main())
