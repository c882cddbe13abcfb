from tortoise import fields, models

from partshop.schemas.inventory import BikeSection, InventoryItem as InventoryItemSchema, VehicleType


class InventoryItem(models.Model):
    # Ids are opaque strings: the client may choose one (optimistic add) or the store assigns a uuid hex
    id = fields.CharField(pk=True, max_length=64)
    name = fields.CharField(max_length=255)
    vehicle_type = fields.CharEnumField(VehicleType, max_length=16)
    section = fields.CharEnumField(BikeSection, max_length=32)
    price = fields.FloatField(default=0)
    quantity = fields.IntField(default=0)
    description = fields.TextField(default="")
    min_stock_threshold = fields.IntField(default=3) # For low stock alert
    image = fields.CharField(max_length=1024, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "inventory_items"
        ordering = ["-created_at"]
        indexes = [
            ("vehicle_type",),             # Catalog is always browsed per vehicle type
            ("vehicle_type", "section"),   # Composite: diagram section filter
        ]

    def to_schema(self) -> InventoryItemSchema:
        return InventoryItemSchema(
            id=self.id,
            name=self.name,
            vehicle_type=self.vehicle_type,
            section=self.section,
            price=self.price,
            quantity=self.quantity,
            description=self.description,
            min_stock_threshold=self.min_stock_threshold,
            image=self.image,
        )
