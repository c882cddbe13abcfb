# partshop/models/__init__.py
from .inventory import InventoryItem

# Export all models
__all__ = [
    "InventoryItem",
]
