from .base import BaseModel
from .inventory import InventoryItem

__all__ = ["BaseModel", "InventoryItem"]
