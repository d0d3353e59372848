# File: app/schemas/__init__.py
from .inventory import (
    Item, ItemBase, ItemCreate, ItemUpdate, StockAdjustment,
    StockStatus, classify_stock_level
)

__all__ = [
    "Item", "ItemBase", "ItemCreate", "ItemUpdate", "StockAdjustment",
    "StockStatus", "classify_stock_level",
]
