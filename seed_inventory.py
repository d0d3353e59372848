#!/usr/bin/env python3
"""
Load a starter set of laundry supplies into an empty inventory
"""
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from decimal import Decimal
from sqlalchemy.orm import Session
from app.db.database import SessionLocal
from app.schemas.inventory import ItemCreate
from app.services import inventory_service

SAMPLE_ITEMS = [
    {
        "name": "Liquid Detergent",
        "category": "Detergent",
        "quantity": 24,
        "unit": "bottles",
        "price_per_unit": Decimal("185.00"),
        "minimum_stock": 10,
        "supplier": "CleanCo Supplies",
        "description": "Concentrated, 2L per bottle",
    },
    {
        "name": "Bleach",
        "category": "Detergent",
        "quantity": 8,
        "unit": "liters",
        "price_per_unit": Decimal("65.50"),
        "minimum_stock": 5,
        "supplier": "CleanCo Supplies",
    },
    {
        "name": "Fabric Softener",
        "category": "Fabric Softener",
        "quantity": 3,
        "unit": "bottles",
        "price_per_unit": Decimal("150.00"),
        "minimum_stock": 6,
    },
    {
        "name": "Powder Detergent",
        "category": "Detergent",
        "quantity": 40,
        "unit": "kg",
        "minimum_stock": 15,
    },
    {
        "name": "Laundry Baskets",
        "category": "Equipment",
        "quantity": 12,
        "unit": "pieces",
        "description": "Plastic, 40L",
    },
    {
        "name": "Garment Bags",
        "category": "Supplies",
        "quantity": 200,
        "unit": "pieces",
        "minimum_stock": 50,
    },
]


def seed_inventory(db: Session) -> int:
    """Insert the sample items unless the inventory already has data. Returns the number inserted."""
    if inventory_service.get_all_items(db):
        print("Inventory already has items, skipping seed")
        return 0

    for data in SAMPLE_ITEMS:
        item = inventory_service.create_item(db, ItemCreate(**data))
        print(f"Added {item.name}: {item.quantity} {item.unit}")

    return len(SAMPLE_ITEMS)


if __name__ == "__main__":
    db = SessionLocal()
    try:
        count = seed_inventory(db)
        print(f"Seeded {count} items")
    finally:
        db.close()
