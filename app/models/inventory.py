# File: app/models/inventory.py
from sqlalchemy import Column, Integer, String, Text, Numeric, CheckConstraint
from app.models.base import BaseModel

# Upper bound of the INTEGER columns below
MAX_QUANTITY = 2**31 - 1


class InventoryItem(BaseModel):
    __tablename__ = "inventory_items"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_items_quantity_non_negative"),
    )

    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=False, index=True)  # e.g. 'Detergent', 'Equipment'
    quantity = Column(Integer, nullable=False, default=0)
    unit = Column(String(50), nullable=False)  # kg, bottles, liters, pieces
    price_per_unit = Column(Numeric(12, 2), nullable=True)
    minimum_stock = Column(Integer, nullable=True)  # reorder threshold, NULL disables low-stock alerts
    supplier = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<InventoryItem id={self.id} name={self.name!r} quantity={self.quantity}>"
