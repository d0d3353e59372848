# File: app/crud/inventory.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.inventory import InventoryItem, MAX_QUANTITY
from app.schemas.inventory import ItemCreate, ItemUpdate


class CRUDInventoryItem(CRUDBase[InventoryItem, ItemCreate, ItemUpdate]):
    def get_by_category(self, db: Session, *, category: str) -> List[InventoryItem]:
        # Exact, case-sensitive match
        return (
            db.query(self.model)
            .filter(self.model.category == category)
            .order_by(self.model.id)
            .all()
        )

    def search_by_name(self, db: Session, *, fragment: str) -> List[InventoryItem]:
        return (
            db.query(self.model)
            .filter(self.model.name.icontains(fragment, autoescape=True))
            .order_by(self.model.id)
            .all()
        )

    def get_by_quantity_at_most(self, db: Session, *, quantity: int) -> List[InventoryItem]:
        return (
            db.query(self.model)
            .filter(self.model.quantity <= quantity)
            .order_by(self.model.id)
            .all()
        )

    def apply_stock_delta(
        self, db: Session, *, id: int, delta: int, updated_at: datetime
    ) -> Optional[InventoryItem]:
        """
        Add ``delta`` to the item's quantity in a single conditional UPDATE.

        Returns the refreshed item, or None when no row matched: either the id
        does not exist or the result would fall outside 0..MAX_QUANTITY. The
        stored row is untouched in the second case.
        """
        stmt = (
            update(self.model)
            # Bounds are computed in Python so the comparison itself cannot overflow
            .where(
                self.model.id == id,
                self.model.quantity >= -delta,
                self.model.quantity <= MAX_QUANTITY - delta,
            )
            .values(quantity=self.model.quantity + delta, updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        result = db.execute(stmt)
        db.commit()

        if result.rowcount == 0:
            return None

        item = db.get(self.model, id)
        db.refresh(item)
        return item


inventory_item = CRUDInventoryItem(InventoryItem)
