# File: app/services/inventory_service.py
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from app import crud
from app.core.exceptions import InsufficientStockError, ItemNotFoundError, StockLimitExceededError
from app.models.inventory import InventoryItem
from app.schemas.inventory import ItemCreate, ItemUpdate, StockStatus, classify_stock_level
import logging

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_all_items(db: Session) -> List[InventoryItem]:
    return crud.inventory_item.get_all(db)


def get_item(db: Session, item_id: int) -> Optional[InventoryItem]:
    return crud.inventory_item.get(db, item_id)


def create_item(db: Session, draft: ItemCreate) -> InventoryItem:
    """
    Persist a new item. The id comes from the database and both timestamps
    are set to the same instant; anything the caller sent for them is ignored.
    """
    now = utc_now()
    item = crud.inventory_item.create(db, obj_in=draft, created_at=now, updated_at=now)
    logger.info(f"Created inventory item {item.id} ({item.name}, qty={item.quantity} {item.unit})")
    return item


def update_item(db: Session, item_id: int, draft: ItemUpdate) -> InventoryItem:
    """
    Replace every mutable field of an item with the draft's values.

    Optional fields missing from the draft are written as null, so callers
    must send the complete record.
    """
    item = crud.inventory_item.get(db, item_id)
    if item is None:
        raise ItemNotFoundError(item_id)

    update_data = draft.model_dump()
    update_data["updated_at"] = utc_now()
    item = crud.inventory_item.update(db, db_obj=item, obj_in=update_data)
    logger.info(f"Updated inventory item {item_id}")
    return item


def delete_item(db: Session, item_id: int) -> None:
    item = crud.inventory_item.get(db, item_id)
    if item is None:
        raise ItemNotFoundError(item_id)

    crud.inventory_item.remove(db, id=item_id)
    logger.info(f"Deleted inventory item {item_id}")


def search_items(db: Session, query: str) -> List[InventoryItem]:
    return crud.inventory_item.search_by_name(db, fragment=query)


def get_items_by_category(db: Session, category: str) -> List[InventoryItem]:
    return crud.inventory_item.get_by_category(db, category=category)


def get_low_stock_items(db: Session) -> List[InventoryItem]:
    """Items with a threshold set whose quantity is at or below it."""
    return [
        item for item in crud.inventory_item.get_all(db)
        if item.minimum_stock is not None and item.quantity <= item.minimum_stock
    ]


def adjust_stock(db: Session, item_id: int, quantity_change: int) -> InventoryItem:
    """
    Apply a signed stock delta (positive = receipt, negative = consumption).

    The delta and the range check run as one statement, so concurrent
    adjustments cannot overwrite each other. A rejected change leaves the
    stored item as it was.
    """
    item = crud.inventory_item.apply_stock_delta(
        db, id=item_id, delta=quantity_change, updated_at=utc_now()
    )
    if item is not None:
        logger.info(f"Adjusted stock for item {item_id} by {quantity_change:+d}, now {item.quantity}")
        return item

    current = crud.inventory_item.get(db, item_id)
    if current is None:
        raise ItemNotFoundError(item_id)

    if current.quantity + quantity_change >= 0:
        logger.warning(f"Rejected stock change of {quantity_change:+d} for item {item_id}: over the quantity limit")
        raise StockLimitExceededError(item_id, current.quantity, quantity_change)

    logger.warning(
        f"Rejected stock change of {quantity_change:+d} for item {item_id}: only {current.quantity} on hand"
    )
    raise InsufficientStockError(item_id, current.quantity, quantity_change)


def stock_status(item: InventoryItem) -> StockStatus:
    return classify_stock_level(item.quantity, item.minimum_stock)
