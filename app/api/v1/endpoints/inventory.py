# File: app/api/v1/endpoints/inventory.py
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.core.exceptions import ErrorKind, InventoryError
from app.db.database import get_db
from app.schemas.inventory import Item, ItemCreate, ItemUpdate, StockAdjustment
from app.services import inventory_service

router = APIRouter()

MUTATION_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_OPERATION: status.HTTP_400_BAD_REQUEST,
}
# PATCH /{item_id}/stock answers 400 for a missing item too
STOCK_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_OPERATION: status.HTTP_400_BAD_REQUEST,
}


# Fixed details, ids and quantities stay out of response bodies
ERROR_DETAIL: Dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "Item not found",
    ErrorKind.INVALID_OPERATION: "Invalid operation",
}


def to_http_error(error: InventoryError, status_by_kind: Dict[ErrorKind, int]) -> HTTPException:
    return HTTPException(status_code=status_by_kind[error.kind], detail=ERROR_DETAIL[error.kind])


@router.get("", response_model=List[Item], operation_id="get_inventory_items")
def get_items(db: Session = Depends(get_db)) -> Any:
    """Get all inventory items"""
    return inventory_service.get_all_items(db)


@router.post(
    "",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    operation_id="create_inventory_item",
)
def create_item(*, db: Session = Depends(get_db), item_in: ItemCreate) -> Any:
    """Create new inventory item"""
    return inventory_service.create_item(db, item_in)


# Fixed paths are declared before /{item_id} so they are not parsed as ids
@router.get("/search", response_model=List[Item], operation_id="search_inventory_items")
def search_items(query: str, db: Session = Depends(get_db)) -> Any:
    """Case-insensitive search on item name"""
    return inventory_service.search_items(db, query)


@router.get("/category/{category}", response_model=List[Item], operation_id="get_inventory_items_by_category")
def get_items_by_category(category: str, db: Session = Depends(get_db)) -> Any:
    return inventory_service.get_items_by_category(db, category)


@router.get("/low-stock", response_model=List[Item], operation_id="get_low_stock_items")
def get_low_stock_items(db: Session = Depends(get_db)) -> Any:
    """Items at or below their minimum stock"""
    return inventory_service.get_low_stock_items(db)


@router.get("/{item_id}", response_model=Item, operation_id="get_inventory_item")
def get_item(item_id: int, db: Session = Depends(get_db)) -> Any:
    item = inventory_service.get_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.put("/{item_id}", response_model=Item, operation_id="update_inventory_item")
def update_item(*, db: Session = Depends(get_db), item_id: int, item_in: ItemUpdate) -> Any:
    """Replace an inventory item (all mutable fields)"""
    try:
        return inventory_service.update_item(db, item_id, item_in)
    except InventoryError as e:
        raise to_http_error(e, MUTATION_STATUS)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    operation_id="delete_inventory_item",
)
def delete_item(*, db: Session = Depends(get_db), item_id: int) -> Response:
    """Delete inventory item"""
    try:
        inventory_service.delete_item(db, item_id)
    except InventoryError as e:
        raise to_http_error(e, MUTATION_STATUS)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{item_id}/stock", response_model=Item, operation_id="adjust_inventory_stock")
def adjust_stock(*, db: Session = Depends(get_db), item_id: int, adjustment: StockAdjustment) -> Any:
    """Add (positive) or consume (negative) stock"""
    try:
        return inventory_service.adjust_stock(db, item_id, adjustment.quantity_change)
    except InventoryError as e:
        raise to_http_error(e, STOCK_STATUS)
