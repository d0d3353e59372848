# File: app/core/exceptions.py
"""Domain errors raised by the inventory service layer."""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_OPERATION = "invalid_operation"


class InventoryError(Exception):
    """Base class for inventory failures. ``kind`` tells the API layer how to respond."""

    kind: ErrorKind = ErrorKind.INVALID_OPERATION

    def __init__(self, message: str = "Inventory operation failed") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ItemNotFoundError(InventoryError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item not found with id: {item_id}")
        self.item_id = item_id


class InsufficientStockError(InventoryError):
    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, item_id: int, available: int, requested_change: int) -> None:
        super().__init__(
            f"Insufficient stock for item {item_id}: "
            f"have {available}, change of {requested_change} would go below zero"
        )
        self.item_id = item_id
        self.available = available
        self.requested_change = requested_change


class StockLimitExceededError(InventoryError):
    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, item_id: int, available: int, requested_change: int) -> None:
        super().__init__(
            f"Stock change of {requested_change} for item {item_id} would exceed the maximum quantity"
        )
        self.item_id = item_id
        self.available = available
        self.requested_change = requested_change
