# File: app/schemas/inventory.py
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, computed_field
from pydantic.alias_generators import to_camel
from datetime import datetime
from app.models.inventory import MAX_QUANTITY

# Prices are stored as NUMERIC but sent over the wire as plain JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class StockStatus(str, Enum):
    OK = "ok"
    LOW = "low"
    CRITICAL = "critical"


def classify_stock_level(quantity: int, minimum_stock: Optional[int]) -> StockStatus:
    """Critical at or below half the threshold, low at or below the threshold."""
    if minimum_stock is None or quantity > minimum_stock:
        return StockStatus.OK
    if quantity <= minimum_stock / 2:
        return StockStatus.CRITICAL
    return StockStatus.LOW


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ItemBase(CamelModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)  # free-form, e.g. 'Detergent', 'Equipment'
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    unit: str = Field(min_length=1)  # kg, bottles, liters
    price_per_unit: Optional[Price] = None
    minimum_stock: Optional[int] = Field(default=None, ge=0, le=MAX_QUANTITY)
    supplier: Optional[str] = None
    description: Optional[str] = None


class ItemCreate(ItemBase):
    pass


class ItemUpdate(ItemBase):
    """Full replacement: every mutable field is overwritten, omitted optionals become null."""
    pass


class StockAdjustment(CamelModel):
    quantity_change: int = Field(ge=-MAX_QUANTITY, le=MAX_QUANTITY)


class Item(ItemBase):
    id: int
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="stockStatus")
    @property
    def stock_status(self) -> StockStatus:
        return classify_stock_level(self.quantity, self.minimum_stock)
