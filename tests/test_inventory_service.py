"""Tests for the inventory domain service."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.core.exceptions import ErrorKind, InsufficientStockError, ItemNotFoundError, StockLimitExceededError
from app.models.inventory import MAX_QUANTITY
from app.schemas.inventory import ItemCreate, ItemUpdate, StockStatus
from app.services import inventory_service


def naive(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return dt.replace(tzinfo=None)


@pytest.fixture
def frozen_clock(monkeypatch, fixed_now):
    """Pins utc_now(); returns a setter to move the clock."""
    current = {"now": fixed_now}
    monkeypatch.setattr(inventory_service, "utc_now", lambda: current["now"])

    def set_now(value: datetime) -> None:
        current["now"] = value

    return set_now


class TestCreateAndRead:
    def test_create_then_get_returns_same_values(self, db, softener_draft) -> None:
        """Stored record equals the draft plus system-assigned id and timestamps."""
        created = inventory_service.create_item(db, softener_draft)
        fetched = inventory_service.get_item(db, created.id)

        assert fetched is not None
        assert fetched.id == created.id
        assert fetched.created_at is not None
        assert fetched.updated_at is not None
        for field, value in softener_draft.model_dump().items():
            assert getattr(fetched, field) == value

    def test_create_sets_both_timestamps_to_now(self, db, bleach_draft, frozen_clock, fixed_now) -> None:
        created = inventory_service.create_item(db, bleach_draft)

        assert naive(created.created_at) == naive(fixed_now)
        assert naive(created.updated_at) == naive(fixed_now)

    def test_create_ignores_caller_supplied_id(self, db) -> None:
        draft = ItemCreate.model_validate(
            {"id": 42, "name": "Iron", "category": "Equipment", "quantity": 1, "unit": "pieces"}
        )

        created = inventory_service.create_item(db, draft)

        assert created.id != 42

    def test_get_missing_item_returns_none(self, db) -> None:
        assert inventory_service.get_item(db, 12345) is None

    def test_get_all_items(self, db, bleach_draft, softener_draft) -> None:
        inventory_service.create_item(db, bleach_draft)
        inventory_service.create_item(db, softener_draft)

        assert len(inventory_service.get_all_items(db)) == 2


class TestUpdate:
    def test_update_replaces_every_mutable_field(self, db, softener_draft, frozen_clock, fixed_now) -> None:
        item = inventory_service.create_item(db, softener_draft)
        frozen_clock(fixed_now + timedelta(hours=1))

        replacement = ItemUpdate(name="Softener Refill", category="Fabric Softener", quantity=7, unit="liters")
        updated = inventory_service.update_item(db, item.id, replacement)

        assert updated.name == "Softener Refill"
        assert updated.quantity == 7
        assert updated.unit == "liters"
        # Full replace: omitted optionals are cleared
        assert updated.price_per_unit is None
        assert updated.minimum_stock is None
        assert updated.supplier is None
        assert updated.description is None
        assert naive(updated.created_at) == naive(fixed_now)
        assert naive(updated.updated_at) == naive(fixed_now + timedelta(hours=1))

    def test_update_missing_item_raises_not_found(self, db, bleach_draft) -> None:
        existing = inventory_service.create_item(db, bleach_draft)

        with pytest.raises(ItemNotFoundError) as exc_info:
            inventory_service.update_item(db, existing.id + 100, ItemUpdate(**bleach_draft.model_dump()))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert [i.name for i in inventory_service.get_all_items(db)] == ["Bleach"]


class TestDelete:
    def test_delete_then_get_returns_none(self, db, bleach_draft) -> None:
        item = inventory_service.create_item(db, bleach_draft)

        inventory_service.delete_item(db, item.id)

        assert inventory_service.get_item(db, item.id) is None

    def test_delete_twice_raises_not_found(self, db, bleach_draft) -> None:
        item = inventory_service.create_item(db, bleach_draft)
        inventory_service.delete_item(db, item.id)

        with pytest.raises(ItemNotFoundError):
            inventory_service.delete_item(db, item.id)


class TestQueries:
    def test_search_matches_name_case_insensitively(self, db, bleach_draft, softener_draft) -> None:
        inventory_service.create_item(db, bleach_draft)
        inventory_service.create_item(db, softener_draft)

        found = inventory_service.search_items(db, "bleach")

        assert [i.name for i in found] == ["Bleach"]

    def test_category_filter_is_exact(self, db) -> None:
        for name, category in [("Iron", "Equipment"), ("Steamer", "Equipment"), ("Bleach", "Detergent")]:
            inventory_service.create_item(
                db, ItemCreate(name=name, category=category, quantity=1, unit="pieces")
            )

        assert len(inventory_service.get_items_by_category(db, "Equipment")) == 2
        assert inventory_service.get_items_by_category(db, "equipment") == []

    def test_low_stock_includes_only_items_with_threshold(self, db) -> None:
        drafts = [
            ItemCreate(name="At threshold", category="A", quantity=5, unit="kg", minimum_stock=5),
            ItemCreate(name="Below threshold", category="A", quantity=1, unit="kg", minimum_stock=5),
            ItemCreate(name="Above threshold", category="A", quantity=6, unit="kg", minimum_stock=5),
            ItemCreate(name="No threshold, empty", category="A", quantity=0, unit="kg"),
        ]
        for draft in drafts:
            inventory_service.create_item(db, draft)

        low = inventory_service.get_low_stock_items(db)

        assert sorted(i.name for i in low) == ["At threshold", "Below threshold"]


class TestAdjustStock:
    def test_bleach_scenario(self, db, bleach_draft) -> None:
        """10 liters, consume 7 -> 3 (low stock); consuming 5 more is rejected."""
        item = inventory_service.create_item(db, bleach_draft)

        after_use = inventory_service.adjust_stock(db, item.id, -7)
        assert after_use.quantity == 3
        assert [i.id for i in inventory_service.get_low_stock_items(db)] == [item.id]

        with pytest.raises(InsufficientStockError) as exc_info:
            inventory_service.adjust_stock(db, item.id, -5)

        assert exc_info.value.kind is ErrorKind.INVALID_OPERATION
        assert exc_info.value.available == 3
        assert inventory_service.get_item(db, item.id).quantity == 3

    def test_rejected_adjustment_keeps_updated_at(self, db, bleach_draft, frozen_clock, fixed_now) -> None:
        item = inventory_service.create_item(db, bleach_draft)
        frozen_clock(fixed_now + timedelta(days=1))

        with pytest.raises(InsufficientStockError):
            inventory_service.adjust_stock(db, item.id, -11)

        stored = inventory_service.get_item(db, item.id)
        assert stored.quantity == 10
        assert naive(stored.updated_at) == naive(fixed_now)

    def test_receipt_increases_quantity_and_refreshes_timestamp(
        self, db, bleach_draft, frozen_clock, fixed_now
    ) -> None:
        item = inventory_service.create_item(db, bleach_draft)
        frozen_clock(fixed_now + timedelta(minutes=5))

        updated = inventory_service.adjust_stock(db, item.id, 15)

        assert updated.quantity == 25
        assert naive(updated.updated_at) == naive(fixed_now + timedelta(minutes=5))
        assert naive(updated.created_at) == naive(fixed_now)

    def test_receipt_past_max_quantity_is_rejected(self, db) -> None:
        item = inventory_service.create_item(
            db, ItemCreate(name="Hanger", category="Equipment", quantity=MAX_QUANTITY - 3, unit="pieces")
        )

        with pytest.raises(StockLimitExceededError) as exc_info:
            inventory_service.adjust_stock(db, item.id, 4)

        assert exc_info.value.kind is ErrorKind.INVALID_OPERATION
        assert inventory_service.get_item(db, item.id).quantity == MAX_QUANTITY - 3
        assert inventory_service.adjust_stock(db, item.id, 3).quantity == MAX_QUANTITY

    def test_missing_item_raises_not_found(self, db) -> None:
        with pytest.raises(ItemNotFoundError):
            inventory_service.adjust_stock(db, 77, 1)

    def test_quantity_never_negative_across_sequence(self, db, bleach_draft) -> None:
        item = inventory_service.create_item(db, bleach_draft)

        for delta in [-4, 6, -12, -1, 3, -50, -2]:
            try:
                inventory_service.adjust_stock(db, item.id, delta)
            except InsufficientStockError:
                pass
            assert inventory_service.get_item(db, item.id).quantity >= 0

        assert inventory_service.get_item(db, item.id).quantity == 1


@pytest.mark.parametrize(
    "quantity, minimum_stock, expected",
    [
        (3, None, StockStatus.OK),
        (6, 5, StockStatus.OK),
        (5, 5, StockStatus.LOW),
        (3, 5, StockStatus.LOW),
        (2, 5, StockStatus.CRITICAL),
        (0, 0, StockStatus.CRITICAL),
        (1, 0, StockStatus.OK),
    ],
)
def test_stock_status(db, quantity, minimum_stock, expected) -> None:
    item = inventory_service.create_item(
        db,
        ItemCreate(name="Starch", category="Supplies", quantity=quantity, unit="cans",
                   minimum_stock=minimum_stock, price_per_unit=Decimal("12.25")),
    )

    assert inventory_service.stock_status(item) == expected
