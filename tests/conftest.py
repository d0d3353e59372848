# tests/conftest.py
import os

# Must be set before the app modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import Base, get_db
from app.main import app
from app.models import InventoryItem  # noqa: F401 - registers the table
from app.schemas.inventory import ItemCreate


@pytest.fixture
def engine():
    """Fresh in-memory database per test, shared by every session of that test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient with the request session bound to the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def bleach_draft() -> ItemCreate:
    return ItemCreate(
        name="Bleach",
        category="Detergent",
        quantity=10,
        unit="liters",
        minimum_stock=5,
    )


@pytest.fixture
def softener_draft() -> ItemCreate:
    return ItemCreate(
        name="Fabric Softener",
        category="Fabric Softener",
        quantity=12,
        unit="bottles",
        price_per_unit=Decimal("150.00"),
        minimum_stock=4,
        supplier="CleanCo Supplies",
        description="Lavender scent",
    )


@pytest.fixture
def bleach_payload() -> dict:
    """JSON body as a browser client would send it."""
    return {
        "name": "Bleach",
        "category": "Detergent",
        "quantity": 10,
        "unit": "liters",
        "pricePerUnit": 65.5,
        "minimumStock": 5,
        "supplier": "CleanCo Supplies",
        "description": "Chlorine bleach, 1L",
    }
