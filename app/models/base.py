# File: app/models/base.py
from sqlalchemy import Column, Integer, DateTime
from app.db.database import Base


class BaseModel(Base):
    """Common columns for every table.

    Timestamps are assigned by the service layer, not by database defaults,
    so the values returned to callers are exactly the ones persisted.
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
