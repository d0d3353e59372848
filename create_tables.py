#!/usr/bin/env python3
"""
Create the inventory tables directly using SQLAlchemy
(use `alembic upgrade head` for managed databases)
"""
import sys
sys.path.append('.')

from app.db.database import Base, engine
from app.models import *  # noqa: F401,F403 - registers models on Base.metadata


def create_tables() -> bool:
    """Create all database tables"""
    try:
        print("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        print(f"Tables created: {', '.join(sorted(Base.metadata.tables))}")
        return True

    except Exception as e:
        print(f"Error creating tables: {e}")
        return False


if __name__ == "__main__":
    success = create_tables()
    sys.exit(0 if success else 1)
