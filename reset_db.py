#!/usr/bin/env python3
"""
Drop the inventory tables and recreate them from the models.
All stock data is lost.
"""
import sys
sys.path.append('.')

from app.db.database import engine, Base
from app.models import *  # noqa: F401,F403 - registers models on Base.metadata


def reset_database() -> bool:
    """Drop all tables and recreate from models"""
    try:
        print("Dropping all tables...")
        Base.metadata.drop_all(bind=engine)

        print("Creating all tables from models...")
        Base.metadata.create_all(bind=engine)

        print("Database reset complete!")
        print("Remember to run: alembic stamp head")
        return True

    except Exception as e:
        print(f"Error resetting database: {e}")
        return False


if __name__ == "__main__":
    sys.exit(0 if reset_database() else 1)
