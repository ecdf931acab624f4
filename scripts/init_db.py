#!/usr/bin/env python3
"""
Database initialization script for the E-Waste Exchange Backend.

Creates the tables straight from the model metadata. Use
``alembic upgrade head`` instead for databases managed by migrations.
"""

from sqlmodel import SQLModel

from ewaste_api.core.config import settings
from ewaste_api.db.base import *  # Import all models to register with SQLModel
from ewaste_api.db.session import engine


def create_db_and_tables():
    """Create database tables."""
    print("Creating database tables...")

    SQLModel.metadata.create_all(engine)

    print("✅ Database tables created successfully!")
    print(f"Database URL: {settings.database_url}")
    print("\nTables created:")
    for table in SQLModel.metadata.tables.keys():
        print(f"  - {table}")


if __name__ == "__main__":
    create_db_and_tables()
