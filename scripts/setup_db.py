#!/usr/bin/env python3
"""
Database setup script for Ground Setup.

Run this script to initialize the SQLite database with the required schema.
"""

import sqlite3
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ground_setup.config import get_settings
from ground_setup.data.storage import Database


def main() -> None:
    """Initialize the database."""
    db_path = get_settings().storage.db_path
    print(f"Initializing database at: {db_path}")

    # Initialize database (creates schema and data directory)
    Database(db_path)

    # Verify tables were created
    conn = sqlite3.connect(db_path)
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    )
    tables = [row[0] for row in cursor.fetchall()]
    conn.close()

    print(f"Created {len(tables)} tables:")
    for table in tables:
        print(f"  - {table}")

    print("\nDatabase initialized successfully!")


if __name__ == "__main__":
    main()
