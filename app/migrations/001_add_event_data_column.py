"""
Migration 001: Add a JSONB data column to the events table.

This script:
- adds events.data (JSONB, default '{}') if it does not exist yet
- backfills '{}' into every existing row where data is NULL

Safe to re-run: the second run adds nothing and updates 0 rows.
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import connect, execute

ADD_COLUMN_SQL = """
    ALTER TABLE events
    ADD COLUMN IF NOT EXISTS data JSONB DEFAULT '{}'::jsonb
"""

BACKFILL_SQL = """
    UPDATE events
    SET data = '{}'::jsonb
    WHERE data IS NULL
"""


def run_migration() -> int:
    """Add events.data and backfill NULLs. Returns the number of rows updated."""
    with connect() as conn:
        print("Connected to database")

        execute(conn, ADD_COLUMN_SQL)
        conn.commit()
        print("✓ Added data column")

        result = execute(conn, BACKFILL_SQL)
        conn.commit()
        updated = result.rowcount
        print(f"✓ Updated {updated} existing events")

    print("\n✅ Migration completed successfully!")
    return updated


def main() -> int:
    try:
        run_migration()
    except Exception as e:
        print(f"❌ Migration failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
