"""
Migration 002: Create the user_contacts table.

Runs 20241225_user_contacts.sql (next to this script) as one batch, then
prints the columns of the created table from information_schema.
"""

import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import connect, describe_table

MIGRATION_FILE = Path(__file__).parent / "20241225_user_contacts.sql"
TABLE_NAME = "user_contacts"


def run_migration():
    """Execute the user_contacts SQL file and return the resulting columns."""
    with connect() as conn:
        print("✓ Connected to database")

        migration_sql = MIGRATION_FILE.read_text(encoding="utf-8")

        print(f"Running {TABLE_NAME} migration...")
        conn.exec_driver_sql(migration_sql, execution_options={"no_parameters": True})
        conn.commit()
        print(f"✅ {TABLE_NAME} migration completed successfully!")

        columns = describe_table(conn, TABLE_NAME)

    print("\n📋 Created table columns:")
    for column_name, data_type in columns:
        print(f"  - {column_name}: {data_type}")

    return columns


def main() -> int:
    try:
        run_migration()
    except Exception as e:
        print(f"❌ Migration failed: {e}", file=sys.stderr)
        print(f"Error details: {e!r}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
