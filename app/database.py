import sys
import time
from contextlib import contextmanager
from typing import List, Optional, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

from config import get_settings


def create_db_engine(database_url: Optional[str] = None, sslmode: Optional[str] = None):
    """Build an engine for a single one-shot script connection."""
    url = database_url or get_settings().database_url

    connect_args = {}
    if make_url(url).get_backend_name() == "postgresql":
        connect_args["sslmode"] = sslmode or get_settings().database_sslmode

    return create_engine(url, poolclass=NullPool, connect_args=connect_args)


@contextmanager
def connect(database_url: Optional[str] = None, sslmode: Optional[str] = None):
    """Yield one connection; it is closed and the engine disposed on every exit path."""
    engine = create_db_engine(database_url, sslmode)
    conn = None
    try:
        conn = engine.connect()
        yield conn
    finally:
        if conn is not None:
            conn.close()
        engine.dispose()


def execute(conn, statement, params: Optional[dict] = None):
    """Run one statement, warning when it is slower than the configured threshold."""
    if isinstance(statement, str):
        statement = text(statement)

    start = time.perf_counter()
    result = conn.execute(statement, params or {})
    duration_ms = (time.perf_counter() - start) * 1000

    if duration_ms > get_settings().slow_query_ms:
        print(f"⚠️ Slow query detected: {duration_ms:.0f}ms, rows: {result.rowcount}", file=sys.stderr)
    return result


def describe_table(conn, table_name: str) -> List[Tuple[str, str]]:
    """Return (column_name, data_type) pairs for a table in catalog order."""
    result = conn.execute(
        text("""
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_name = :table_name
            ORDER BY ordinal_position
        """),
        {"table_name": table_name},
    )
    return [(row[0], row[1]) for row in result.fetchall()]
