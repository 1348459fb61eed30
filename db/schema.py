from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection, table_name: str = "data") -> None:
    """Create the councillor table if missing (idempotent).

    Six text columns, no key: rows are addressed by rowid in read order.
    """
    conn.execute(
        (
            f"CREATE TABLE IF NOT EXISTS {table_name} (\n"
            "  councillor TEXT,\n"
            "  position TEXT,\n"
            "  council_name TEXT,\n"
            "  ward TEXT,\n"
            "  council_website TEXT,\n"
            "  email TEXT\n"
            ")"
        )
    )
    conn.commit()
