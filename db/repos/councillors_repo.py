from __future__ import annotations

import sqlite3
from typing import Dict, Iterable, List, Tuple

from models.councillor_record import COLUMNS, NO_EMAIL, CouncillorRecord


class CouncillorsRepo:
    """Reads and writes the councillor table. Writes are not committed until ``commit()``."""

    def __init__(self, conn: sqlite3.Connection, table_name: str = "data"):
        self.conn = conn
        self.table_name = table_name

    def read_all(self) -> List[Tuple[int, CouncillorRecord]]:
        """All rows as (rowid, record) in stored order."""
        cur = self.conn.cursor()
        cur.execute(f"SELECT rowid, {', '.join(COLUMNS)} FROM {self.table_name} ORDER BY rowid")
        rows: List[Tuple[int, CouncillorRecord]] = []
        for row in cur.fetchall():
            record = CouncillorRecord(**{key: row[idx + 1] for idx, key in enumerate(COLUMNS)})
            rows.append((int(row[0]), record))
        return rows

    def update_email(self, rowid: int, email: str) -> None:
        self.conn.execute(f"UPDATE {self.table_name} SET email = ? WHERE rowid = ?", (email, rowid))

    def insert_rows(self, records: Iterable[CouncillorRecord]) -> int:
        placeholders = ", ".join(["?" for _ in COLUMNS])
        values = [r.to_row() for r in records]
        if not values:
            return 0
        self.conn.executemany(
            f"INSERT INTO {self.table_name} ({', '.join(COLUMNS)}) VALUES ({placeholders})",
            values,
        )
        return len(values)

    def commit(self) -> None:
        self.conn.commit()

    def email_status_counts(self) -> Dict[str, int]:
        """Row counts by email state: resolved, none (searched, absent), pending."""
        sql = (
            "SELECT "
            "  COUNT(*), "
            "  SUM(CASE WHEN email IS NOT NULL AND email != '' AND email != ? THEN 1 ELSE 0 END), "
            "  SUM(CASE WHEN email = ? THEN 1 ELSE 0 END) "
            f"FROM {self.table_name}"
        )
        cur = self.conn.cursor()
        cur.execute(sql, (NO_EMAIL, NO_EMAIL))
        total, resolved, none = cur.fetchone()
        total = int(total or 0)
        resolved = int(resolved or 0)
        none = int(none or 0)
        return {
            "total": total,
            "resolved": resolved,
            "none": none,
            "pending": total - resolved - none,
        }
