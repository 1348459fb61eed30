from __future__ import annotations

from typing import Dict, Iterable, List, Protocol, Tuple

from models.councillor_record import CouncillorRecord


class CouncillorsRepoPort(Protocol):
    def read_all(self) -> List[Tuple[int, CouncillorRecord]]:
        ...

    def update_email(self, rowid: int, email: str) -> None:
        ...

    def insert_rows(self, records: Iterable[CouncillorRecord]) -> int:
        ...

    def commit(self) -> None:
        ...

    def email_status_counts(self) -> Dict[str, int]:
        ...
