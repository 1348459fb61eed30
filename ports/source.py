from __future__ import annotations

from typing import Any, Dict, List, Protocol


class DatasetSourcePort(Protocol):
    source_name: str
    dataset_id: str

    def fetch(self) -> List[Dict[str, Any]]:
        ...
