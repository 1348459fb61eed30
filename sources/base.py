from __future__ import annotations

from typing import Any, Dict, List


def ensure_rows(payload: Any, dataset_id: str) -> List[Dict[str, Any]]:
    """Keep the object rows of a dataset payload; anything but a JSON array is an error."""
    if not isinstance(payload, list):
        raise ValueError(f"Dataset {dataset_id} did not return a JSON array")
    return [row for row in payload if isinstance(row, dict)]
