from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from models.councillor_record import COLUMNS, CouncillorRecord


# Source datasets name the same column differently; the first non-empty
# field wins. Columns not listed map to themselves.
FIELD_PRECEDENCE: Dict[str, tuple[str, ...]] = {
    "councillor": ("councillor", "name"),
    "council_name": ("council_name", "council"),
    "council_website": ("council_website", "council_url"),
}

RecordLike = Union[Mapping[str, Any], BaseModel]


def _as_mapping(record: Optional[RecordLike]) -> Mapping[str, Any]:
    if record is None:
        return {}
    if isinstance(record, BaseModel):
        return record.model_dump()
    return record


def pick_field(record: Optional[RecordLike], column: str) -> Optional[Any]:
    """Return the first non-empty value among the aliases of ``column``."""
    data = _as_mapping(record)
    for name in FIELD_PRECEDENCE.get(column, (column,)):
        value = data.get(name)
        if value:
            return value
    return None


def _text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def identity_key(record: Optional[RecordLike]) -> str:
    """Name and council concatenated, trimmed once. No other normalization."""
    name = _text(pick_field(record, "councillor"))
    council = _text(pick_field(record, "council_name"))
    return (name + council).strip()


def normalize_external_record(raw: RecordLike) -> CouncillorRecord:
    """Map a loosely-typed dataset row onto the stored councillor shape."""
    values: Dict[str, Optional[str]] = {}
    for column in COLUMNS:
        value = pick_field(raw, column)
        values[column] = None if value is None else str(value)
    if values["email"] is None:
        values["email"] = ""
    return CouncillorRecord(**values)
