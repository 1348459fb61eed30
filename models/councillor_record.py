from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# Stored column order; must match the table field-for-field.
COLUMNS: list[str] = [
    "councillor",
    "position",
    "council_name",
    "ward",
    "council_website",
    "email",
]

# Sentinel persisted when a search found no email at all.
NO_EMAIL = "none"


class CouncillorRecord(BaseModel):
    """App/DB record shape: one row of the councillor table."""

    councillor: str | None = None
    position: str | None = None
    council_name: str | None = None
    ward: str | None = None
    council_website: str | None = None
    email: str | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    def to_row(self) -> tuple:
        return tuple(getattr(self, col) for col in COLUMNS)
