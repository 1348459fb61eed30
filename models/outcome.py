from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(str, Enum):
    """What happened when resolving one record during the current run."""

    EXISTING_EMAIL = "existing-email"
    NO_COUNCILLOR_NAME = "no-councillor-name"
    NO_COUNCIL_WEBSITE = "no-council-website"
    ERROR_DURING_SEARCH = "error-during-search"
    NO_SEARCH_RESULTS = "no-search-results"
    NO_EMAIL_FOUND = "no-email-found"
    EMAIL = "email"
    # Closest candidate when none contains the first or last name
    NO_MATCHING_EMAIL = "no-matching-email"

    def __str__(self) -> str:
        return self.value

    @property
    def selects_email(self) -> bool:
        return self in (Outcome.EMAIL, Outcome.NO_MATCHING_EMAIL)


@dataclass(frozen=True)
class ResolutionOutcome:
    key: str
    outcome: Outcome
    email: Optional[str] = None
