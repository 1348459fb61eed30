from .councillor_record import COLUMNS, NO_EMAIL, CouncillorRecord
from .outcome import Outcome, ResolutionOutcome
from .search_result import SearchResultItem

__all__ = [
    "COLUMNS",
    "NO_EMAIL",
    "CouncillorRecord",
    "Outcome",
    "ResolutionOutcome",
    "SearchResultItem",
]
