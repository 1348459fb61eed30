from __future__ import annotations

import logging
from typing import Dict, List, Optional

from models.councillor_record import CouncillorRecord
from models.outcome import Outcome, ResolutionOutcome
from models.search_result import SearchResultItem
from ports.search import PageFetchPort, SearchPort
from services.email_extraction import emails_in_snippets, extract_emails
from services.email_matching import best_email
from services.identity import identity_key
from services.site_utils import build_site_query


class EmailResolver:
    """Resolve one councillor's email via a site-scoped search.

    Snippets of every result are scanned, then the first ``max_results``
    result pages are fetched and scanned raw. Results carrying a file format
    (usually PDF) are not fetched.
    """

    def __init__(self, searcher: SearchPort, fetcher: PageFetchPort, max_results: int = 4) -> None:
        self.searcher = searcher
        self.fetcher = fetcher
        self.max_results = max_results

    @staticmethod
    def precheck(record: CouncillorRecord) -> Optional[Outcome]:
        """Outcome for rows that need no search, else None."""
        if record.email:
            return Outcome.EXISTING_EMAIL
        if not (record.councillor or "").strip():
            return Outcome.NO_COUNCILLOR_NAME
        if not (record.council_website or "").strip():
            return Outcome.NO_COUNCIL_WEBSITE
        return None

    def collect_emails(self, items: List[SearchResultItem]) -> List[str]:
        # Insertion-ordered set: snippets first, then page bodies
        emails: Dict[str, bool] = dict.fromkeys(emails_in_snippets(items), True)
        for item in items[: self.max_results]:
            if item.file_format:
                continue
            for email in extract_emails(self.fetcher.fetch(item.url)):
                emails.setdefault(email, True)
        return list(emails)

    def resolve(self, record: CouncillorRecord) -> ResolutionOutcome:
        key = identity_key(record)
        skipped = self.precheck(record)
        if skipped is not None:
            return ResolutionOutcome(key, skipped, record.email or None)

        name = record.councillor.strip()
        query = build_site_query(name, record.council_website)
        items = self.searcher.search(query)
        if items is None:
            return ResolutionOutcome(key, Outcome.ERROR_DURING_SEARCH)
        if not items:
            return ResolutionOutcome(key, Outcome.NO_SEARCH_RESULTS)

        emails = self.collect_emails(items)
        logging.debug(f"{len(emails)} candidate emails for {name}")
        outcome, email = best_email(name, emails)
        return ResolutionOutcome(key, outcome, email or None)
