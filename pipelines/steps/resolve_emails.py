from __future__ import annotations

import logging
from typing import Callable

from models.outcome import Outcome, ResolutionOutcome
from pipelines.runner import RunContext
from services.identity import identity_key
from services.reporting import format_outcome
from services.resolver import EmailResolver


class ResolveEmails:
    """Resolve rows in stored order within a per-run search budget.

    Rows are processed one at a time. The run stops issuing searches once
    ``max_searches`` searches were made or a search came back with no
    results at all, which usually means the quota is exhausted.
    ``meta["pending"]`` counts every row that needs a search, including
    rows left over when the run stopped early.
    """

    def __init__(self, get_resolver: Callable[[], EmailResolver], max_searches: int = 100) -> None:
        self.get_resolver = get_resolver
        self.max_searches = max_searches

    def run(self, ctx: RunContext) -> RunContext:
        pending = sum(1 for _rowid, record in ctx.rows if EmailResolver.precheck(record) is None)
        searched = 0
        stopped = None
        for _rowid, record in ctx.rows:
            skipped = EmailResolver.precheck(record)
            if skipped is not None:
                result = ResolutionOutcome(identity_key(record), skipped, record.email or None)
            else:
                if searched >= self.max_searches:
                    stopped = "budget"
                    break
                searched += 1
                result = self.get_resolver().resolve(record)

            ctx.outcomes[result.key] = result
            line = format_outcome(record, result)
            if line:
                logging.info(line, extra={"step": "resolve", "status": result.outcome.value})
            if result.outcome == Outcome.NO_SEARCH_RESULTS:
                stopped = "no-search-results"
                break

        if stopped:
            logging.info(f"Stopping searches for this run ({stopped})", extra={"step": "resolve"})
        ctx.meta["pending"] = pending
        ctx.meta["searched"] = searched
        ctx.meta["stopped"] = stopped
        return ctx
