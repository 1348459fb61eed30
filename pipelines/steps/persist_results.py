from __future__ import annotations

import logging

from models.councillor_record import NO_EMAIL
from models.outcome import Outcome
from pipelines.runner import RunContext
from ports.repos import CouncillorsRepoPort
from services.identity import identity_key


class PersistResults:
    """Write the run's outcomes and new rows as one batch, then commit.

    Found emails (confident or not) are stored; ``no-email-found`` stores the
    ``none`` sentinel so the row is not searched again. Any other outcome
    leaves the row untouched for a later run.
    """

    def __init__(self, repo: CouncillorsRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        updated = 0
        for rowid, record in ctx.rows:
            result = ctx.outcomes.get(identity_key(record))
            if result is None:
                continue
            if result.outcome.selects_email and result.email:
                self.repo.update_email(rowid, result.email)
                updated += 1
            elif result.outcome == Outcome.NO_EMAIL_FOUND:
                self.repo.update_email(rowid, NO_EMAIL)
                updated += 1

        inserted = self.repo.insert_rows(ctx.new_rows)
        self.repo.commit()
        if updated or inserted:
            logging.info(f"Wrote {updated} email results and {inserted} new rows", extra={"step": "persist"})
        ctx.meta["rows_updated"] = updated
        ctx.meta["rows_inserted"] = inserted
        return ctx
