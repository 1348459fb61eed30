from __future__ import annotations

from pipelines.runner import RunContext
from ports.repos import CouncillorsRepoPort


class LoadCouncillors:
    def __init__(self, repo: CouncillorsRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        ctx.rows = self.repo.read_all()
        ctx.meta["rows_total"] = len(ctx.rows)
        return ctx
