from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Tuple

from models.councillor_record import CouncillorRecord
from models.outcome import ResolutionOutcome
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    # (rowid, record) in stored order; never reordered within a run
    rows: List[Tuple[int, CouncillorRecord]] = field(default_factory=list)
    # Outcomes keyed by identity key, kept beside the records
    outcomes: Dict[str, ResolutionOutcome] = field(default_factory=dict)
    new_rows: List[CouncillorRecord] = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
