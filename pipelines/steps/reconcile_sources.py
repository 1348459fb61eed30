from __future__ import annotations

import logging
from typing import Callable, List

import requests

from pipelines.runner import RunContext
from ports.source import DatasetSourcePort
from services.reconciler import known_keys, merge_batch


class ReconcileSources:
    """Pull every configured dataset and queue rows whose identity is new.

    Only runs when no stored row was waiting for a search, unless ``force``
    is set. A dataset that cannot be fetched or parsed contributes nothing;
    the other datasets are still merged.
    """

    def __init__(self, get_sources: Callable[[], List[DatasetSourcePort]], force: bool = False) -> None:
        self.get_sources = get_sources
        self.force = force

    def run(self, ctx: RunContext) -> RunContext:
        if not self.force and ctx.meta.get("pending", 0) > 0:
            return ctx

        sources = self.get_sources()
        logging.info(
            f"Fetching datasets: {', '.join(s.dataset_id for s in sources) or '(none configured)'}",
            extra={"step": "reconcile"},
        )
        keys = known_keys(record for _rowid, record in ctx.rows)
        failed = 0
        for source in sources:
            try:
                batch = source.fetch()
            except (requests.exceptions.RequestException, ValueError, OSError) as e:
                failed += 1
                logging.error(
                    f"Error fetching dataset {source.dataset_id}: {e}",
                    extra={"step": "reconcile", "status": "error", "dataset": source.dataset_id},
                )
                continue
            new_rows = merge_batch(keys, batch)
            ctx.new_rows.extend(new_rows)
            logging.info(
                f"Merging from {source.dataset_id}: added {len(new_rows)} new rows",
                extra={"step": "reconcile", "dataset": source.dataset_id},
            )

        ctx.meta["reconciled"] = True
        ctx.meta["datasets_failed"] = failed
        return ctx
