from __future__ import annotations

from typing import Dict, Optional

from models.councillor_record import CouncillorRecord
from models.outcome import Outcome, ResolutionOutcome


def format_outcome(record: CouncillorRecord, result: ResolutionOutcome) -> Optional[str]:
    """One line per attempted row. Rows that already had an email print nothing."""
    who = f"{record.councillor} ({record.council_name})"
    if result.outcome == Outcome.EXISTING_EMAIL:
        return None
    if result.outcome == Outcome.EMAIL:
        return f"Found email for {who}: {result.email}"
    if result.outcome == Outcome.NO_MATCHING_EMAIL:
        return f"Closest email for {who} does not contain the name: {result.email}"
    if result.outcome == Outcome.NO_EMAIL_FOUND:
        return f"No email for {who}"
    return f"{result.outcome.value} for {who}"


def run_summary(meta: Dict) -> str:
    if meta.get("reconciled"):
        return f"Added {int(meta.get('rows_inserted') or 0)} new rows."
    return f"Processed {int(meta.get('searched') or 0)} rows."


def print_summary(meta: Dict, api_usage: Optional[Dict] = None) -> None:
    """Print summary of the run."""
    print("\n" + "=" * 60)
    print("COUNCILLOR EMAILS - RUN SUMMARY")
    print("=" * 60)
    print(run_summary(meta))
    print(f"Rows in store: {meta.get('rows_total', 0)}")
    print(f"Emails written: {meta.get('rows_updated', 0)}")
    if meta.get("stopped"):
        print(f"Searches stopped early: {meta['stopped']}")
    if meta.get("datasets_failed"):
        print(f"Datasets failed: {meta['datasets_failed']}")
    if api_usage:
        print(f"API Usage: {api_usage.get('api_calls_made', 0)} calls ({api_usage.get('estimated_daily_limit_used', 'N/A')})")
    print("=" * 60)
