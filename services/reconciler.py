from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Set

from models.councillor_record import CouncillorRecord
from services.identity import RecordLike, identity_key, normalize_external_record


def known_keys(records: Iterable[RecordLike]) -> Set[str]:
    return {identity_key(r) for r in records}


def merge_batch(keys: Set[str], batch: Iterable[Mapping[str, Any]]) -> List[CouncillorRecord]:
    """Return rows of ``batch`` whose identity is not in ``keys``.

    ``keys`` is updated in place so a later batch cannot re-add a row this
    one already contributed. Within a batch the first occurrence wins.
    """
    new_rows: List[CouncillorRecord] = []
    for raw in batch:
        if not isinstance(raw, Mapping):
            continue
        key = identity_key(raw)
        if key in keys:
            continue
        new_rows.append(normalize_external_record(raw))
        keys.add(key)
    return new_rows


def reconcile(
    known: Iterable[RecordLike],
    batches: Iterable[Iterable[Mapping[str, Any]]],
) -> List[CouncillorRecord]:
    """Merge external batches into the known set, in listed order."""
    keys = known_keys(known)
    new_rows: List[CouncillorRecord] = []
    for batch in batches:
        new_rows.extend(merge_batch(keys, batch))
    return new_rows
