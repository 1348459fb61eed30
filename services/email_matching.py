"""
Pick the candidate email that best fits a person's name.

Candidates whose local-part contains the first or last name are preferred
and ranked by Levenshtein distance between the lower-cased name and the
local-part. When none contains either name, the globally closest candidate
is still returned, tagged ``no-matching-email`` so it can be reviewed.
Ties keep the first candidate encountered.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

from models.outcome import Outcome


USER_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+")
FIRST_REGEX = re.compile(r"^[a-z]+")
LAST_REGEX = re.compile(r"[a-z]+$")


def local_part(email: str) -> str:
    m = USER_REGEX.match(email.lower())
    return m.group(0) if m else ""


def name_probes(name: str) -> List[str]:
    """Leading and trailing alphabetic runs of the lower-cased name."""
    lowered = name.strip().lower()
    probes = []
    for regex in (FIRST_REGEX, LAST_REGEX):
        m = regex.search(lowered)
        if m:
            probes.append(m.group(0))
    return probes


def _closest(name: str, emails: Iterable[str]) -> Optional[str]:
    best: Optional[str] = None
    best_distance = None
    for email in emails:
        distance = Levenshtein.distance(name, local_part(email))
        if best_distance is None or distance < best_distance:
            best, best_distance = email, distance
    return best


def best_email(name: Optional[str], emails: Iterable[str]) -> Tuple[Outcome, str]:
    lowered = (name or "").strip().lower()
    probes = name_probes(lowered)
    candidates = list(dict.fromkeys(emails))

    matching = []
    others = []
    for email in candidates:
        user = local_part(email)
        if any(p in user for p in probes):
            matching.append(email)
        else:
            others.append(email)

    best = _closest(lowered, matching)
    if best:
        return Outcome.EMAIL, best
    fallback = _closest(lowered, others)
    if fallback:
        return Outcome.NO_MATCHING_EMAIL, fallback
    return Outcome.NO_EMAIL_FOUND, ""
