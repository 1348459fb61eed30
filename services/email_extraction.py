from __future__ import annotations

import re
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from models.search_result import SearchResultItem


# Bounded repetitions keep pathological page bodies from matching huge runs.
EMAIL_REGEX = re.compile(r"[a-zA-Z0-9._%+-]{1,50}@[a-zA-Z0-9.-]{1,50}\.[a-z]{2,4}")


def extract_emails(text: Optional[str]) -> List[str]:
    """Every non-overlapping email-shaped substring, in order of appearance."""
    if not text:
        return []
    return EMAIL_REGEX.findall(text)


def snippet_to_text(snippet: Optional[str]) -> str:
    """Render a search snippet's markup to plain text."""
    if not snippet:
        return ""
    return BeautifulSoup(f"<body>{snippet}</body>", "html.parser").get_text()


def emails_in_snippets(items: Iterable[SearchResultItem]) -> List[str]:
    emails: List[str] = []
    for item in items:
        text = snippet_to_text(item.html_snippet) if item.html_snippet else item.snippet
        emails.extend(extract_emails(text))
    return emails
