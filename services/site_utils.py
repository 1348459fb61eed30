from __future__ import annotations

import re
from typing import Optional


_PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)


def trim_url(url: Optional[str]) -> str:
    """Strip the protocol and one trailing slash: ``http://a.gov.au/`` -> ``a.gov.au``."""
    if not url:
        return ""
    text = _PROTOCOL_RE.sub("", url.strip())
    if text.endswith("/"):
        text = text[:-1]
    return text


def build_site_query(name: str, website: str) -> str:
    return f"{name} site:{trim_url(website)}"
