from __future__ import annotations

import logging
from typing import Optional

import requests

from config.settings import Settings, get_settings


class PageFetcher:
    """Fetch result pages as raw text. Never raises for network trouble."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def fetch(self, url: str) -> str:
        if not url:
            return ""
        try:
            response = self.session.get(url, timeout=self.settings.request_timeout_seconds)
        except requests.exceptions.RequestException as e:
            logging.warning(f"Error requesting page {url}: {e}")
            return ""
        # The body is scanned as raw text, never parsed as markup
        text = response.text or ""
        return text[: self.settings.max_page_bytes]
