from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DATASET_ID_RE = re.compile(r"^[A-Za-z0-9_\-/]+$")


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def parse_dataset_ids(raw: str | None) -> list[str]:
    """Split a comma-delimited dataset list, dropping anything outside [A-Za-z0-9_/-]."""
    if not raw:
        return []
    ids = []
    for item in raw.split(","):
        item = item.strip()
        if item and DATASET_ID_RE.match(item):
            ids.append(item)
    return ids


@dataclass(frozen=True)
class Settings:
    google_api_key: str | None
    google_cse_id: str | None
    google_search_url: str
    search_country: str

    morph_api_key: str | None
    morph_api_url: str
    state_databases: list[str]

    # Dataset collaborator (registry name) and its local directory for json_dir
    dataset_source: str
    dataset_dir: str

    # Per-run work limits
    max_search_results: int
    max_searches_per_run: int

    search_delay_seconds: float
    max_retries: int
    request_timeout_seconds: int
    max_page_bytes: int
    user_agent: str
    referer: str | None

    db_path: str
    table_name: str

    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        google_api_key=os.getenv("GOOGLE_API_KEY"),
        google_cse_id=os.getenv("GOOGLE_CSE_ID"),
        google_search_url=os.getenv("GOOGLE_SEARCH_URL", "https://www.googleapis.com/customsearch/v1"),
        search_country=os.getenv("SEARCH_COUNTRY", "au"),
        morph_api_key=os.getenv("MORPH_API_KEY"),
        morph_api_url=os.getenv("MORPH_API_URL", "https://api.morph.io").rstrip("/"),
        state_databases=parse_dataset_ids(os.getenv("MORPH_STATE_DATABASES")),
        dataset_source=os.getenv("DATASET_SOURCE", "morph"),
        dataset_dir=os.getenv("DATASET_DIR", "datasets"),
        max_search_results=int(os.getenv("MAX_SEARCH_RESULTS", "4")),
        max_searches_per_run=int(os.getenv("MAX_SEARCHES_PER_RUN", "100")),
        search_delay_seconds=float(os.getenv("SEARCH_DELAY", "0")),
        max_retries=int(os.getenv("MAX_RETRIES", "3")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        max_page_bytes=int(os.getenv("MAX_PAGE_BYTES", str(2_000_000))),
        user_agent=os.getenv("USER_AGENT", "Mozilla/5.0 (compatible; councillor-emails/1.0)"),
        referer=os.getenv("SEARCH_REFERER") or None,
        db_path=os.getenv("DB_PATH", "data.sqlite"),
        table_name=os.getenv("TABLE_NAME", "data"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
