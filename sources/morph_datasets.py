from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from config.settings import Settings
from sources.base import ensure_rows
from sources.registry import register


class MorphDatasetSource:
    """A scraper's table on morph.io, read through its JSON API."""

    source_name = "morph"

    def __init__(self, dataset_id: str, settings: Settings):
        self.dataset_id = dataset_id
        self.settings = settings

    @property
    def url(self) -> str:
        return f"{self.settings.morph_api_url}/{self.dataset_id}/data.json"

    def fetch(self) -> List[Dict[str, Any]]:
        params = {
            "key": self.settings.morph_api_key,
            "query": "SELECT * FROM data",
        }
        logging.info(f"Fetching dataset {self.dataset_id}", extra={"dataset": self.dataset_id})
        response = requests.get(self.url, params=params, timeout=self.settings.request_timeout_seconds)
        response.raise_for_status()
        return ensure_rows(response.json(), self.dataset_id)


def _register():
    register(MorphDatasetSource.source_name, MorphDatasetSource)


_register()
