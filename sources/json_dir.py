from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from config.settings import Settings
from sources.base import ensure_rows
from sources.registry import register


class JsonDirDatasetSource:
    """Datasets exported as ``<dataset_dir>/<dataset_id>.json``."""

    source_name = "json_dir"

    def __init__(self, dataset_id: str, settings: Settings):
        self.dataset_id = dataset_id
        self.path = Path(settings.dataset_dir) / f"{dataset_id}.json"

    def fetch(self) -> List[Dict[str, Any]]:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return ensure_rows(data, self.dataset_id)


def _register():
    register(JsonDirDatasetSource.source_name, JsonDirDatasetSource)


_register()
