from __future__ import annotations

from typing import Any, Dict, List

from config.settings import Settings


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_source(name: str, dataset_id: str, settings: Settings):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown source: {name}")
    return _REGISTRY[name](dataset_id, settings)


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)


def build_dataset_sources(settings: Settings) -> List[Any]:
    """One source per configured dataset id, using the configured source kind."""
    return [get_source(settings.dataset_source, dataset_id, settings) for dataset_id in settings.state_databases]
