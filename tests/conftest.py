from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.resolve_emails'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests change the environment freely
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
