from __future__ import annotations

from typing import List, Optional, Protocol

from models.search_result import SearchResultItem


class SearchPort(Protocol):
    def search(self, query: str) -> Optional[List[SearchResultItem]]:
        """Return result items, ``[]`` for no results, or ``None`` if the request failed."""
        ...


class PageFetchPort(Protocol):
    def fetch(self, url: str) -> str:
        ...
