from .repos import CouncillorsRepoPort
from .search import PageFetchPort, SearchPort
from .source import DatasetSourcePort

__all__ = [
    "CouncillorsRepoPort",
    "DatasetSourcePort",
    "PageFetchPort",
    "SearchPort",
]
