"""HTTP primitives shared by every source: page fetching and asset download.

Prefect task wrappers live in `frontline.core.scraping.prefect_tasks` and are
imported explicitly so the core does not pull Prefect in.
"""

from .downloader import Downloader
from .fetcher import Fetcher, Found, NetworkFailure, NotFound, PageResult, TransientError

__all__ = [
    "Fetcher",
    "Downloader",
    "PageResult",
    "Found",
    "NotFound",
    "TransientError",
    "NetworkFailure",
]
