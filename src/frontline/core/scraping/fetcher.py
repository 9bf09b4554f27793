"""HTTP fetcher with timeout, optional retries and UA rotation.

Provides a small `Fetcher` object exposing `get`, `stream_get` and
`fetch_page`, plus the `PageResult` variants `fetch_page` returns.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

DEFAULT_UA_POOL = [
    "Mozilla/5.0 (compatible; frontline/0.1; +https://example.org/bot)",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
]


@dataclass(frozen=True)
class Found:
    body: str


@dataclass(frozen=True)
class NotFound:
    """HTTP 404: the page does not exist yet."""


@dataclass(frozen=True)
class TransientError:
    status_code: int
    reason: str


@dataclass(frozen=True)
class NetworkFailure:
    detail: str


PageResult = Union[Found, NotFound, TransientError, NetworkFailure]


class Fetcher:
    """Small HTTP client shared by every source of a run.

    The underlying `requests.Session` only keeps its connection pool between
    calls, so one instance can be used from several threads at once.

    Usage:
        f = Fetcher(timeout=15)
        result = f.fetch_page(url)
    """

    def __init__(
        self,
        timeout: float = 15,
        retries: int = 0,
        backoff_factor: float = 0.3,
        ua_pool: Optional[list[str]] = None,
        pool_maxsize: int = 32,
    ) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        # raise_on_status=False keeps failing statuses as responses so they
        # can be classified by the caller once retries are exhausted.
        retry = Retry(
            total=retries,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset(["GET"]),
            backoff_factor=backoff_factor,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(
            max_retries=retry, pool_connections=pool_maxsize, pool_maxsize=pool_maxsize
        )
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.ua_pool = ua_pool or DEFAULT_UA_POOL

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": random.choice(self.ua_pool)}
        if headers:
            base.update(headers)
        return base

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        return self.session.get(
            url, headers=self._headers(headers), timeout=self.timeout, **kwargs
        )

    def stream_get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        # Streamed GET for downloading binary assets
        return self.session.get(
            url,
            headers=self._headers(headers),
            timeout=self.timeout,
            stream=True,
            **kwargs,
        )

    def fetch_page(self, url: str) -> PageResult:
        """GET one page and classify the outcome. Never raises for HTTP/IO."""
        try:
            resp = self.get(url)
        except requests.RequestException as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            return NetworkFailure(detail=str(exc))

        with resp:
            if resp.status_code == 404:
                return NotFound()
            if not resp.ok:
                return TransientError(
                    status_code=resp.status_code, reason=resp.reason or ""
                )
            try:
                return Found(body=resp.text)
            except requests.RequestException as exc:
                return NetworkFailure(detail=str(exc))
