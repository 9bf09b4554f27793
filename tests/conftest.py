import json
from pathlib import Path

import pytest

from frontline.core.errors import DownloadFailed
from frontline.core.scraping.fetcher import NotFound


class FakeFetcher:
    """Serves canned `PageResult`s by URL; any other URL is a 404."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.requested = []

    def fetch_page(self, url):
        self.requested.append(url)
        return self.pages.get(url, NotFound())


class FakeDownloader:
    """Writes a few bytes to the destination instead of downloading."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.downloads = []

    def download(self, url, dest):
        if url in self.fail_on:
            raise DownloadFailed(url, "boom")
        path = Path(dest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"img:" + url.encode())
        self.downloads.append((url, str(dest)))
        return {"path": str(dest), "url": url}


@pytest.fixture
def write_state(tmp_path):
    def _write(sources, save_root="saved"):
        path = tmp_path / "subscriptions.json"
        path.write_text(json.dumps({"saveRoot": save_root, "sources": sources}))
        return path

    return _write
