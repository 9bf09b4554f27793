"""
Downloader for page assets.

Streams one file to an exact local path:

- parent folders are created on demand;
- bytes go to a `<path>.part` sibling first and are renamed onto the final
  path only once the whole body was received, so an interrupted transfer
  never looks like a finished image;
- a SHA-256 of the content is computed while writing.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import requests

from frontline.core.errors import DownloadFailed
from frontline.core.scraping.fetcher import Fetcher

logger = logging.getLogger(__name__)


class Downloader:
    """Download a single file and return metadata about it.

    Accepts an optional `Fetcher` so a run can share one HTTP session between
    page fetches and downloads, and so tests can inject a fake.
    """

    chunk_size = 8192

    def __init__(self, fetcher: Fetcher | None = None):
        self.fetcher = fetcher or Fetcher()

    def download(self, url: str, dest: str | os.PathLike) -> Dict[str, Optional[str]]:
        """Download `url` to `dest`, replacing any previous file there.

        Raises `DownloadFailed` on any HTTP status >= 400, transport error or
        local write error.
        """
        out_path = Path(dest)
        part_path = out_path.with_name(out_path.name + ".part")
        hasher = hashlib.sha256()
        total = 0
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            resp = self.fetcher.stream_get(url)
            with resp as r:
                r.raise_for_status()
                with open(part_path, "wb") as fh:
                    for chunk in r.iter_content(chunk_size=self.chunk_size):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        hasher.update(chunk)
                        total += len(chunk)
            os.replace(part_path, out_path)
        except (requests.RequestException, OSError) as exc:
            _discard(part_path)
            raise DownloadFailed(url, str(exc)) from exc

        logger.debug("Saved %s (%d bytes)", out_path, total)
        return {
            "path": str(out_path),
            "url": url,
            "sha256": hasher.hexdigest(),
            "size": str(total),
            "status_code": str(resp.status_code),
        }


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove partial file %s: %s", path, exc)
