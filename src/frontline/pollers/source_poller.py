"""Walk one source forward page by page until it is caught up or fails.

Each step is fetch -> extract -> download -> advance. Steps are strictly
sequential because the next page URL depends on the index advanced by the
previous step. `page_index` is only incremented after the asset of that page
has been written in full.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from frontline.core.config import SourceDescriptor
from frontline.core.errors import FrontlineError, NetworkError, TransientHttpError
from frontline.core.scraping import fetcher as pages
from frontline.core.scraping.downloader import Downloader
from frontline.core.scraping.fetcher import Fetcher
from frontline.extractors import BaseExtractor, extractor_for

logger = logging.getLogger(__name__)


class PollState(str, Enum):
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    DOWNLOADING = "downloading"
    ADVANCED = "advanced"
    CAUGHT_UP = "caught_up"
    FAILED = "failed"


@dataclass
class PollResult:
    """Outcome of one source's run."""

    name: str
    state: PollState
    files: int = 0
    # save-root relative path, without extension, of the first new asset
    first_new_item: Optional[str] = None
    error: Optional[FrontlineError] = None

    @property
    def failed(self) -> bool:
        return self.state is PollState.FAILED


class SourcePoller:
    """Drive a single source through its pages.

    The poller is the only writer of its source's `page_index` while it runs.
    """

    def __init__(
        self,
        source: SourceDescriptor,
        save_root: str | os.PathLike,
        fetcher: Fetcher | None = None,
        downloader: Downloader | None = None,
    ):
        self.source = source
        self.save_root = save_root
        self.fetcher = fetcher or Fetcher()
        self.downloader = downloader or Downloader(self.fetcher)
        self.extractor: BaseExtractor = extractor_for(source)
        self.state = PollState.FETCHING

    def run(self) -> PollResult:
        result = PollResult(name=self.source.name, state=self.state)
        logger.info("Updating source %s", self.extractor.display_name())
        while True:
            try:
                advanced = self.step()
            except FrontlineError as exc:
                self.state = PollState.FAILED
                result.error = exc
                logger.error(
                    "Encountered an error while updating source %s: %s",
                    self.source.name,
                    exc,
                )
                break
            except Exception as exc:
                # files already saved this run still count
                self.state = PollState.FAILED
                result.error = FrontlineError(f"Unexpected error: {exc!r}")
                result.error.__cause__ = exc
                logger.exception(
                    "Unexpected error while updating source %s", self.source.name
                )
                break
            if not advanced:
                break
            result.files += 1
            if result.first_new_item is None:
                result.first_new_item = advanced
        result.state = self.state
        return result

    def step(self) -> Optional[str]:
        """Run one fetch/extract/download/advance step.

        Returns the local path (without extension) of the page just saved, or
        None once the next page does not exist yet. Raises a `FrontlineError`
        when the source has to stop for this run.
        """
        self.state = PollState.FETCHING
        url = self.extractor.next_page_url()
        page = self.fetcher.fetch_page(url)

        if isinstance(page, pages.NotFound):
            logger.info("No page yet for %s. Stopping...", url)
            self.state = PollState.CAUGHT_UP
            return None
        if isinstance(page, pages.TransientError):
            raise TransientHttpError(url, page.status_code, page.reason)
        if isinstance(page, pages.NetworkFailure):
            raise NetworkError(url, page.detail)

        self.state = PollState.EXTRACTING
        content = self.extractor.extract(page.body)
        saved_as = self.extractor.local_path_without_ext()

        self.state = PollState.DOWNLOADING
        dest = os.path.join(self.save_root, content.local_path)
        logger.info("Downloading image from %s and saving to %s", content.asset_url, dest)
        self.downloader.download(content.asset_url, dest)

        self.source.increment()
        self.state = PollState.ADVANCED
        return saved_as
