"""
Run every source of a subscription set once, all at the same time.

One worker thread per source (no pool limit). Each worker owns exactly one
descriptor, so advancing `page_index` needs no locking; results are read back
only after every worker has finished. The state file is written once, after
the sweep, and only if at least one new file was downloaded.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from frontline.core.config import SubscriptionSet
from frontline.core.errors import FrontlineError
from frontline.core.scraping.downloader import Downloader
from frontline.core.scraping.fetcher import Fetcher
from frontline.extractors import extractor_for
from frontline.pollers import PollResult, PollState, SourcePoller
from frontline.services.storage import (
    load_subscriptions,
    resolve_save_root,
    save_subscriptions,
)

logger = logging.getLogger(__name__)


@dataclass
class SweepSummary:
    updated_files: int = 0
    updated_sources: int = 0
    failed_sources: int = 0
    # first new asset of each updated source, in source order, without extension
    first_new_items: List[str] = field(default_factory=list)
    results: List[PollResult] = field(default_factory=list)
    save_root: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failed_sources == 0


def summarize(results: Sequence[PollResult]) -> SweepSummary:
    summary = SweepSummary(results=list(results))
    for result in results:
        summary.updated_files += result.files
        if result.files:
            summary.updated_sources += 1
        if result.failed:
            summary.failed_sources += 1
        if result.first_new_item is not None:
            summary.first_new_items.append(result.first_new_item)
    return summary


def _poll(poller: SourcePoller) -> PollResult:
    try:
        return poller.run()
    except Exception as exc:
        # the poller keeps its own tally; this only covers failures outside its loop
        logger.exception("Unexpected error while updating %s", poller.source.name)
        return PollResult(
            name=poller.source.name,
            state=PollState.FAILED,
            error=FrontlineError(str(exc)),
        )


def run_sweep(
    subscriptions: SubscriptionSet,
    save_root: str | os.PathLike | None = None,
    fetcher: Fetcher | None = None,
    downloader: Downloader | None = None,
) -> SweepSummary:
    """Poll every source concurrently and aggregate the outcomes."""
    if save_root is None:
        save_root = subscriptions.save_root
    fetcher = fetcher or Fetcher(pool_maxsize=max(len(subscriptions.sources), 1))
    downloader = downloader or Downloader(fetcher)

    pollers = [
        SourcePoller(source, save_root, fetcher=fetcher, downloader=downloader)
        for source in subscriptions.sources
    ]
    if not pollers:
        return SweepSummary()

    with ThreadPoolExecutor(
        max_workers=len(pollers), thread_name_prefix="frontline-source"
    ) as pool:
        futures = [pool.submit(_poll, poller) for poller in pollers]
        results = [future.result() for future in futures]

    summary = summarize(results)
    logger.info(
        "Updated %d sources with %d files (%d failed).",
        summary.updated_sources,
        summary.updated_files,
        summary.failed_sources,
    )
    return summary


def sync(
    state_path: str | os.PathLike,
    fetcher: Fetcher | None = None,
    downloader: Downloader | None = None,
    covers: bool = False,
) -> SweepSummary:
    """Load the state file, sweep all sources and persist progress if any.

    Config errors are raised before anything is fetched. `PersistenceFailed`
    is raised after the sweep if the new state could not be written.
    """
    subscriptions = load_subscriptions(state_path)
    save_root = resolve_save_root(subscriptions, state_path)
    fetcher = fetcher or Fetcher(pool_maxsize=max(len(subscriptions.sources), 1))
    downloader = downloader or Downloader(fetcher)

    if covers:
        fetch_covers(subscriptions, save_root, downloader)

    summary = run_sweep(subscriptions, save_root, fetcher=fetcher, downloader=downloader)
    summary.save_root = str(save_root)
    if summary.updated_files > 0:
        save_subscriptions(subscriptions, state_path)
    return summary


def fetch_covers(
    subscriptions: SubscriptionSet,
    save_root: str | os.PathLike,
    downloader: Downloader,
) -> int:
    """Download each source's cover image unless it is already on disk."""
    fetched = 0
    for source in subscriptions.sources:
        cover = extractor_for(source).cover()
        dest = os.path.join(save_root, cover.local_path)
        if os.path.exists(dest):
            continue
        try:
            downloader.download(cover.asset_url, dest)
        except FrontlineError as exc:
            logger.warning("No cover for %s: %s", source.name, exc)
            continue
        fetched += 1
    return fetched
