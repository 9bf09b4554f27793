"""Prefect task wrappers around the sweep.

A Prefect "task" is a unit of work with its own state and logs; a "flow"
composes tasks. The sweep already runs its sources concurrently, so it is
wrapped as one task. No task retries: a failed source simply waits for the
next run, and re-running a whole sweep is what the next scheduled flow run
does anyway.
"""

from __future__ import annotations

from prefect import get_run_logger, task

from frontline.core.scraping.fetcher import Fetcher
from frontline.flows.sweep import SweepSummary, sync
from frontline.services.storage import load_subscriptions


@task(name="check_subscriptions", retries=0)
def check_subscriptions_task(state_path: str) -> int:
    logger = get_run_logger()
    subscriptions = load_subscriptions(state_path)
    logger.info(
        "State file %s lists %d sources", state_path, len(subscriptions.sources)
    )
    return len(subscriptions.sources)


@task(name="sync_subscriptions", retries=0)
def sync_task(state_path: str, timeout: float = 15, covers: bool = False) -> dict:
    logger = get_run_logger()
    summary: SweepSummary = sync(state_path, fetcher=Fetcher(timeout=timeout), covers=covers)
    for result in summary.results:
        if result.failed:
            logger.error("Source %s failed: %s", result.name, result.error)
        elif result.files:
            logger.info("Source %s: %d new files", result.name, result.files)
    logger.info(
        "Updated %d sources with %d files.",
        summary.updated_sources,
        summary.updated_files,
    )
    return {
        "updated_files": summary.updated_files,
        "updated_sources": summary.updated_sources,
        "failed_sources": summary.failed_sources,
        "first_new_items": summary.first_new_items,
    }
