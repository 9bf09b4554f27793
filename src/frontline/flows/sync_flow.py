"""
Prefect flow that runs one frontline sweep.

Lets the sweep be deployed and scheduled like any other Prefect pipeline.
The flow validates the state file first, so a missing or broken file fails
the flow run before any network traffic.
"""

from __future__ import annotations

from prefect import flow, get_run_logger

from frontline.core.scraping.prefect_tasks import check_subscriptions_task, sync_task


@flow(name="frontline sync")
def frontline_sync_flow(state_path: str, timeout: float = 15, covers: bool = False) -> dict:
    logger = get_run_logger()
    n_sources = check_subscriptions_task(state_path)
    if not n_sources:
        logger.info("No sources in %s, nothing to do.", state_path)
        return {
            "updated_files": 0,
            "updated_sources": 0,
            "failed_sources": 0,
            "first_new_items": [],
        }

    result = sync_task(state_path, timeout=timeout, covers=covers)
    if result["failed_sources"]:
        logger.error("%d sources failed", result["failed_sources"])
    return result


if __name__ == "__main__":
    import sys

    frontline_sync_flow(sys.argv[1] if len(sys.argv) > 1 else "subscriptions.json")
