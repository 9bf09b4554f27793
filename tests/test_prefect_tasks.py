import logging

from conftest import FakeFetcher

from frontline.core.scraping import prefect_tasks
from frontline.flows.sweep import sync as real_sync


def test_sync_task_returns_plain_summary(monkeypatch, write_state):
    state = write_state([{"variant": "A", "name": "a", "pageIndex": 1, "baseLink": "https://a/"}])
    monkeypatch.setattr(prefect_tasks, "get_run_logger", lambda: logging.getLogger("test"))
    monkeypatch.setattr(
        prefect_tasks,
        "sync",
        lambda path, fetcher=None, covers=False: real_sync(path, fetcher=FakeFetcher(), covers=covers),
    )

    result = prefect_tasks.sync_task.fn(str(state))

    assert result == {
        "updated_files": 0,
        "updated_sources": 0,
        "failed_sources": 0,
        "first_new_items": [],
    }


def test_check_subscriptions_task_counts_sources(monkeypatch, write_state):
    state = write_state(
        [
            {"variant": "A", "name": "a", "baseLink": "https://a/"},
            {"variant": "A", "name": "b", "baseLink": "https://b/"},
        ]
    )
    monkeypatch.setattr(prefect_tasks, "get_run_logger", lambda: logging.getLogger("test"))
    assert prefect_tasks.check_subscriptions_task.fn(str(state)) == 2
