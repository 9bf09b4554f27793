import os

from conftest import FakeDownloader, FakeFetcher

from frontline.core.config import BaseLinkSource
from frontline.core.errors import (
    DownloadFailed,
    ExtractionFailed,
    NetworkError,
    TransientHttpError,
)
from frontline.core.scraping.fetcher import Found
from frontline.core.scraping.fetcher import NetworkFailure
from frontline.core.scraping.fetcher import TransientError
from frontline.pollers import PollState, SourcePoller


def _comic(page_index=12):
    return BaseLinkSource(name="comic", page_index=page_index, page_num_padding=3, base_link="https://x/")


def _page(n):
    return Found(body=f'<img src="https://x/comic/{n:03d}.deadbeef.jpg">')


def test_single_new_page_then_caught_up(tmp_path):
    source = _comic()
    fetcher = FakeFetcher({"https://x/012.html": _page(12)})
    downloader = FakeDownloader()

    result = SourcePoller(source, tmp_path, fetcher, downloader).run()

    assert result.state is PollState.CAUGHT_UP
    assert result.files == 1
    assert result.first_new_item == os.path.join("comic", "012")
    assert source.page_index == 13
    assert fetcher.requested == ["https://x/012.html", "https://x/013.html"]
    assert downloader.downloads == [
        ("https://x/comic/012.deadbeef.jpg", os.path.join(str(tmp_path), "comic", "012.jpg"))
    ]
    assert (tmp_path / "comic" / "012.jpg").exists()


def test_walks_several_pages_and_keeps_first_item(tmp_path):
    source = _comic(page_index=1)
    fetcher = FakeFetcher({f"https://x/{n:03d}.html": _page(n) for n in range(1, 5)})

    result = SourcePoller(source, tmp_path, fetcher, FakeDownloader()).run()

    assert result.files == 4
    assert source.page_index == 5
    assert result.first_new_item == os.path.join("comic", "001")


def test_first_page_missing_leaves_index_unchanged(tmp_path):
    source = _comic()
    result = SourcePoller(source, tmp_path, FakeFetcher(), FakeDownloader()).run()

    assert result.state is PollState.CAUGHT_UP
    assert not result.failed
    assert result.files == 0
    assert result.first_new_item is None
    assert source.page_index == 12


def test_transient_status_fails_without_advancing(tmp_path):
    source = _comic()
    fetcher = FakeFetcher(
        {"https://x/012.html": _page(12), "https://x/013.html": TransientError(503, "Service Unavailable")}
    )

    result = SourcePoller(source, tmp_path, fetcher, FakeDownloader()).run()

    assert result.failed
    assert isinstance(result.error, TransientHttpError)
    assert result.error.status_code == 503
    assert result.files == 1
    assert source.page_index == 13


def test_network_error_fails(tmp_path):
    source = _comic()
    fetcher = FakeFetcher({"https://x/012.html": NetworkFailure("dns failure")})

    result = SourcePoller(source, tmp_path, fetcher, FakeDownloader()).run()

    assert result.failed
    assert isinstance(result.error, NetworkError)
    assert source.page_index == 12


def test_extraction_failure_is_reported_distinctly(tmp_path):
    source = _comic()
    fetcher = FakeFetcher({"https://x/012.html": Found(body="<html>new layout</html>")})

    result = SourcePoller(source, tmp_path, fetcher, FakeDownloader()).run()

    assert result.failed
    assert isinstance(result.error, ExtractionFailed)
    assert source.page_index == 12


def test_download_failure_does_not_advance(tmp_path):
    source = _comic()
    fetcher = FakeFetcher({"https://x/012.html": _page(12)})
    downloader = FakeDownloader(fail_on={"https://x/comic/012.deadbeef.jpg"})

    result = SourcePoller(source, tmp_path, fetcher, downloader).run()

    assert result.failed
    assert isinstance(result.error, DownloadFailed)
    assert result.files == 0
    assert source.page_index == 12
