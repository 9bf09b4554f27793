"""Exception hierarchy used across the package.

Per-source errors (`TransientHttpError`, `NetworkError`, `ExtractionFailed`,
`DownloadFailed`) stop only the source that raised them. Config and
persistence errors are fatal to the whole run.
"""

from __future__ import annotations


class FrontlineError(Exception):
    """Base class for every error raised by frontline."""


# --- per-source -------------------------------------------------------------


class TransientHttpError(FrontlineError):
    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"Failed to get content at url {url}. "
            f'With status code {status_code}, reason "{reason}"'
        )


class NetworkError(FrontlineError):
    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Network error for {url}: {detail}")


class ExtractionFailed(FrontlineError):
    """No asset reference for the current page was found in the page body.

    Usually means the site changed its markup.
    """

    def __init__(self, name: str, page_index: int):
        self.name = name
        self.page_index = page_index
        super().__init__(
            f"Failed to find a match for page {page_index} of {name}. "
            "Has the format changed?"
        )


class DownloadFailed(FrontlineError):
    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Failed to download {url}: {detail}")


# --- run-fatal --------------------------------------------------------------


class ConfigNotFound(FrontlineError):
    def __init__(self, path):
        self.path = path
        super().__init__(f'Subscription file "{path}" not found.')


class ConfigCorrupt(FrontlineError):
    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f'Subscription file "{path}" could not be read: {detail}')


class PersistenceFailed(FrontlineError):
    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f'Failed to save subscriptions to "{path}": {detail}')
