from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from frontline.core.config import SourceDescriptor
from frontline.core.errors import ExtractionFailed

IMAGE_EXTENSIONS = "png|jpg|jpeg"


@dataclass(frozen=True)
class ContentReference:
    """Where an asset lives and where it goes, relative to the save root."""

    asset_url: str
    local_path: str


class BaseExtractor(ABC):
    """
    Contract every source variant follows.

    The extractor never parses the page as HTML. It looks for the asset
    reference with a pattern that must contain the current page's formatted
    index, so an image belonging to another page is never picked up.
    """

    def __init__(self, source: SourceDescriptor):
        self.source = source

    @abstractmethod
    def next_page_url(self) -> str:
        """URL of the page for the current `page_index`."""

    @abstractmethod
    def asset_pattern(self) -> str:
        """Regex locating the current page's asset in the page body."""

    @abstractmethod
    def asset_url_from_match(self, matched: str) -> str:
        """Turn the matched text into an absolute asset URL."""

    @abstractmethod
    def cover_url(self) -> str:
        raise NotImplementedError()

    def display_name(self) -> str:
        return f"{self.source.name} ({self.source.variant})"

    def local_path_without_ext(self) -> str:
        return os.path.join(self.source.name, self.source.formatted_index)

    def extract(self, page_body: str) -> ContentReference:
        match = re.search(self.asset_pattern(), page_body, re.IGNORECASE)
        if not match:
            raise ExtractionFailed(self.source.name, self.source.page_index)
        asset_url = self.asset_url_from_match(match.group(0))
        return ContentReference(
            asset_url=asset_url,
            local_path=self.local_path_without_ext() + extension_of(asset_url),
        )

    def cover(self) -> ContentReference:
        url = self.cover_url()
        return ContentReference(
            asset_url=url,
            local_path=os.path.join(self.source.name, "_cover" + extension_of(url)),
        )


def extension_of(url: str) -> str:
    """Extension (with the dot) of the last path segment of `url`."""
    return os.path.splitext(url.rsplit("/", 1)[-1])[1]
