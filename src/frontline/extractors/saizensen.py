"""Extractors for the two page layouts served by the Saizensen comic host.

Page URLs end with the zero-padded page number followed by `.html`. The image
for a page sits in a sub folder and its file name starts with the same padded
number, followed by an id and the image extension, e.g.
`https://x/comic/012.deadbeef.jpg`.
"""

from __future__ import annotations

import re

from frontline.core.config import BaseLinkSource, DomainSource

from .base import IMAGE_EXTENSIONS, BaseExtractor

COVER_PATH = "res/images/cover.png"


class BaseLinkExtractor(BaseExtractor):
    """Variant "A": absolute image URLs under `base_link` anywhere in the page."""

    source: BaseLinkSource

    def next_page_url(self) -> str:
        return f"{self.source.base_link}{self.source.formatted_index}.html"

    def asset_pattern(self) -> str:
        # <base_link><folders and comic name><page#>.<some id>.<img ext>
        return r"{0}[a-z0-9\-/.]+?{1}[a-zA-Z0-9\-/.]*?\.({2})".format(
            re.escape(self.source.base_link),
            re.escape(self.source.formatted_index),
            IMAGE_EXTENSIONS,
        )

    def asset_url_from_match(self, matched: str) -> str:
        return matched

    def cover_url(self) -> str:
        return self.source.base_link + COVER_PATH


class DomainExtractor(BaseExtractor):
    """Variant "B": quoted, site-relative image paths under `domain_subfolder`."""

    source: DomainSource

    def _page_base(self) -> str:
        return self.source.domain + self.source.domain_subfolder

    def next_page_url(self) -> str:
        return f"{self._page_base()}{self.source.formatted_index}.html"

    def asset_pattern(self) -> str:
        # "/<domain_subfolder>/<more folders>/<page#>.<some id>.<img ext>"
        return r'"{0}[a-zA-Z0-9\-/.]+?{1}\.[a-zA-Z0-9\-]*?\.({2})"'.format(
            re.escape(self.source.domain_subfolder),
            re.escape(self.source.formatted_index),
            IMAGE_EXTENSIONS,
        )

    def asset_url_from_match(self, matched: str) -> str:
        return self.source.domain + matched.strip('"')

    def cover_url(self) -> str:
        return self._page_base() + COVER_PATH
