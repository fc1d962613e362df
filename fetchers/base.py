from __future__ import annotations

import time
from abc import ABC, abstractmethod

from scrapling import Fetcher

from core.errors import NetworkError, ParseError, SelectorMissError
from core.models import FetchResult


class BaseFetcher(ABC):
    source_name: str

    @abstractmethod
    def fetch(self, count: int) -> FetchResult:
        """Return at most *count* story links, never raising for I/O errors."""
        ...

    def _result(
        self, links: dict[int, str], errors: list[str], started: float
    ) -> FetchResult:
        return FetchResult(
            source=self.source_name,
            links=links,
            errors=errors,
            duration_seconds=time.monotonic() - started,
        )


class PageScraper(BaseFetcher):
    """Shared plumbing for fetchers that scrape paginated HTML listings."""

    selector: str

    def _get_page(self, url: str):
        try:
            page = Fetcher().get(url, stealthy_headers=True, follow_redirects=True)
        except Exception as exc:
            raise NetworkError(f"{url}: {exc}") from exc
        if page.status != 200:
            raise NetworkError(f"{url}: HTTP {page.status}")
        return page

    def _anchors(self, page) -> list:
        try:
            return list(page.css(self.selector))
        except Exception as exc:
            raise ParseError(f"{self.source_name}: {exc}") from exc

    @staticmethod
    def _href(anchor) -> str:
        href = anchor.attrib.get("href")
        if not href:
            raise SelectorMissError("anchor has no href")
        return href
