"""Hacker News front page scraper."""

from __future__ import annotations

import logging
import time

from config.settings import settings
from core.errors import HnReaderError, SelectorMissError
from core.models import FetchResult
from fetchers.base import PageScraper

log = logging.getLogger(__name__)


class HackerNewsFetcher(PageScraper):
    """Scrapes story links from news.ycombinator.com.

    Each page is stored by the anchor's position within that page, so a
    later page overwrites the positions of an earlier one.
    """

    source_name = "hn"

    def __init__(self) -> None:
        self._base_url = settings.HACKERNEWS_URL
        self._page_size = settings.HACKERNEWS_PAGE_SIZE
        self.selector = settings.HACKERNEWS_SELECTOR

    def fetch(self, count: int) -> FetchResult:
        news: dict[int, str] = {}
        errors: list[str] = []
        start = time.monotonic()

        pages = count // self._page_size
        for i in range(pages + 1):
            url = f"{self._base_url}{i + 1}"
            try:
                anchors = self._anchors(self._get_page(url))
            except HnReaderError as e:
                log.debug("Hacker News page %d failed", i + 1, exc_info=True)
                errors.append(str(e))
                continue

            for pos, anchor in enumerate(anchors):
                try:
                    news[pos] = self._href(anchor)
                except SelectorMissError as e:
                    log.warning("can't find any stories... (%s)", e)
            log.info("Scraped %s: %d stories", url, len(anchors))

        return self._result(news, errors, start)
