from __future__ import annotations

import logging
import math
import time

from config.settings import settings
from core.errors import HnReaderError, SelectorMissError
from core.models import FetchResult
from fetchers.base import PageScraper

log = logging.getLogger(__name__)


class LobstersFetcher(PageScraper):
    source_name = "lobsters"

    def __init__(self) -> None:
        self._base_url = settings.LOBSTERS_URL.rstrip("/")
        self._page_size = settings.LOBSTERS_PAGE_SIZE
        self.selector = settings.LOBSTERS_SELECTOR

    def absolute(self, href: str) -> str:
        if href.startswith("/"):
            return self._base_url + href
        return href

    def fetch(self, count: int) -> FetchResult:
        news: dict[int, str] = {}
        errors: list[str] = []
        start = time.monotonic()

        pages = math.ceil(count / self._page_size)
        index = 0
        for p in range(1, pages + 1):
            url = f"{self._base_url}/page/{p}"
            try:
                anchors = self._anchors(self._get_page(url))
            except HnReaderError as e:
                log.debug("Lobsters page %d failed", p, exc_info=True)
                errors.append(str(e))
                continue

            for anchor in anchors:
                if index >= count:
                    break
                try:
                    href = self._href(anchor)
                except SelectorMissError as e:
                    log.warning("can't find any stories... (%s)", e)
                    continue
                news[index] = self.absolute(href)
                index += 1
            log.info("Scraped %s: %d links kept so far", url, index)

        return self._result(news, errors, start)
