from __future__ import annotations

import logging
import time

import feedparser
import httpx

from config.settings import settings
from core.errors import HnReaderError, NetworkError, ParseError
from core.models import FetchResult
from fetchers.base import BaseFetcher

log = logging.getLogger(__name__)


def parse_feed_links(body: bytes | str) -> list[str]:
    """Return the ``channel > item > link`` values of an RSS document in order."""
    feed = feedparser.parse(body)
    if feed.bozo and not feed.entries:
        raise ParseError(f"malformed feed: {feed.get('bozo_exception')}")
    return [entry.get("link", "") for entry in feed.entries]


class FeedFetcher(BaseFetcher):
    """Reads story links from a single RSS feed."""

    feed_url: str

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def fetch(self, count: int) -> FetchResult:
        news: dict[int, str] = {}
        errors: list[str] = []
        start = time.monotonic()

        try:
            links = parse_feed_links(self._download())
        except HnReaderError as e:
            log.debug("Feed %s failed", self.feed_url, exc_info=True)
            errors.append(str(e))
            return self._result(news, errors, start)

        for i, link in enumerate(links):
            if i >= count:
                break
            news[i] = link
        log.info("Feed %s: %d of %d items kept", self.feed_url, len(news), len(links))
        return self._result(news, errors, start)

    def _download(self) -> bytes:
        with httpx.Client(
            headers={"User-Agent": settings.USER_AGENT},
            follow_redirects=True,
            timeout=settings.HTTP_TIMEOUT,
            transport=self._transport,
        ) as client:
            try:
                resp = client.get(self.feed_url)
                resp.raise_for_status()
            except httpx.HTTPError as exc:
                raise NetworkError(f"{self.feed_url}: {exc}") from exc
            return resp.content


class DZoneFetcher(FeedFetcher):
    source_name = "dzone"

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(transport)
        self.feed_url = settings.DZONE_FEED_URL


class DevToFetcher(FeedFetcher):
    source_name = "devto"

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(transport)
        self.feed_url = settings.DEVTO_FEED_URL
