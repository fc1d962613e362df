"""Reddit fetcher using httpx (JSON listing API)."""

from __future__ import annotations

import logging
import time

import httpx

from config.settings import settings
from core.errors import HnReaderError, NetworkError, ParseError
from core.models import FetchResult
from fetchers.base import BaseFetcher

log = logging.getLogger(__name__)


class RedditFetcher(BaseFetcher):
    source_name = "reddit"

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def fetch(self, count: int) -> FetchResult:
        news: dict[int, str] = {}
        errors: list[str] = []
        start = time.monotonic()

        try:
            for i, url in enumerate(self._submissions(count)):
                news[i] = url
            log.info("r/%s: %d submissions fetched", settings.REDDIT_SUBREDDIT, len(news))
        except HnReaderError as e:
            log.debug("Reddit listing failed", exc_info=True)
            errors.append(str(e))
            news = {}

        return self._result(news, errors, start)

    def _submissions(self, count: int) -> list[str]:
        url = (
            f"https://www.reddit.com/r/{settings.REDDIT_SUBREDDIT}/{settings.REDDIT_SORT}.json"
            f"?limit={count}&count={count}&raw_json=1"
        )
        with httpx.Client(
            headers={"User-Agent": settings.USER_AGENT},
            follow_redirects=True,
            timeout=settings.HTTP_TIMEOUT,
            transport=self._transport,
        ) as client:
            try:
                resp = client.get(url)
                resp.raise_for_status()
            except httpx.HTTPError as exc:
                raise NetworkError(f"r/{settings.REDDIT_SUBREDDIT}: {exc}") from exc
            try:
                data = resp.json()
                children = data["data"]["children"]
                return [child["data"]["url"] for child in children]
            except (ValueError, KeyError, TypeError) as exc:
                raise ParseError(f"r/{settings.REDDIT_SUBREDDIT}: {exc}") from exc
