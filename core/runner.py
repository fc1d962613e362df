from __future__ import annotations

import logging
from typing import Protocol

from core.browser import BrowserOpener, resolve_browser
from core.console import print_error
from core.errors import BrowserOpenError
from core.models import FetchResult, RunRequest
from fetchers.base import BaseFetcher
from fetchers.registry import build_fetcher

log = logging.getLogger(__name__)


class Opener(Protocol):
    def open_default(self, url: str) -> None: ...

    def open_with(self, url: str, app_name: str) -> None: ...


def dispatch(
    result: FetchResult, tabs: int, browser: str, opener: Opener
) -> list[str]:
    """Open the fetched links in ascending position order.

    The loop stops when a position equals *tabs* exactly.  A failing named
    browser falls back to the default opener; a failing default opener raises
    :class:`BrowserOpenError`.  Returns the URLs that were opened.
    """
    opened: list[str] = []
    for key in sorted(result.links):
        if key == tabs:
            break

        url = result.links[key]
        if not browser:
            print_error("Trying default browser...")
            opener.open_default(url)
        else:
            try:
                opener.open_with(url, browser)
            except BrowserOpenError as exc:
                log.debug("open_with failed: %s", exc)
                print_error(
                    f"{browser} is not found on this computer, trying default browser..."
                )
                opener.open_default(url)
        opened.append(url)
    return opened


def run_app(
    tabs: int,
    browser: str,
    fetcher: BaseFetcher,
    opener: Opener | None = None,
    os_name: str | None = None,
) -> list[str]:
    """Fetch *tabs* stories from *fetcher* and open them."""
    result = fetcher.fetch(tabs)
    for error in result.errors:
        print_error(error)
    log.info(
        "Fetched %d links from %s in %.1fs (%d errors)",
        len(result.links),
        result.source,
        result.duration_seconds,
        len(result.errors),
    )

    target = resolve_browser(browser, os_name)
    return dispatch(result, tabs, target, opener or BrowserOpener(os_name))


def run_request(request: RunRequest, opener: Opener | None = None) -> list[str]:
    return run_app(request.tabs, request.browser, build_fetcher(request.source), opener)
