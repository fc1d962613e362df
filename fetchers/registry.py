from __future__ import annotations

from core.models import SourceSpec
from fetchers.base import BaseFetcher
from fetchers.feeds import DevToFetcher, DZoneFetcher
from fetchers.hackernews import HackerNewsFetcher
from fetchers.lobsters import LobstersFetcher
from fetchers.reddit import RedditFetcher

FETCHERS: dict[SourceSpec, type[BaseFetcher]] = {
    SourceSpec.HACKERNEWS: HackerNewsFetcher,
    SourceSpec.REDDIT: RedditFetcher,
    SourceSpec.LOBSTERS: LobstersFetcher,
    SourceSpec.DZONE: DZoneFetcher,
    SourceSpec.DEVTO: DevToFetcher,
}


def build_fetcher(source: SourceSpec) -> BaseFetcher:
    return FETCHERS[source]()
