from __future__ import annotations

from pydantic_settings import BaseSettings

APP_NAME = "hnreader"
APP_VERSION = "v1.1"
APP_AUTHOR = "Bunchhieng Soth"
APP_EMAIL = "Bunchhieng@gmail.com"
APP_DESCRIPTION = (
    "Open multiple tech news feeds in your favorite browser through the command line."
)


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "WARNING"

    # HTTP
    HTTP_TIMEOUT: float = 30.0
    USER_AGENT: str = f"desktop:com.github.Bunchhieng.{APP_NAME}:{APP_VERSION}"

    # Hacker News
    HACKERNEWS_URL: str = "https://news.ycombinator.com/news?p="
    HACKERNEWS_PAGE_SIZE: int = 30
    HACKERNEWS_SELECTOR: str = ".titleline > a"

    # Reddit
    REDDIT_SUBREDDIT: str = "programming"
    REDDIT_SORT: str = "hot"

    # Lobsters
    LOBSTERS_URL: str = "https://lobste.rs"
    LOBSTERS_PAGE_SIZE: int = 25
    LOBSTERS_SELECTOR: str = ".link a.u-url"

    # Feeds
    DZONE_FEED_URL: str = "http://feeds.dzone.com/home"
    DEVTO_FEED_URL: str = "https://dev.to/feed"

    # Command defaults
    DEFAULT_TABS: int = 10
    DEFAULT_SOURCE: str = "hn"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HNREADER_",
        "extra": "ignore",
    }


settings = Settings()
