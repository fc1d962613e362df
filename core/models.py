from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.errors import InvalidSourceError


class SourceSpec(str, Enum):
    """News sources a run can read from."""

    HACKERNEWS = "hn"
    REDDIT = "reddit"
    LOBSTERS = "lobsters"
    DZONE = "dzone"
    DEVTO = "devto"

    @classmethod
    def parse(cls, name: str) -> SourceSpec:
        if name == "hackernews":
            return cls.HACKERNEWS
        try:
            return cls(name)
        except ValueError:
            raise InvalidSourceError(f"invalid source: {name}") from None


@dataclass
class FetchResult:
    """Outcome of a single fetch.

    ``links`` maps a zero-based position to a story URL.  Positions are not
    guaranteed to be contiguous; consumers must sort the keys themselves.
    """

    source: str
    links: dict[int, str] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class RunRequest:
    tabs: int = 10
    browser: str = ""
    source: SourceSpec = SourceSpec.HACKERNEWS
