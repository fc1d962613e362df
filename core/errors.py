from __future__ import annotations


class HnReaderError(Exception):
    """Base class for every error raised by hnreader."""


class NetworkError(HnReaderError, ConnectionError):
    """A request failed or came back with a non-200 status."""


class ParseError(HnReaderError, ValueError):
    """A response body could not be decoded."""


class SelectorMissError(HnReaderError, LookupError):
    """An expected element or attribute was absent from a page."""


class InvalidSourceError(HnReaderError, ValueError):
    """An unknown source identifier was supplied."""


class BrowserOpenError(HnReaderError, OSError):
    """The platform opener could not launch a URL."""
