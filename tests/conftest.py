import httpx
import pytest

from core.errors import BrowserOpenError
from fetchers import base


class FakeAnchor:
    def __init__(self, href):
        self.attrib = {} if href is None else {"href": href}


class FakePage:
    def __init__(self, hrefs, status=200):
        self.status = status
        self._hrefs = list(hrefs)
        self.selectors = []

    def css(self, selector):
        self.selectors.append(selector)
        return [FakeAnchor(h) for h in self._hrefs]


class FakeWeb:
    """Serves canned pages by URL in place of scrapling's Fetcher"""

    def __init__(self):
        self.pages = {}
        self.requested = []

    def add(self, url, hrefs, status=200):
        self.pages[url] = FakePage(hrefs, status)
        return self.pages[url]

    def fetcher_class(self):
        web = self

        class _Fetcher:
            def get(self, url, **kwargs):
                web.requested.append(url)
                if url not in web.pages:
                    raise ConnectionError("connection refused")
                return web.pages[url]

        return _Fetcher


class FakeOpener:
    """Records every open request; can simulate missing or broken browsers"""

    def __init__(self, missing_apps=(), default_fails=False):
        self.missing_apps = set(missing_apps)
        self.default_fails = default_fails
        self.calls = []

    def open_default(self, url):
        self.calls.append(("default", url))
        if self.default_fails:
            raise BrowserOpenError("no default browser")

    def open_with(self, url, app_name):
        self.calls.append((app_name, url))
        if app_name in self.missing_apps:
            raise BrowserOpenError(f"{app_name} not installed")

    @property
    def urls(self):
        return [url for _, url in self.calls]


def rss_document(links):
    items = "".join(
        f"<item><title>Story {i}</title><link>{link}</link></item>"
        for i, link in enumerate(links)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Feed</title>'
        "<link>https://example.com</link><description>test</description>"
        f"{items}</channel></rss>"
    ).encode("utf-8")


def static_transport(body=b"", status=200, content_type="application/xml"):
    """httpx transport that answers every request with the same response"""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(status, content=body, headers={"Content-Type": content_type})

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


def failing_transport():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def fake_web(monkeypatch):
    web = FakeWeb()
    monkeypatch.setattr(base, "Fetcher", web.fetcher_class())
    return web


@pytest.fixture
def opener():
    return FakeOpener()
