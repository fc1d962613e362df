import pytest
from click.testing import CliRunner

import main
from conftest import FakeOpener
from core import runner


@pytest.fixture
def cli_runner(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda level: None)
    return CliRunner()


@pytest.fixture
def patched_opener(monkeypatch):
    def install(opener):
        monkeypatch.setattr(runner, "BrowserOpener", lambda os_name=None: opener)
        return opener

    return install


def test_version(cli_runner):
    result = cli_runner.invoke(main.cli, ["--version"])
    assert result.exit_code == 0
    assert "v1.1" in result.output
    assert "Author: Bunchhieng Soth <Bunchhieng@gmail.com>" in result.output


def test_help_shows_author(cli_runner):
    result = cli_runner.invoke(main.cli, ["--help"])
    assert "Bunchhieng Soth" in result.output


def test_invalid_source_is_reported(cli_runner, monkeypatch):
    calls = []
    monkeypatch.setattr(main, "run_request", lambda request: calls.append(request))

    result = cli_runner.invoke(main.cli, ["run", "--source", "bogus"])

    assert result.exit_code == 0
    assert "invalid source: bogus" in result.output
    assert calls == []


def test_banner_is_printed(cli_runner, monkeypatch):
    monkeypatch.setattr(main, "run_request", lambda request: [])
    result = cli_runner.invoke(main.cli, ["run"])
    assert "hnreader - v1.1" in result.output


def test_options_reach_the_request(cli_runner, monkeypatch):
    requests = []
    monkeypatch.setattr(main, "run_request", lambda request: requests.append(request) or [])

    result = cli_runner.invoke(main.cli, ["r", "-t", "3", "-b", "firefox", "-s", "hackernews"])

    assert result.exit_code == 0
    assert requests[0].tabs == 3
    assert requests[0].browser == "firefox"
    assert requests[0].source.value == "hn"


def test_hackernews_end_to_end(cli_runner, fake_web, patched_opener):
    fake_web.add(
        "https://news.ycombinator.com/news?p=1",
        [f"https://story/{i}" for i in range(30)],
    )
    opener = patched_opener(FakeOpener())

    result = cli_runner.invoke(main.cli, ["run", "--tabs", "5"])

    assert result.exit_code == 0
    assert fake_web.requested == ["https://news.ycombinator.com/news?p=1"]
    assert opener.urls == [f"https://story/{i}" for i in range(5)]


def test_fatal_open_failure_exits_1(cli_runner, fake_web, patched_opener):
    fake_web.add("https://lobste.rs/page/1", ["/s/1", "/s/2"])
    opener = patched_opener(FakeOpener(default_fails=True))

    result = cli_runner.invoke(main.cli, ["run", "-s", "lobsters", "-t", "2"])

    assert result.exit_code == 1
    assert opener.calls == [("default", "https://lobste.rs/s/1")]


def test_zero_tabs_rejected(cli_runner):
    result = cli_runner.invoke(main.cli, ["run", "-t", "0"])
    assert result.exit_code == 2
