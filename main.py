"""hnreader — entry point."""

from __future__ import annotations

import logging
import os

import certifi
import click

# Fix SSL cert resolution for curl_cffi (used by Scrapling)
os.environ.setdefault("CURL_CA_BUNDLE", certifi.where())
os.environ.setdefault("SSL_CERT_FILE", certifi.where())

from config.settings import (  # noqa: E402
    APP_AUTHOR,
    APP_DESCRIPTION,
    APP_EMAIL,
    APP_NAME,
    APP_VERSION,
    settings,
)
from core.console import blue, configure_logging, print_error  # noqa: E402
from core.errors import BrowserOpenError, InvalidSourceError  # noqa: E402
from core.models import RunRequest, SourceSpec  # noqa: E402
from core.runner import run_request  # noqa: E402

log = logging.getLogger(__name__)


def print_banner() -> None:
    click.echo(blue(APP_NAME) + " - " + blue(APP_VERSION))
    click.echo(blue(APP_DESCRIPTION) + "\n")


@click.group(help=APP_DESCRIPTION, epilog=f"Author: {APP_AUTHOR} <{APP_EMAIL}>")
@click.version_option(
    APP_VERSION,
    prog_name=APP_NAME,
    message=f"%(prog)s, version %(version)s\nAuthor: {APP_AUTHOR} <{APP_EMAIL}>",
)
def cli() -> None:
    configure_logging(settings.LOG_LEVEL)


@cli.command(
    "run",
    help="Start hnreader with default option (10 news and default browser)",
)
@click.option(
    "--tabs",
    "-t",
    type=click.IntRange(min=1),
    default=settings.DEFAULT_TABS,
    show_default=True,
    help="Specify number of tabs",
)
@click.option("--browser", "-b", default="", help="Specify browser")
@click.option(
    "--source",
    "-s",
    default=settings.DEFAULT_SOURCE,
    show_default=True,
    help='Specify news source (one of "hn", "reddit", "lobsters", "dzone", "devto")',
)
def run(tabs: int, browser: str, source: str) -> None:
    print_banner()
    try:
        request = RunRequest(tabs=tabs, browser=browser, source=SourceSpec.parse(source))
    except InvalidSourceError as e:
        print_error(str(e))
        return

    try:
        opened = run_request(request)
    except BrowserOpenError as e:
        log.debug("Default browser failed: %s", e)
        raise SystemExit(1) from e
    log.info("Opened %d tabs", len(opened))


cli.add_command(run, name="r")


if __name__ == "__main__":
    cli()
