"""Browser name resolution and URL launching."""

from __future__ import annotations

import logging
import platform
import subprocess
from collections.abc import Sequence

import click
from rapidfuzz.distance import Levenshtein

from core.errors import BrowserOpenError

log = logging.getLogger(__name__)

OS_DARWIN = "darwin"
OS_LINUX = "linux"
OS_WINDOWS = "windows"

BROWSERS: tuple[str, ...] = ("google", "chrome", "mozilla", "firefox", "brave")

# canonical browser -> {os -> application name}
_APP_NAMES: dict[str, dict[str, str]] = {
    "chrome": {OS_DARWIN: "Google Chrome", OS_LINUX: "google-chrome", OS_WINDOWS: "chrome"},
    "firefox": {OS_DARWIN: "Firefox", OS_LINUX: "firefox", OS_WINDOWS: "firefox"},
    "brave": {OS_DARWIN: "Brave", OS_LINUX: "brave", OS_WINDOWS: "brave"},
}

_ALIASES = {"google": "chrome", "mozilla": "firefox"}


def current_os() -> str:
    return platform.system().lower()


def closest_browser(query: str, candidates: Sequence[str] = BROWSERS) -> str:
    """Pick the candidate nearest to *query*.

    An exact match wins outright.  Otherwise every candidate at or below the
    best distance seen so far replaces it, so on ties the later candidate wins.
    """
    shortest = -1
    word = ""
    for candidate in candidates:
        distance = Levenshtein.distance(candidate, query)
        if distance == 0:
            return candidate
        if distance <= shortest or shortest < 0:
            shortest = distance
            word = candidate
    return word


def app_name_for_os(browser: str, os_name: str) -> str:
    canonical = _ALIASES.get(browser, browser)
    return _APP_NAMES.get(canonical, {}).get(os_name, "")


def resolve_browser(query: str, os_name: str | None = None) -> str:
    """Map free text to an application name, or "" for the system default."""
    if not query:
        return ""
    word = closest_browser(query)
    target = app_name_for_os(word, os_name if os_name is not None else current_os())
    log.debug("Resolved browser %r -> %r (%r)", query, word, target)
    return target


class BrowserOpener:
    """Launch URLs with the platform default handler or a named application."""

    def __init__(self, os_name: str | None = None) -> None:
        self._os = os_name if os_name is not None else current_os()
        self.launched: list[subprocess.Popen] = []

    def open_default(self, url: str) -> None:
        if click.launch(url) != 0:
            raise BrowserOpenError(f"default browser could not open {url}")

    def open_with(self, url: str, app_name: str) -> None:
        if self._os == OS_DARWIN:
            self._run(["open", "-a", app_name, url], wait=True)
        elif self._os == OS_WINDOWS:
            self._run(["cmd", "/c", "start", "", app_name, url], wait=True)
        else:
            self._run([app_name, url], wait=False)

    def _run(self, cmd: list[str], wait: bool) -> None:
        try:
            if wait:
                subprocess.run(
                    cmd,
                    check=True,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            else:
                # own session; never waited on
                self.launched.append(
                    subprocess.Popen(
                        cmd,
                        stdout=subprocess.DEVNULL,
                        stderr=subprocess.DEVNULL,
                        start_new_session=True,
                    )
                )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise BrowserOpenError(f"{cmd[0]}: {exc}") from exc
