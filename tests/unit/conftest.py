"""
Fakes for unit testing the browser helpers without a browser.

The URL matcher and the scroll check poll against ``time.monotonic``
and sleep through ``page.wait_for_timeout``. The fakes below tie the
two together: every wait advances a fake clock, so a test that "waits"
eight seconds finishes instantly and can still assert how much time
the helper believed had passed.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from storefront import actions
from storefront.config import Config

HOME_URL = "https://shop.test/index.php?route=common/home"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUrlPage:
    """
    Minimal stand-in for ``playwright.sync_api.Page`` whose URL follows a timeline.

    Args:
        clock: Clock shared with the code under test.
        timeline: ``(seconds, url)`` pairs; the URL switches once the
            clock reaches ``seconds``.
        entry: URL returned by the very first read only, for pages that
            navigate away between the entry read and the first poll.
    """

    def __init__(
        self,
        clock: FakeClock,
        timeline: list[tuple[float, str]],
        entry: str | None = None,
    ):
        self.clock = clock
        self.timeline = sorted(timeline)
        self.entry = entry
        self.waits: list[int] = []

    @property
    def url(self) -> str:
        if self.entry is not None:
            entry, self.entry = self.entry, None
            return entry
        current = self.timeline[0][1]
        for at, url in self.timeline:
            if self.clock.now >= at:
                current = url
        return current

    def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(timeout)
        self.clock.advance(timeout / 1000)


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Fake clock installed in place of ``time`` inside the actions module."""
    fake = FakeClock()
    monkeypatch.setattr(actions, "time", SimpleNamespace(monotonic=fake.monotonic))
    return fake


@pytest.fixture
def url_page_factory(clock: FakeClock):
    """Factory for FakeUrlPage instances sharing the fake clock."""

    def _make(*timeline: tuple[float, str], entry: str | None = None) -> FakeUrlPage:
        return FakeUrlPage(clock, list(timeline), entry=entry)

    return _make


@pytest.fixture
def mock_locator() -> MagicMock:
    """Locator double whose ``.first`` is a separate mock for call inspection."""
    locator = MagicMock(name="locator")
    locator.first = MagicMock(name="first")
    return locator


@pytest.fixture
def test_config(tmp_path) -> type[Config]:
    """Config subclass pointing screenshots at a temporary directory."""

    class _TestConfig(Config):
        HOME_URL = HOME_URL
        SCREENSHOT_DIR = str(tmp_path / "screenshots")
        SITE_CHECK_TIMEOUT = 3
        SITE_CHECK_INTERVAL = 1

    return _TestConfig
