"""
Overlay-safe browser actions and tolerant assertions.

The storefront under test is a third-party page: carousels animate,
overlays sit on top of links, and some clicks route back to the page
the browser is already on. The helpers here absorb that noise so the
homepage steps can state what they expect in one line.

Key Concepts Demonstrated:
- Clicking near an element's corner to dodge centred overlays
- Hover first, click as a fallback, for menus that open either way
- Polling the current URL against several acceptable routes
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Iterable

from playwright.sync_api import Locator, Page

from storefront.config import Config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Reads
# -----------------------------------------------------------------------------

def exists(locator: Locator) -> bool:
    """Return True when the locator currently matches at least one element."""
    return locator.count() > 0


def current_href(page: Page) -> str:
    """Return the URL the page is on right now."""
    return page.url


def scroll_y(page: Page) -> float:
    """Return the vertical scroll offset of the document."""
    return page.evaluate(
        "() => window.pageYOffset || document.documentElement.scrollTop || 0"
    )


def scroll_to_bottom(page: Page) -> None:
    page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")


def url_changed_to(before: str, after: str, pattern: str) -> bool:
    """
    Return True when navigation left ``before`` for a URL matching ``pattern``.

    Args:
        before: URL recorded before the click.
        after: URL read after the click.
        pattern: Case-insensitive regular expression the new URL must match.
    """
    return after != before and re.search(pattern, after, re.IGNORECASE) is not None


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------

def safe_click(
    locator: Locator,
    offset: int = Config.CLICK_OFFSET_PX,
    settle_ms: int = Config.WAIT_SHORT_MS,
) -> None:
    """
    Click the first match near its top-left corner.

    Scrolls the element into view and hovers it before clicking so that
    hover-driven menus are already open, then clicks at ``offset`` pixels
    from the top-left corner instead of the centre, where overlays on
    this theme tend to sit.

    Args:
        locator: Element(s) to click; only the first match is used.
        offset: Distance in pixels from the top-left corner.
        settle_ms: Delay after the click for animations and routing.
    """
    target = locator.first
    target.scroll_into_view_if_needed()
    target.hover()
    target.click(position={"x": offset, "y": offset})
    target.page.wait_for_timeout(settle_ms)


def hover_or_click_to_open(
    trigger: Locator,
    expected: Locator,
    timeout: int = Config.OPEN_TIMEOUT_MS,
    offset: int = Config.CLICK_OFFSET_PX,
    settle_ms: int = Config.WAIT_SHORT_MS,
) -> None:
    """
    Reveal ``expected`` by hovering ``trigger``, clicking if hover is not enough.

    Args:
        trigger: Element that opens the menu or panel.
        expected: Element that must be present once the trigger fired.
        timeout: Maximum wait for ``expected`` in milliseconds.

    Raises:
        playwright.sync_api.TimeoutError: If ``expected`` never appears.
    """
    trigger.first.hover()
    if not exists(expected):
        logger.debug("Hover did not reveal target, falling back to click")
        safe_click(trigger, offset=offset, settle_ms=settle_ms)
    expected.first.wait_for(state="attached", timeout=timeout)


# -----------------------------------------------------------------------------
# Assertions
# -----------------------------------------------------------------------------

def expect_url_one_of(
    page: Page,
    substrings: Iterable[str] = (),
    timeout: int = Config.URL_TIMEOUT_MS,
    allow_no_change_if_matches: bool = True,
    poll_interval: int = Config.URL_POLL_MS,
) -> str:
    """
    Wait until the page URL contains any of ``substrings``.

    With no substrings, any change from the URL seen on entry counts as
    a match. When nothing matched before the deadline but the entry URL
    already satisfied one of the substrings, the navigation is treated
    as a no-op onto an acceptable page and passes.

    Args:
        page: Playwright page to watch.
        substrings: Acceptable URL fragments.
        timeout: Total polling time in milliseconds.
        allow_no_change_if_matches: Accept an entry URL that already matched.
        poll_interval: Delay between URL reads in milliseconds.

    Returns:
        The URL that satisfied the check.

    Raises:
        AssertionError: If no acceptable URL was seen within ``timeout``.
    """
    substrings = list(substrings)
    before = current_href(page)
    deadline = time.monotonic() + timeout / 1000

    while time.monotonic() < deadline:
        current = current_href(page)
        if substrings:
            matched = any(fragment in current for fragment in substrings)
        else:
            matched = current != before
        if matched:
            return current
        page.wait_for_timeout(poll_interval)

    if allow_no_change_if_matches and any(fragment in before for fragment in substrings):
        # A click that did nothing looks the same as one that kept us on a valid page
        logger.warning("URL check passed on entry URL only: %s", before)
        return before

    raise AssertionError(f"URL didn't match any of: [{', '.join(substrings)}]")
