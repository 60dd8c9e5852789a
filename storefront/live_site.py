"""Network-level reachability checks for the storefront under test."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

import requests

from storefront.config import Config

logger = logging.getLogger(__name__)


class SiteUnavailableError(RuntimeError):
    """Raised when the storefront does not answer before the deadline."""


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the URL answers with anything below a server error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_site_reachable(url: str, timeout: int = 20, interval: int = 2) -> None:
    """Poll the storefront until it answers or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            return
        time.sleep(interval)
    raise SiteUnavailableError(f"Storefront at {url} not reachable after {timeout}s")


def live_site_url(config: type[Config]) -> Generator[str, None, None]:
    """
    Yield the configured homepage URL once the site answers.

    Raises:
        SiteUnavailableError: If the site stays unreachable for
            ``config.SITE_CHECK_TIMEOUT`` seconds.
    """
    url = config.HOME_URL
    logger.info("Checking storefront reachability: %s", url)
    wait_for_site_reachable(
        url,
        timeout=config.SITE_CHECK_TIMEOUT,
        interval=config.SITE_CHECK_INTERVAL,
    )
    yield url
