"""
Step runner for checklist-style browser tests.

A homepage check is a list of independent steps. One broken widget
must not hide the state of the other fourteen, so every step runs
inside :class:`StepRunner`, which records the outcome, logs a one-line
verdict and captures a screenshot when the step fails.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of a single step."""

    number: int
    label: str
    passed: bool
    error: str | None = None
    screenshot: str | None = None


class StepRunner:
    """
    Run steps, count failures, and never stop the sequence.

    Attributes:
        page: Playwright page used for failure screenshots.
        screenshot_dir: Directory that receives ``step_NN.png`` files.
        results: Outcomes in execution order.
    """

    def __init__(self, page: Page, screenshot_dir: str):
        self.page = page
        self.screenshot_dir = screenshot_dir
        self.results: list[StepResult] = []

    @property
    def failures(self) -> int:
        """Number of steps that raised."""
        return sum(1 for result in self.results if not result.passed)

    def run(self, number: int, label: str, action: Callable[[], object]) -> StepResult:
        """
        Execute ``action`` as step ``number``.

        Any exception raised by the action is recorded as a failure,
        logged, and followed by a single screenshot attempt.

        Args:
            number: Step number shown in the log line.
            label: Human-readable description of the step.
            action: Zero-argument callable performing the checks.

        Returns:
            The recorded StepResult.
        """
        try:
            action()
        except Exception as exc:
            result = StepResult(number, label, passed=False, error=f"{type(exc).__name__}: {exc}")
            logger.info("Step %s; %s; FAIL", number, label)
            logger.debug("Step %s failed with %s", number, result.error)
            result.screenshot = self._screenshot(number)
        else:
            result = StepResult(number, label, passed=True)
            logger.info("Step %s; %s; PASS", number, label)
        self.results.append(result)
        return result

    def summary(self) -> str:
        """Return the final one-line verdict for the run."""
        if self.failures:
            return f"{self.failures} failed test cases. Check screenshots folder for manual checks"
        return "0 failed test cases"

    def log_summary(self) -> None:
        logger.info(self.summary())

    def _screenshot(self, number: int) -> str | None:
        path = os.path.join(self.screenshot_dir, f"step_{number:02d}.png")
        try:
            os.makedirs(self.screenshot_dir, exist_ok=True)
            self.page.screenshot(path=path)
        except Exception as exc:
            logger.warning("Failed to capture screenshot: %s", exc)
            return None
        logger.info("Screenshot saved: %s", path)
        return path
