"""
Helpers for the storefront homepage checks.

This package holds everything the homepage test case shares:
configuration, the site reachability check, overlay-safe browser
actions, and the step runner that turns failures into log lines and
screenshots instead of aborting the run.
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
