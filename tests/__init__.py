"""
Test suite for the storefront homepage checks.

This package contains:
- e2e/: the Playwright checklist run against the live storefront
- unit/: fast tests for the helper heuristics using fakes
"""
