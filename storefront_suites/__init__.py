"""
Storefront test suites package.

Keeps `storefront_suites` importable for:
  - IDE navigation
  - the programmatic runner (`run_tests.py`)
  - page objects and scenarios reused from other projects
"""
