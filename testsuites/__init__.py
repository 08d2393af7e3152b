"""
Test suites package.

Kept importable so that:
  - behave's environment and step modules share the page objects
  - programmatic runners (e.g., `run_tests.py`) can import the browser settings
  - unit tests can drive hooks and steps directly
"""
