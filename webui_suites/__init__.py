"""
Test suites package.

Keeps `webui_suites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - page objects importing the framework by absolute path
"""
