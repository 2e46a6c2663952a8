"""
Prism UI regression suite package.

`prismsuite` stays importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - unit tests importing framework and page modules
"""
