"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - IDE navigation
  - CI/CD module imports

All content is demo-safe and does not include production secrets.
"""


