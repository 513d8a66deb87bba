"""
Pytest configuration for unit tests.

Pins parser configuration so tests do not depend on a developer's .env.
"""

import os


def pytest_configure(config):
    """Pin parser configuration for unit tests."""
    os.environ["ANSI_MH10_MATCH_TIMEOUT_SECONDS"] = "1.0"
    os.environ["ANSI_MH10_INCLUDE_DESCRIPTORS"] = "true"
    os.environ["ANSI_MH10_LOG_LEVEL"] = "WARNING"
    os.environ.pop("ANSI_MH10_CATALOG_PATH", None)
