"""pytest plugin for conventioncheck.

Provides fixtures for convention testing:
    convention_config: Convention configuration (override in conftest.py)
    convention_checker: ConventionChecker built from convention_config
    convention_scan: ScanResult of the configured source directory

Configuration (pytest.ini or pyproject.toml):
    convention_source_dir: Directory to scan (default: "src")
    convention_config_file: pyproject.toml to read (default: nearest one)

Example:
    def test_conventions(convention_scan):
        assert_conventions(convention_scan)
"""

from __future__ import annotations

import pytest

from conventioncheck.presentation.pytest_plugin.assertions import assert_conventions

# Register fixtures from fixtures module
from conventioncheck.presentation.pytest_plugin.fixtures import (
    convention_checker,
    convention_config,
    convention_scan,
)

# Export fixtures for pytest discovery
__all__ = [
    "assert_conventions",
    "convention_checker",
    "convention_config",
    "convention_scan",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "convention_source_dir",
        "Directory scanned by the convention_scan fixture",
        default="src",
    )
    parser.addini(
        "convention_config_file",
        "pyproject.toml holding [tool.conventioncheck]",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "conventions: mark test as naming convention test",
    )
