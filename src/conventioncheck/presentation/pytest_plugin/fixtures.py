"""pytest fixtures for convention testing.

User overrides convention_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conventioncheck.application.services import ConventionChecker
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.scan_result import ScanResult
from conventioncheck.infrastructure.config_loader import load_config


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(config: pytest.Config) -> Path:
    return Path(str(config.rootpath))


@pytest.fixture(scope="session")
def convention_config(request: pytest.FixtureRequest) -> ConventionConfig:
    """Convention configuration.

    Reads convention_config_file from pytest.ini when set, otherwise the
    nearest pyproject.toml above the pytest root directory.

    Returns:
        ConventionConfig
    """
    root_dir = _root_dir(request.config)
    config_file = _get_ini_value(request.config, "convention_config_file", "")

    if config_file:
        path = root_dir / config_file
        if not path.is_file():
            raise FileNotFoundError(
                f"convention_config_file '{path}' does not exist. "
                f"Configure convention_config_file in pytest.ini or pyproject.toml."
            )
        return load_config(path)

    return load_config(root_dir)


@pytest.fixture(scope="session")
def convention_checker(convention_config: ConventionConfig) -> ConventionChecker:
    """ConventionChecker built from convention_config."""
    return ConventionChecker.from_config(convention_config)


@pytest.fixture(scope="session")
def convention_scan(
    request: pytest.FixtureRequest,
    convention_checker: ConventionChecker,
) -> ScanResult:
    """Scan of convention_source_dir (default: "src").

    Returns:
        ScanResult of the whole tree
    """
    source_dir = _get_ini_value(request.config, "convention_source_dir", "src")
    source_path = _root_dir(request.config) / source_dir

    if not source_path.is_dir():
        raise FileNotFoundError(
            f"convention_source_dir '{source_path}' does not exist. "
            f"Configure convention_source_dir in pytest.ini or pyproject.toml."
        )

    return convention_checker.check_tree(source_path)
