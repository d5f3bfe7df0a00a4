"""Load [tool.conventioncheck] from pyproject.toml. Infrastructure I/O only."""

from __future__ import annotations

import tomllib
from pathlib import Path

import structlog

from conventioncheck.domain.exceptions.configuration import ConfigurationError
from conventioncheck.domain.model.configuration import ConventionConfig

logger = structlog.get_logger(__name__)

PYPROJECT = "pyproject.toml"
TOOL_SECTION = "conventioncheck"


def find_pyproject(start: Path | None = None) -> Path | None:
    """Nearest pyproject.toml in start or any of its parents.

    Args:
        start: Directory to start from (default: cwd)

    Returns:
        Path to pyproject.toml, None if there is none up to the root
    """
    current = (start or Path.cwd()).resolve()
    for folder in (current, *current.parents):
        candidate = folder / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> ConventionConfig:
    """Load configuration from the nearest pyproject.toml.

    Missing file or missing section yields the default configuration.

    Args:
        start: Directory to start searching from, or a pyproject.toml file

    Returns:
        ConventionConfig

    Raises:
        ConfigurationError: Unreadable TOML, or invalid section contents
    """
    if start is not None and start.is_file():
        path: Path | None = start
    else:
        path = find_pyproject(start)

    if path is None:
        logger.debug("config_file_not_found", start=str(start or Path.cwd()))
        return ConventionConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(str(path), f"invalid TOML: {exc}") from exc

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigurationError("tool", "must be a table")

    section = tool.get(TOOL_SECTION)
    if section is None:
        logger.debug("config_section_missing", path=str(path), section=f"tool.{TOOL_SECTION}")
        return ConventionConfig()
    if not isinstance(section, dict):
        raise ConfigurationError(f"tool.{TOOL_SECTION}", "must be a table")

    config = ConventionConfig.from_mapping(section)
    logger.info("config_loaded", path=str(path), keys=sorted(section))
    return config
