"""Infrastructure: configuration file I/O."""

from conventioncheck.infrastructure.config_loader import find_pyproject, load_config

__all__ = [
    "find_pyproject",
    "load_config",
]
