"""conventioncheck - naming and method-contract convention linter."""

__version__ = "0.1.0"

from conventioncheck.application.services import ConventionChecker
from conventioncheck.domain.model import ConventionConfig
from conventioncheck.infrastructure import load_config

__all__ = ["ConventionChecker", "ConventionConfig", "load_config", "__version__"]
