"""Domain exceptions."""

from conventioncheck.domain.exceptions.base import ConventionCheckError
from conventioncheck.domain.exceptions.configuration import ConfigurationError
from conventioncheck.domain.exceptions.validation import RuleValidationError
from conventioncheck.domain.exceptions.violation import ConventionViolationError

__all__ = [
    "ConventionCheckError",
    "ConfigurationError",
    "RuleValidationError",
    "ConventionViolationError",
]
