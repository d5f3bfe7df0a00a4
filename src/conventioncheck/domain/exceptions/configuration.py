"""Configuration exceptions."""

from conventioncheck.domain.exceptions.base import ConventionCheckError


class ConfigurationError(ConventionCheckError, ValueError):
    """Invalid configuration value or unknown configuration key.

    Inherits ValueError for semantic correctness (bad value).

    Attributes:
        key: Offending configuration key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")
