"""Tests for domain exceptions."""

import pytest

from conventioncheck.domain.exceptions import (
    ConfigurationError,
    ConventionCheckError,
    ConventionViolationError,
    RuleValidationError,
)
from tests.factories import make_violation


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_attributes_and_message(self) -> None:
        """Key and reason are kept and formatted."""
        error = ConfigurationError("maxLineLength", "must be >= 1")
        assert error.key == "maxLineLength"
        assert error.reason == "must be >= 1"
        assert str(error) == "Invalid configuration 'maxLineLength': must be >= 1"

    def test_hierarchy(self) -> None:
        """ConfigurationError is a ConventionCheckError and a ValueError."""
        error = ConfigurationError("k", "r")
        assert isinstance(error, ConventionCheckError)
        assert isinstance(error, ValueError)

    def test_empty_key_rejected(self) -> None:
        """FAIL-FIRST on empty key."""
        with pytest.raises(ValueError, match="key must not be empty"):
            ConfigurationError("", "r")


class TestRuleValidationError:
    """Tests for RuleValidationError."""

    def test_message(self) -> None:
        """Rule name and reason are formatted."""
        error = RuleValidationError("file-name", "duplicate rule name")
        assert error.rule_name == "file-name"
        assert str(error) == "Invalid rule 'file-name': duplicate rule name"

    def test_empty_reason_rejected(self) -> None:
        """FAIL-FIRST on empty reason."""
        with pytest.raises(ValueError, match="reason must not be empty"):
            RuleValidationError("r", "")


class TestConventionViolationError:
    """Tests for ConventionViolationError."""

    def test_message_lists_violations(self) -> None:
        """Message counts and lists every violation."""
        violations = (make_violation("a"), make_violation("b"))
        error = ConventionViolationError(violations)
        assert error.violations == violations
        assert str(error).startswith("Found 2 convention violation(s):")
        assert "] a:" in str(error)
        assert "] b:" in str(error)

    def test_requires_violations(self) -> None:
        """An empty tuple is a programming error."""
        with pytest.raises(ValueError, match="at least one violation"):
            ConventionViolationError(())
