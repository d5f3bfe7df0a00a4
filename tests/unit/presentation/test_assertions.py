"""Tests for assert_conventions()."""

import pytest

from conventioncheck.domain.exceptions.violation import ConventionViolationError
from conventioncheck.domain.model.enums import Severity
from conventioncheck.domain.model.scan_result import ScanResult
from conventioncheck.presentation.pytest_plugin.assertions import assert_conventions
from tests.factories import make_result, make_violation


class TestAssertConventions:
    """Tests for assert_conventions()."""

    def test_empty_result_passes(self) -> None:
        """No violations, no exception."""
        assert_conventions(ScanResult.empty())

    def test_error_raises(self) -> None:
        """ERROR violations are raised with the exception."""
        error = make_violation("type-name")
        with pytest.raises(ConventionViolationError) as exc_info:
            assert_conventions(make_result(error))
        assert exc_info.value.violations == (error,)
        assert "type-name" in str(exc_info.value)

    def test_warnings_pass_by_default(self) -> None:
        """Warnings alone do not fail."""
        assert_conventions(make_result(make_violation(severity=Severity.WARNING)))

    def test_strict_fails_on_warnings(self) -> None:
        """strict=True fails on any violation."""
        warning = make_violation(severity=Severity.WARNING)
        with pytest.raises(ConventionViolationError) as exc_info:
            assert_conventions(make_result(warning), strict=True)
        assert exc_info.value.violations == (warning,)

    def test_only_errors_reported(self) -> None:
        """Non-strict mode reports only the ERROR violations."""
        error = make_violation("a", line=1)
        warning = make_violation("b", line=2, severity=Severity.WARNING)
        with pytest.raises(ConventionViolationError) as exc_info:
            assert_conventions(make_result(error, warning))
        assert exc_info.value.violations == (error,)
