"""Assertion helpers for convention tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.domain.exceptions.violation import ConventionViolationError
from conventioncheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult


def assert_conventions(result: ScanResult, *, strict: bool = False) -> None:
    """Fail when a scan did not pass.

    Args:
        result: Scan result to check
        strict: Also fail on WARNING and INFO violations

    Raises:
        ConventionViolationError: With the offending violations
    """
    if strict:
        offending = result.violations
    else:
        offending = tuple(v for v in result.violations if v.severity is Severity.ERROR)

    if offending:
        raise ConventionViolationError(offending)
