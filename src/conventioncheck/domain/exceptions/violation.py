"""Convention violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.domain.exceptions.base import ConventionCheckError

if TYPE_CHECKING:
    from conventioncheck.domain.model.violation import Violation


class ConventionViolationError(ConventionCheckError):
    """Convention rules violated.

    Raised by assert_conventions() when a scan did not pass.

    Attributes:
        violations: All found violations
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("ConventionViolationError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} convention violation(s):"]
        for v in violations:
            msg_parts.append(str(v))

        super().__init__("\n".join(msg_parts))
