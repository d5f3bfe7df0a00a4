"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conventioncheck.domain.model.enums import RuleCategory, Severity
    from conventioncheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Violation:
    """Convention rule violation.

    Attributes:
        rule_name: Name of violated rule
        message: Human-readable reason
        subject: What violated (identifier, signature or line reference)
        severity: ERROR/WARNING/INFO
        category: Rule category
        expected: What was expected
        actual: What was found
        location: Source location, None if the parser supplied none
        suggestion: Fix suggestion
    """

    rule_name: str
    message: str
    subject: str
    severity: Severity
    category: RuleCategory
    expected: str
    actual: str
    location: Location | None = None
    suggestion: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.expected:
            raise ValueError("expected must not be empty")
        if not self.actual:
            raise ValueError("actual must not be empty")

    def sort_key(self) -> tuple[str, int, int]:
        """Report ordering key: path, then line, then column."""
        if self.location is None:
            return ("", 0, 0)
        return self.location.sort_key()

    def __str__(self) -> str:
        """Format violation for display."""
        where = str(self.location) if self.location is not None else "<unknown location>"
        lines = [
            f"[{self.severity.name}] {self.rule_name}: {self.message}",
            f"  at {where}",
            f"  subject: {self.subject}",
            f"  expected: {self.expected}",
            f"  actual: {self.actual}",
        ]
        if self.suggestion:
            lines.append(f"  suggestion: {self.suggestion}")
        return "\n".join(lines)
