"""Scan result aggregate."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from conventioncheck.domain.model.enums import RuleCategory, Severity
from conventioncheck.domain.model.scan_stats import ScanStats
from conventioncheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of a convention scan.

    Immutable aggregate produced once per scan.
    Used by ReporterProtocol.report() method.

    Attributes:
        violations: All violations, ordered by path, line, column
        stats: Scan statistics
    """

    violations: tuple[Violation, ...]
    stats: ScanStats

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.violations, tuple):
            raise TypeError("violations must be a tuple")

    @property
    def passed(self) -> bool:
        """Scan passed: no ERROR severity violations."""
        return self.error_count == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of INFO severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.INFO)

    @property
    def unclassified_count(self) -> int:
        """Number of methods no category matched."""
        return sum(1 for v in self.violations if v.category == RuleCategory.CLASSIFICATION)

    def counts_by_rule(self) -> dict[str, int]:
        """Violation count per rule name, sorted by rule name."""
        counts = Counter(v.rule_name for v in self.violations)
        return dict(sorted(counts.items()))

    @classmethod
    def empty(cls) -> ScanResult:
        """Create empty scan result (passed, no violations)."""
        return cls(violations=(), stats=ScanStats.empty())
