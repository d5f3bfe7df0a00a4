"""Report aggregation.

Collects per-unit results and builds one ScanResult whose violations are
stably sorted by (path, line, column). Insertion order breaks ties, so
violations of one identifier keep their rule order.
"""

from __future__ import annotations

from dataclasses import dataclass

from conventioncheck.domain.model.scan_result import ScanResult
from conventioncheck.domain.model.scan_stats import ScanStats
from conventioncheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class UnitResult:
    """Violations and counters of one checked ScanUnit.

    Attributes:
        violations: Violations in evaluation order
        stats: Counters for this unit (duration_ms unused)
    """

    violations: tuple[Violation, ...]
    stats: ScanStats

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.violations, tuple):
            raise TypeError("violations must be a tuple")


def _sorted(violations: list[Violation] | tuple[Violation, ...]) -> tuple[Violation, ...]:
    # sorted() is stable
    return tuple(sorted(violations, key=Violation.sort_key))


class ReportAggregator:
    """Append-only collector of unit results.

    Example:
        aggregator = ReportAggregator()
        for unit in units:
            aggregator.add(check_unit(unit))
        result = aggregator.build(duration_ms=12.5)
    """

    def __init__(self) -> None:
        self._violations: list[Violation] = []
        self._stats = ScanStats.empty()

    def add(self, unit_result: UnitResult) -> None:
        """Append one unit's result."""
        self._violations.extend(unit_result.violations)
        self._stats = self._stats + unit_result.stats

    def build(self, duration_ms: float = 0.0) -> ScanResult:
        """Build the final result.

        Args:
            duration_ms: Wall-clock scan time to record

        Returns:
            ScanResult with violations sorted by path, line, column
        """
        stats = ScanStats(
            units_scanned=self._stats.units_scanned,
            identifiers_checked=self._stats.identifiers_checked,
            signatures_checked=self._stats.signatures_checked,
            lines_checked=self._stats.lines_checked,
            duration_ms=duration_ms,
        )
        return ScanResult(violations=_sorted(self._violations), stats=stats)

    def __len__(self) -> int:
        return len(self._violations)


def merge_results(*results: ScanResult) -> ScanResult:
    """Combine scan results into one.

    Stats are summed and violations re-sorted, so merging is associative
    and order-insensitive up to ties in the sort key.

    Args:
        *results: Scan results to merge

    Returns:
        Merged ScanResult (empty when called without arguments)
    """
    violations: list[Violation] = []
    stats = ScanStats.empty()
    for result in results:
        violations.extend(result.violations)
        stats = stats + result.stats
    return ScanResult(violations=_sorted(violations), stats=stats)
