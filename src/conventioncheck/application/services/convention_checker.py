"""Main facade for convention checking.

ConventionChecker is the primary entry point for running a scan.
Composition-based: accepts rule engine, method checker and reporter.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import TYPE_CHECKING, Self

import structlog

from conventioncheck.application.discovery import discover_tree
from conventioncheck.application.methods import MethodChecker
from conventioncheck.application.services.aggregator import ReportAggregator, UnitResult
from conventioncheck.application.services.rule_engine import RuleEngine
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.location import Location
from conventioncheck.domain.model.scan_stats import ScanStats

if TYPE_CHECKING:
    from pathlib import Path

    from conventioncheck.domain.model.class_hierarchy import ClassHierarchy
    from conventioncheck.domain.model.scan_result import ScanResult
    from conventioncheck.domain.model.scan_unit import ScanUnit
    from conventioncheck.domain.model.violation import Violation
    from conventioncheck.domain.ports.reporter import ReporterProtocol
    from conventioncheck.domain.ports.rule import IdentifierRuleProtocol

logger = structlog.get_logger(__name__)


class ConventionChecker:
    """Main facade for convention checking.

    Runs the rule engine and the method checker over ScanUnits and
    aggregates the violations into a ScanResult.

    Units are independent, so with max_workers > 1 they are checked on a
    thread pool. The result is sorted by path, line, column either way.

    Example:
        checker = ConventionChecker.from_config(load_config())
        result = checker.check_tree(Path("src"))
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        engine: RuleEngine,
        method_checker: MethodChecker,
        *,
        config: ConventionConfig | None = None,
        reporter: ReporterProtocol | None = None,
        max_workers: int = 1,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            engine: Identifier and line rule engine
            method_checker: Method-type contract checker
            config: Configuration used by check_tree discovery
            reporter: Optional reporter for output
            max_workers: Thread pool size, 1 checks units inline
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._engine = engine
        self._method_checker = method_checker
        self._config = config or ConventionConfig()
        self._reporter = reporter
        self._max_workers = max_workers

    @classmethod
    def from_config(
        cls,
        config: ConventionConfig | None = None,
        *,
        hierarchy: ClassHierarchy | None = None,
        extra_rules: Sequence[IdentifierRuleProtocol] = (),
        reporter: ReporterProtocol | None = None,
        max_workers: int = 1,
    ) -> Self:
        """Create checker with rules enabled by config.

        Args:
            config: Convention configuration (defaults if None)
            hierarchy: Class hierarchy for designated-init checks
            extra_rules: User identifier rules
            reporter: Optional reporter
            max_workers: Thread pool size

        Returns:
            ConventionChecker

        Raises:
            RuleValidationError: Invalid rule set
        """
        config = config or ConventionConfig()
        return cls(
            RuleEngine.from_config(config, extra_rules=extra_rules),
            MethodChecker(config, hierarchy),
            config=config,
            reporter=reporter,
            max_workers=max_workers,
        )

    def check(self, units: Iterable[ScanUnit]) -> ScanResult:
        """Check scan units and return the aggregated result.

        Reports result if reporter is configured.

        Args:
            units: Scan units from a source parser or discovery

        Returns:
            ScanResult with sorted violations and stats
        """
        units = tuple(units)
        start_time = time.perf_counter()
        logger.info("scan_started", units=len(units), workers=self._max_workers)

        aggregator = ReportAggregator()
        for unit_result in self._run_units(units):
            aggregator.add(unit_result)

        duration_ms = (time.perf_counter() - start_time) * 1000
        result = aggregator.build(duration_ms)

        logger.info(
            "scan_completed",
            units=result.stats.units_scanned,
            violations=result.violation_count,
            errors=result.error_count,
            warnings=result.warning_count,
            duration_ms=round(duration_ms, 3),
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def check_tree(self, root: Path) -> ScanResult:
        """Discover folders and files under root and check them.

        Args:
            root: Directory to scan

        Returns:
            ScanResult
        """
        return self.check(discover_tree(root, self._config))

    def check_unit(self, unit: ScanUnit) -> UnitResult:
        """Check one unit: identifiers, then signatures, then lines.

        Identifiers and signatures without a location are reported at the
        unit path, so they still sort by file.
        """
        violations: list[Violation] = []
        unit_location = Location(unit.path)

        for identifier, context in unit.identifiers:
            if identifier.location is None:
                identifier = replace(identifier, location=unit_location)
            violations.extend(self._engine.evaluate(identifier, context))

        for signature in unit.signatures:
            if signature.location is None:
                signature = replace(signature, location=unit_location)
            violations.extend(self._method_checker.check(signature))

        violations.extend(self._engine.evaluate_lines(unit.path, unit.lines))

        stats = ScanStats(
            units_scanned=1,
            identifiers_checked=len(unit.identifiers),
            signatures_checked=len(unit.signatures),
            lines_checked=len(unit.lines),
        )
        return UnitResult(violations=tuple(violations), stats=stats)

    def _run_units(self, units: tuple[ScanUnit, ...]) -> list[UnitResult]:
        if self._max_workers == 1 or len(units) < 2:
            return [self.check_unit(unit) for unit in units]

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            return list(executor.map(self.check_unit, units))

    @property
    def engine(self) -> RuleEngine:
        """Configured rule engine."""
        return self._engine

    @property
    def config(self) -> ConventionConfig:
        """Configuration in use."""
        return self._config
