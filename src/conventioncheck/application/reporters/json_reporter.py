"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from conventioncheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult
    from conventioncheck.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs scan results as JSON for CI integration or editor tooling.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: ScanResult) -> None:
        """Report scan results as JSON."""
        data = self.result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def result_to_dict(self, result: ScanResult) -> dict[str, object]:
        """Convert ScanResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
                "info_count": result.info_count,
                "unclassified_count": result.unclassified_count,
                "by_rule": result.counts_by_rule(),
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
            "stats": {
                "units_scanned": result.stats.units_scanned,
                "identifiers_checked": result.stats.identifiers_checked,
                "signatures_checked": result.stats.signatures_checked,
                "lines_checked": result.stats.lines_checked,
                "duration_ms": result.stats.duration_ms,
            },
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        location = violation.location
        return {
            "rule_name": violation.rule_name,
            "message": violation.message,
            "severity": violation.severity.name,
            "category": violation.category.name,
            "subject": violation.subject,
            "expected": violation.expected,
            "actual": violation.actual,
            "suggestion": violation.suggestion,
            "location": None
            if location is None
            else {
                "file": str(location.file),
                "line": location.line,
                "column": location.column,
            },
        }
