"""Plain text reporter in lint style.

Stdlib-only. Violations are grouped under their file, one
"line:column SEVERITY rule message" row each, details indented below.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from conventioncheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult
    from conventioncheck.domain.model.violation import Violation

_RULER = "=" * 70
_NO_LOCATION = "<unknown location>"
_DETAIL_INDENT = " " * 8


class PlainTextReporter(BaseReporter):
    """Lint-style text report.

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: ScanResult) -> None:
        """Report scan results as plain text.

        Args:
            result: Complete scan result
        """
        self._write("Convention Check Results")
        self._write(_RULER)
        self._write_summary(result)

        current_file: str | None = None
        for violation in result.violations:
            file_key = str(violation.location.file) if violation.location else _NO_LOCATION
            if file_key != current_file:
                self._write()
                self._write(file_key)
                current_file = file_key
            self._write_violation(violation)

        if result.violations:
            self._write()
            self._write("By rule:")
            for rule_name, count in sorted(result.counts_by_rule().items()):
                self._write(f"  {rule_name}: {count}")

        self._write()
        self._write(_RULER)
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")

    def _write(self, text: str = "") -> None:
        print(text, file=self._output)

    def _write_summary(self, result: ScanResult) -> None:
        stats = result.stats
        self._write(
            f"Scanned: {stats.units_scanned} units, {stats.identifiers_checked} identifiers, "
            f"{stats.signatures_checked} methods, {stats.lines_checked} lines "
            f"in {stats.duration_ms:.1f} ms"
        )
        self._write(
            f"Violations: {result.violation_count} "
            f"(errors: {result.error_count}, warnings: {result.warning_count}, "
            f"info: {result.info_count}, unclassified methods: {result.unclassified_count})"
        )

    def _write_violation(self, violation: Violation) -> None:
        location = violation.location
        position = f"{location.line}:{location.column}" if location else "-"
        self._write(
            f"  {position:<6}{violation.severity.name:<8} {violation.rule_name}  {violation.message}"
        )
        self._write(f"{_DETAIL_INDENT}subject: {violation.subject}")
        self._write(f"{_DETAIL_INDENT}expected: {violation.expected}, actual: {violation.actual}")
        if violation.suggestion:
            self._write(f"{_DETAIL_INDENT}suggestion: {violation.suggestion}")
