"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    conventioncheck provides PlainTextReporter, JSONReporter and
    ConsoleReporter. Users can implement their own (SARIF, HTML, ...).

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: ScanResult) -> None:
                print(f"Violations: {result.violation_count}")
    """

    @abstractmethod
    def report(self, result: ScanResult) -> None:
        """Report scan results.

        Implementation decides output format and destination.

        Args:
            result: Complete scan result with violations and stats
        """


def status_text(result: ScanResult) -> str:
    """PASS or FAIL."""
    return "PASS" if result.passed else "FAIL"
