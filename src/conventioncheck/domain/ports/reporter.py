"""Reporter protocol for output formatting.

Users extend conventioncheck by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Users implement this Protocol to customize output format.
    conventioncheck provides PlainTextReporter, JSONReporter and
    ConsoleReporter as defaults.

    Example:
        class ExitCodeReporter:
            def __init__(self) -> None:
                self.exit_code = 0

            def report(self, result: ScanResult) -> None:
                self.exit_code = 0 if result.passed else 1
    """

    def report(self, result: ScanResult) -> None:
        """Report scan results.

        Implementation decides output format and destination.
        This is the single method to implement.

        Args:
            result: Complete scan result with violations and stats
        """
        ...
