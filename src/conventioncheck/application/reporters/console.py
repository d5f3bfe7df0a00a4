"""Console reporter: ScanResult → rich tables grouped by file."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from conventioncheck.application.reporters._base import BaseReporter, status_text
from conventioncheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from conventioncheck.domain.model.scan_result import ScanResult
    from conventioncheck.domain.model.violation import Violation

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}

_UNKNOWN_FILE = "<unknown location>"


class ConsoleReporter(BaseReporter):
    """Rich console reporter.

    Violations are grouped by file, each group rendered as one table.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        width: int = 120,
        force_terminal: bool | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            width: Console width in characters
            force_terminal: Force ANSI styling (None = autodetect)
        """
        self._console = Console(
            file=output if output is not None else sys.stdout,
            width=width,
            force_terminal=force_terminal,
        )

    def report(self, result: ScanResult) -> None:
        """Render scan results."""
        console = self._console

        console.print()
        console.rule("[bold]CONVENTION CHECK[/bold]")
        console.print()

        self._render_summary(console, result)

        for file_key, violations in self._group_by_file(result.violations).items():
            self._render_file(console, file_key, violations)

        style = "bold green" if result.passed else "bold red"
        console.rule(f"[{style}]{status_text(result)}[/{style}]")

    def _render_summary(self, console: Console, result: ScanResult) -> None:
        stats = result.stats
        console.print(
            f"[bold]Units:[/bold] {stats.units_scanned}  "
            f"[bold]Identifiers:[/bold] {stats.identifiers_checked}  "
            f"[bold]Methods:[/bold] {stats.signatures_checked}  "
            f"[bold]Lines:[/bold] {stats.lines_checked}"
        )
        console.print(
            f"[bold]Violations:[/bold] {result.violation_count} "
            f"(errors: {result.error_count}, warnings: {result.warning_count}, "
            f"unclassified: {result.unclassified_count})"
        )
        console.print()

    @staticmethod
    def _group_by_file(violations: tuple[Violation, ...]) -> dict[str, list[Violation]]:
        """Group violations by file, keeping the sorted order."""
        by_file: dict[str, list[Violation]] = {}
        for violation in violations:
            key = str(violation.location.file) if violation.location else _UNKNOWN_FILE
            by_file.setdefault(key, []).append(violation)
        return by_file

    def _render_file(self, console: Console, file_key: str, violations: list[Violation]) -> None:
        console.print(f"[bold]{escape(file_key)}[/bold]")
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("position", style="dim")
        table.add_column("severity")
        table.add_column("rule", style="cyan")
        table.add_column("details")

        for violation in violations:
            location = violation.location
            position = f":{location.line}:{location.column}" if location else ""
            style = _SEVERITY_STYLE[violation.severity]
            details = escape(violation.message)
            if violation.suggestion:
                details += f" [dim](suggestion: {escape(violation.suggestion)})[/dim]"
            table.add_row(
                position,
                f"[{style}]{violation.severity.name}[/{style}]",
                violation.rule_name,
                details,
            )

        console.print(table)
        console.print()
