"""Whitespace and formatting rules over raw source lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.rules._base import BaseLineRule
from conventioncheck.domain.model.enums import Severity
from conventioncheck.domain.model.location import Location
from conventioncheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from pathlib import Path


def _strip_terminator(text: str) -> str:
    return text.rstrip("\r\n")


class LineLengthRule(BaseLineRule):
    """Lines are at most config.max_line_length characters."""

    rule_name = "line-length"

    def check_line(self, path: Path, line_number: int, text: str) -> Violation | None:
        """Compare line length with the configured maximum."""
        line = _strip_terminator(text)
        limit = self._config.max_line_length
        if len(line) <= limit:
            return None

        return Violation(
            rule_name=self.rule_name,
            message=f"Line is longer than {limit} characters",
            subject=f"{path.name}:{line_number}",
            severity=self.severity,
            category=self.category,
            expected=f"<= {limit} characters",
            actual=f"{len(line)} characters",
            location=Location(file=path, line=line_number, column=limit),
            suggestion="Wrap the line",
        )


class TrailingWhitespaceRule(BaseLineRule):
    """Lines do not end with spaces or tabs."""

    rule_name = "trailing-whitespace"
    severity = Severity.WARNING

    def check_line(self, path: Path, line_number: int, text: str) -> Violation | None:
        """Look for blanks before the line terminator."""
        line = _strip_terminator(text)
        stripped = line.rstrip(" \t")
        if stripped == line:
            return None

        return Violation(
            rule_name=self.rule_name,
            message="Line has trailing whitespace",
            subject=f"{path.name}:{line_number}",
            severity=self.severity,
            category=self.category,
            expected="no trailing whitespace",
            actual=f"{len(line) - len(stripped)} trailing blank(s)",
            location=Location(file=path, line=line_number, column=len(stripped)),
            suggestion="Remove trailing blanks",
        )
