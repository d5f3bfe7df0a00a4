"""Reporters for convention scan results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from conventioncheck.application.reporters._base import BaseReporter
from conventioncheck.application.reporters.console import ConsoleReporter
from conventioncheck.application.reporters.json_reporter import JSONReporter
from conventioncheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
