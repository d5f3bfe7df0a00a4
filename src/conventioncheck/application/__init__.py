"""Application layer for convention checking.

Components:
- casing: Identifier tokenizer and casing classifier
- rules: Identifier and line rules with registry
- methods: Method-type classifier and contract checks
- discovery: Scan units from a directory tree
- reporters: Output formatting (PlainText, JSON, Console)
- services: Rule engine, aggregator and facade (ConventionChecker)
"""

from conventioncheck.application.casing import analyze, classify, conforms, split_words
from conventioncheck.application.discovery import discover_tree
from conventioncheck.application.methods import MethodChecker, classify_method
from conventioncheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from conventioncheck.application.rules import (
    BaseIdentifierRule,
    BaseLineRule,
    identifier_rules_from_config,
    line_rules_from_config,
)
from conventioncheck.application.services import (
    ConventionChecker,
    ReportAggregator,
    RuleEngine,
    merge_results,
)

__all__ = [
    # Casing
    "analyze",
    "classify",
    "conforms",
    "split_words",
    # Discovery
    "discover_tree",
    # Methods
    "MethodChecker",
    "classify_method",
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    # Rules
    "BaseIdentifierRule",
    "BaseLineRule",
    "identifier_rules_from_config",
    "line_rules_from_config",
    # Services
    "ConventionChecker",
    "ReportAggregator",
    "RuleEngine",
    "merge_results",
]
