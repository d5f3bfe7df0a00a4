"""Application services: rule engine, aggregation and the checker facade."""

from conventioncheck.application.services.aggregator import (
    ReportAggregator,
    UnitResult,
    merge_results,
)
from conventioncheck.application.services.convention_checker import ConventionChecker
from conventioncheck.application.services.rule_engine import RuleEngine

__all__ = [
    "ConventionChecker",
    "ReportAggregator",
    "RuleEngine",
    "UnitResult",
    "merge_results",
]
