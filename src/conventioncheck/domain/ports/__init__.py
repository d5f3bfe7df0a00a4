"""Domain ports (interfaces/protocols)."""

from conventioncheck.domain.ports.reporter import ReporterProtocol
from conventioncheck.domain.ports.rule import IdentifierRuleProtocol, LineRuleProtocol
from conventioncheck.domain.ports.source_parser import SourceParserProtocol

__all__ = [
    "IdentifierRuleProtocol",
    "LineRuleProtocol",
    "ReporterProtocol",
    "SourceParserProtocol",
]
