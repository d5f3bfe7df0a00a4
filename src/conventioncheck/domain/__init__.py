"""conventioncheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, re, collections
"""

from conventioncheck.domain.exceptions import (
    ConfigurationError,
    ConventionCheckError,
    ConventionViolationError,
    RuleValidationError,
)
from conventioncheck.domain.model import (
    ConventionConfig,
    Identifier,
    IdentifierContext,
    Location,
    MethodSignature,
    Role,
    RuleCategory,
    ScanResult,
    ScanUnit,
    Severity,
    Violation,
    Visibility,
)
from conventioncheck.domain.ports import (
    IdentifierRuleProtocol,
    LineRuleProtocol,
    ReporterProtocol,
    SourceParserProtocol,
)
