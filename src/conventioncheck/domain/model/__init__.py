"""Domain model entities."""

from conventioncheck.domain.model.class_hierarchy import ClassHierarchy, ClassRecord
from conventioncheck.domain.model.classification import AmbiguousClassification
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import (
    AcronymPolicy,
    CallScope,
    CasingPattern,
    MethodType,
    ReturnContract,
    Role,
    RuleCategory,
    Severity,
    Visibility,
)
from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
from conventioncheck.domain.model.location import Location
from conventioncheck.domain.model.method_signature import CallTarget, MethodSignature
from conventioncheck.domain.model.method_type_rule import (
    METHOD_TYPE_RULES,
    MethodTypeRule,
    rule_for,
)
from conventioncheck.domain.model.scan_result import ScanResult
from conventioncheck.domain.model.scan_stats import ScanStats
from conventioncheck.domain.model.scan_unit import ScanUnit
from conventioncheck.domain.model.shape import IdentifierShape
from conventioncheck.domain.model.violation import Violation

__all__ = [
    # Enums
    "AcronymPolicy",
    "CallScope",
    "CasingPattern",
    "MethodType",
    "ReturnContract",
    "Role",
    "RuleCategory",
    "Severity",
    "Visibility",
    # Identifiers
    "Identifier",
    "IdentifierContext",
    "IdentifierShape",
    "Location",
    # Methods
    "AmbiguousClassification",
    "CallTarget",
    "ClassHierarchy",
    "ClassRecord",
    "METHOD_TYPE_RULES",
    "MethodSignature",
    "MethodTypeRule",
    "rule_for",
    # Scan
    "ConventionConfig",
    "ScanResult",
    "ScanStats",
    "ScanUnit",
    "Violation",
]
