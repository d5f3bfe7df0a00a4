"""Method-type classification and contract checks."""

from conventioncheck.application.methods.checker import METHOD_RULE_NAMES, MethodChecker
from conventioncheck.application.methods.classifier import (
    callee_types,
    classify_method,
    is_init_name,
)

__all__ = [
    "METHOD_RULE_NAMES",
    "MethodChecker",
    "callee_types",
    "classify_method",
    "is_init_name",
]
