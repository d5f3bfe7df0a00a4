"""Convention rules.

Identifier rules check one (identifier, context) pair:
- casing rules per role (folder, file, type, callable, property, constant)
- enum prefix and singular form
- boolean and lazy property names
- empty identifiers

Line rules check raw source lines (line length, trailing whitespace).
"""

from conventioncheck.application.rules._base import BaseIdentifierRule, BaseLineRule
from conventioncheck.application.rules._registry import (
    builtin_rule_names,
    identifier_rules_from_config,
    line_rules_from_config,
)
from conventioncheck.application.rules.casing_rules import (
    CallableNameRule,
    ConstantNameRule,
    FileNameRule,
    FolderNameRule,
    PropertyNameRule,
    RoleCasingRule,
    TypeNameRule,
)
from conventioncheck.application.rules.enum_rules import EnumPrefixRule, EnumSingularRule
from conventioncheck.application.rules.formatting_rules import (
    LineLengthRule,
    TrailingWhitespaceRule,
)
from conventioncheck.application.rules.input_rules import EmptyIdentifierRule
from conventioncheck.application.rules.property_rules import (
    BooleanPropertyPrefixRule,
    LazyPropertyNameRule,
)

__all__ = [
    # Base
    "BaseIdentifierRule",
    "BaseLineRule",
    "RoleCasingRule",
    # Identifier rules
    "EmptyIdentifierRule",
    "FolderNameRule",
    "FileNameRule",
    "TypeNameRule",
    "EnumPrefixRule",
    "EnumSingularRule",
    "CallableNameRule",
    "PropertyNameRule",
    "BooleanPropertyPrefixRule",
    "LazyPropertyNameRule",
    "ConstantNameRule",
    # Line rules
    "LineLengthRule",
    "TrailingWhitespaceRule",
    # Factory functions
    "builtin_rule_names",
    "identifier_rules_from_config",
    "line_rules_from_config",
]
