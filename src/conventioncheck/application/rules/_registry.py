"""Rule registry for convention rules.

Central registry of all built-in rules with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.rules._base import BaseIdentifierRule, BaseLineRule
from conventioncheck.application.rules.casing_rules import (
    CallableNameRule,
    ConstantNameRule,
    FileNameRule,
    FolderNameRule,
    PropertyNameRule,
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

if TYPE_CHECKING:
    from conventioncheck.domain.model.configuration import ConventionConfig
    from conventioncheck.domain.ports.rule import IdentifierRuleProtocol, LineRuleProtocol


# Registry - tuple for immutability
# Order matters: rules are evaluated and reported in this order
_ALL_IDENTIFIER_RULES: tuple[type[BaseIdentifierRule], ...] = (
    EmptyIdentifierRule,
    FolderNameRule,
    FileNameRule,
    TypeNameRule,
    EnumPrefixRule,
    EnumSingularRule,
    CallableNameRule,
    PropertyNameRule,
    BooleanPropertyPrefixRule,
    LazyPropertyNameRule,
    ConstantNameRule,
)

_ALL_LINE_RULES: tuple[type[BaseLineRule], ...] = (
    LineLengthRule,
    TrailingWhitespaceRule,
)


def builtin_rule_names() -> frozenset[str]:
    """Names of all built-in identifier and line rules."""
    return frozenset(r.rule_name for r in (*_ALL_IDENTIFIER_RULES, *_ALL_LINE_RULES))


def identifier_rules_from_config(config: ConventionConfig) -> tuple[IdentifierRuleProtocol, ...]:
    """Instantiate identifier rules based on config.

    Rules are created using their from_config() factory method.
    If from_config() returns None, the rule is disabled.

    Args:
        config: Convention configuration

    Returns:
        Tuple of enabled rules, in registry order
    """
    rules: list[IdentifierRuleProtocol] = []

    for rule_cls in _ALL_IDENTIFIER_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)

    return tuple(rules)


def line_rules_from_config(config: ConventionConfig) -> tuple[LineRuleProtocol, ...]:
    """Instantiate line rules based on config.

    Args:
        config: Convention configuration

    Returns:
        Tuple of enabled line rules, in registry order
    """
    rules: list[LineRuleProtocol] = []

    for rule_cls in _ALL_LINE_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)

    return tuple(rules)
