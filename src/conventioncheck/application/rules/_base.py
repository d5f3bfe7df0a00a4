"""Base rule classes for convention rules.

Provides default implementation of IdentifierRuleProtocol and LineRuleProtocol.
Concrete rules inherit from these.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Self

from conventioncheck.application.casing import is_blank
from conventioncheck.domain.model.enums import Role, RuleCategory, Severity
from conventioncheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from pathlib import Path

    from conventioncheck.domain.model.configuration import ConventionConfig
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext


class BaseIdentifierRule(ABC):
    """Base class for identifier rules implementing IdentifierRuleProtocol.

    Concrete rules must:
    1. Set `rule_name` and `roles` class attributes
    2. Implement `check()`
    3. Optionally override `applies_to()` for context-dependent rules

    Rules are stateless after construction: check() is a pure function of
    (identifier, context), so evaluating twice yields identical violations.

    Example:
        class NoDigitsRule(BaseIdentifierRule):
            rule_name = "no-digits"
            roles = frozenset({Role.CLASS})

            def check(self, identifier, context):
                if any(c.isdigit() for c in identifier.name):
                    return (self.violation(identifier, "Digits in class name", ...),)
                return ()
    """

    rule_name: ClassVar[str]
    """Unique rule identifier."""

    roles: ClassVar[frozenset[Role]]
    """Roles this rule applies to."""

    category: ClassVar[RuleCategory] = RuleCategory.NAMING
    severity: ClassVar[Severity] = Severity.ERROR

    def __init__(self, config: ConventionConfig) -> None:
        """Initialize with configuration.

        Args:
            config: Convention configuration
        """
        if config is None:
            raise TypeError("config must not be None")
        self._config = config

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Role matches and the name is not blank.

        Blank names are reported by the empty-identifier rule only.
        """
        return identifier.role in self.roles and not is_blank(identifier.name)

    @abstractmethod
    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Evaluate the rule.

        Args:
            identifier: Identifier under test
            context: Declaration context

        Returns:
            Tuple of violations found (empty if compliant)
        """

    def violation(
        self,
        identifier: Identifier,
        message: str,
        *,
        expected: str,
        actual: str,
        suggestion: str | None = None,
    ) -> Violation:
        """Build a violation for an identifier with this rule's metadata."""
        return Violation(
            rule_name=self.rule_name,
            message=message,
            subject=identifier.display,
            severity=self.severity,
            category=self.category,
            expected=expected,
            actual=actual,
            location=identifier.location,
            suggestion=suggestion,
        )

    @classmethod
    def from_config(cls, config: ConventionConfig) -> Self | None:
        """Create rule from config.

        Default: enabled unless listed in config.disabled_rules.

        Args:
            config: Convention configuration

        Returns:
            Rule instance if enabled, None if disabled
        """
        if config.is_disabled(cls.rule_name):
            return None
        return cls(config)


class BaseLineRule(ABC):
    """Base class for formatting rules over raw source lines."""

    rule_name: ClassVar[str]
    category: ClassVar[RuleCategory] = RuleCategory.FORMATTING
    severity: ClassVar[Severity] = Severity.ERROR

    def __init__(self, config: ConventionConfig) -> None:
        """Initialize with configuration."""
        if config is None:
            raise TypeError("config must not be None")
        self._config = config

    @abstractmethod
    def check_line(self, path: Path, line_number: int, text: str) -> Violation | None:
        """Evaluate one line.

        Args:
            path: File the line belongs to
            line_number: 1-based line number
            text: Line text (a trailing line terminator is ignored)

        Returns:
            Violation, or None if the line is compliant
        """

    @classmethod
    def from_config(cls, config: ConventionConfig) -> Self | None:
        """Create rule from config, None if disabled."""
        if config.is_disabled(cls.rule_name):
            return None
        return cls(config)
