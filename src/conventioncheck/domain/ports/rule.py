"""Rule protocols.

Users extend conventioncheck by implementing these Protocols.
Rules are stateless predicates: same input, same violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from pathlib import Path

    from conventioncheck.domain.model.configuration import ConventionConfig
    from conventioncheck.domain.model.enums import RuleCategory
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.violation import Violation


class IdentifierRuleProtocol(Protocol):
    """Contract for identifier rules.

    Key pattern: from_config() returns None if the rule should be disabled.

    Example:
        class NoHungarianRule:
            rule_name = "no-hungarian"
            category = RuleCategory.CUSTOM

            def applies_to(self, identifier, context) -> bool:
                return identifier.role is Role.LOCAL_VARIABLE

            def check(self, identifier, context) -> tuple[Violation, ...]:
                if identifier.name[:3] in ("str", "int"):
                    return (make_violation(...),)
                return ()

            @classmethod
            def from_config(cls, config):
                return None if config.is_disabled(cls.rule_name) else cls()
    """

    rule_name: str
    """Unique rule identifier."""

    category: RuleCategory
    """Rule category for grouping violations."""

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Check if the rule is relevant for this identifier."""
        ...

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Evaluate the rule.

        Args:
            identifier: Identifier under test
            context: Declaration context

        Returns:
            Tuple of violations found (empty if compliant)
        """
        ...

    @classmethod
    def from_config(cls, config: ConventionConfig) -> Self | None:
        """Create rule from config, None if disabled."""
        ...


class LineRuleProtocol(Protocol):
    """Contract for formatting rules over raw source lines."""

    rule_name: str
    """Unique rule identifier."""

    category: RuleCategory
    """Rule category for grouping violations."""

    def check_line(self, path: Path, line_number: int, text: str) -> Violation | None:
        """Evaluate one line (1-based line number)."""
        ...

    @classmethod
    def from_config(cls, config: ConventionConfig) -> Self | None:
        """Create rule from config, None if disabled."""
        ...
