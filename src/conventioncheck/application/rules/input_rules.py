"""Malformed input rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.casing import is_blank
from conventioncheck.application.rules._base import BaseIdentifierRule
from conventioncheck.domain.model.enums import Role, RuleCategory

if TYPE_CHECKING:
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.violation import Violation


class EmptyIdentifierRule(BaseIdentifierRule):
    """Empty identifiers are reported, never fatal.

    Applies to every role. Blank names (whitespace or underscores only)
    count as empty.
    """

    rule_name = "empty-identifier"
    roles = frozenset(Role)
    category = RuleCategory.INPUT

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Every identifier is checked."""
        return True

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Report blank names."""
        if not is_blank(identifier.name):
            return ()
        return (
            self.violation(
                identifier,
                f"{identifier.role.value.capitalize()} name must not be empty",
                expected="non-empty identifier",
                actual=repr(identifier.name),
            ),
        )
