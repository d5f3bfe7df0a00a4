"""Enum naming rules: literal prefix and singular form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.casing import analyze
from conventioncheck.application.rules._base import BaseIdentifierRule
from conventioncheck.domain.model.enums import Role, Severity

if TYPE_CHECKING:
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.violation import Violation


class EnumPrefixRule(BaseIdentifierRule):
    """Enum names start with the configured prefix followed by a capital (EnColor)."""

    rule_name = "enum-prefix"
    roles = frozenset({Role.ENUM})

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Check literal prefix."""
        prefix = self._config.enum_prefix
        name = identifier.name
        rest = name[len(prefix) :]
        if name.startswith(prefix) and rest[:1].isupper():
            return ()

        return (
            self.violation(
                identifier,
                f"Enum name must start with '{prefix}'",
                expected=f"{prefix}<Name>",
                actual=name,
                suggestion=f"{prefix}{name[:1].upper()}{name[1:]}",
            ),
        )


class EnumSingularRule(BaseIdentifierRule):
    """Enum names are singular (EnColor, not EnColors).

    Lexical heuristic over the last word, so WARNING only:
    - exceptions and singular endings (Status, Address, Basis) pass
    - plural endings (Colors, Entries) warn
    """

    rule_name = "enum-singular"
    roles = frozenset({Role.ENUM})
    severity = Severity.WARNING

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Warn when the last word looks plural."""
        last = analyze(identifier.name).last_word
        if last is None or not self._looks_plural(last.lower()):
            return ()

        return (
            self.violation(
                identifier,
                "Enum name should be singular",
                expected="singular noun",
                actual=f"{identifier.name} (ends with '{last}')",
                suggestion="Name the enum for one of its values, not the set",
            ),
        )

    def _looks_plural(self, word: str) -> bool:
        """Plural-suffix heuristic on a lower-cased word."""
        config = self._config
        if word in config.singular_exceptions:
            return False
        if any(word.endswith(s) for s in config.singular_suffixes):
            return False
        return any(word.endswith(s) and len(word) > len(s) for s in config.plural_suffixes)
