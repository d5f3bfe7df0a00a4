"""Role-driven casing rules.

Each role declares the casing pattern it requires. The declared
expectation decides ambiguous shapes: "X" is valid for a class and "x"
for a parameter, whatever classify() would call them.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING, ClassVar

from conventioncheck.application.casing import analyze, conforms
from conventioncheck.application.rules._base import BaseIdentifierRule
from conventioncheck.domain.model.enums import CasingPattern, Role

if TYPE_CHECKING:
    from collections.abc import Iterable

    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.violation import Violation


def _matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Case-sensitive fnmatch against any pattern."""
    return any(fnmatch.fnmatchcase(name, p) for p in patterns)


def _to_capital_camel(name: str) -> str:
    """Best-effort CapitalCamelCase spelling for suggestions."""
    words = analyze(name).words
    return "".join(w[:1].upper() + w[1:] for w in words)


def _to_camel(name: str) -> str:
    """Best-effort camelCase spelling for suggestions (keeps leading underscores)."""
    shape = analyze(name)
    if not shape.words:
        return name
    head, *tail = shape.words
    prefix = shape.raw[: len(shape.raw) - len(shape.core)]
    return prefix + head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)


class RoleCasingRule(BaseIdentifierRule):
    """Identifier must conform to the pattern its role requires.

    Subclasses set `required` and `allow_protected`.
    """

    required: ClassVar[CasingPattern]
    allow_protected: ClassVar[bool] = False

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Check protected marker and casing of the subject name."""
        name = self.subject_name(identifier)
        violations: list[Violation] = []

        if name.startswith("_") and not self.allow_protected:
            violations.append(
                self.violation(
                    identifier,
                    f"{identifier.role.value.capitalize()} name must not start with an underscore",
                    expected="no leading underscore",
                    actual=name,
                    suggestion=name.lstrip("_") or None,
                )
            )

        if not conforms(
            name,
            self.required,
            policy=self._config.acronym_policy,
            acronyms=self._config.acronyms,
        ):
            violations.append(
                self.violation(
                    identifier,
                    f"{identifier.role.value.capitalize()} name must be {self.required.value}",
                    expected=self.required.value,
                    actual=f"{name} ({analyze(name).pattern.value})",
                    suggestion=self.suggest(name),
                )
            )

        return tuple(violations)

    def subject_name(self, identifier: Identifier) -> str:
        """Part of the identifier the casing applies to."""
        return identifier.name

    def suggest(self, name: str) -> str | None:
        """Corrected spelling, None when no sensible one exists."""
        if self.required is CasingPattern.CAPITAL_CAMEL_CASE:
            fixed = _to_capital_camel(name)
        elif self.required is CasingPattern.CAMEL_CASE:
            fixed = _to_camel(name)
        else:
            fixed = "_".join(w.upper() for w in analyze(name).words)
        return fixed if fixed and fixed != name else None


class FolderNameRule(RoleCasingRule):
    """Folders are CapitalCamelCase unless listed as exceptions.

    Exceptions are fnmatch patterns (dotfiles, OS-reserved names).
    """

    rule_name = "folder-name"
    roles = frozenset({Role.FOLDER})
    required = CasingPattern.CAPITAL_CAMEL_CASE

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Skip configured exceptions."""
        if not super().applies_to(identifier, context):
            return False
        return not _matches_any(identifier.name, self._config.folder_name_exceptions)


class FileNameRule(RoleCasingRule):
    """File stems are CapitalCamelCase unless listed as exceptions.

    The stem is the name up to the first dot, so "UserList.test.php"
    is checked as "UserList".
    """

    rule_name = "file-name"
    roles = frozenset({Role.FILE})
    required = CasingPattern.CAPITAL_CAMEL_CASE

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Skip configured exceptions (matched on full name and stem)."""
        if not super().applies_to(identifier, context):
            return False
        exceptions = self._config.file_name_exceptions
        if _matches_any(identifier.name, exceptions):
            return False
        return not _matches_any(self.subject_name(identifier), exceptions)

    def subject_name(self, identifier: Identifier) -> str:
        """File stem."""
        return identifier.name.split(".", 1)[0]


class TypeNameRule(RoleCasingRule):
    """Classes and enums are CapitalCamelCase."""

    rule_name = "type-name"
    roles = frozenset({Role.CLASS, Role.ENUM})
    required = CasingPattern.CAPITAL_CAMEL_CASE


class CallableNameRule(RoleCasingRule):
    """Functions, methods, parameters and locals are camelCase.

    A leading underscore is allowed (protected). Overrides of externally
    imposed signatures are exempt.
    """

    rule_name = "callable-name"
    roles = frozenset({Role.FUNCTION, Role.METHOD, Role.PARAMETER, Role.LOCAL_VARIABLE})
    required = CasingPattern.CAMEL_CASE
    allow_protected = True

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Overrides keep the name imposed on them."""
        return super().applies_to(identifier, context) and not context.is_override


class PropertyNameRule(RoleCasingRule):
    """Properties are camelCase, leading underscore allowed."""

    rule_name = "property-name"
    roles = frozenset({Role.PROPERTY})
    required = CasingPattern.CAMEL_CASE
    allow_protected = True


class ConstantNameRule(RoleCasingRule):
    """Global constants are ALL_CAPS_UNDERSCORE, always, no exceptions."""

    rule_name = "constant-name"
    roles = frozenset({Role.GLOBAL_CONSTANT})
    required = CasingPattern.ALL_CAPS_UNDERSCORE
    # Protected marker is already rejected by the pattern itself.
    allow_protected = True
