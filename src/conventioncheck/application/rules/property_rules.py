"""Property rules for boolean and lazily computed properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.casing import strip_protected
from conventioncheck.application.rules._base import BaseIdentifierRule
from conventioncheck.domain.model.enums import Role

if TYPE_CHECKING:
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.violation import Violation

_BOOLEAN_PREFIX = "is"
_LAZY_SUFFIX = "Lazy"


class BooleanPropertyPrefixRule(BaseIdentifierRule):
    """Boolean properties begin with 'is' (isVisible)."""

    rule_name = "boolean-property-prefix"
    roles = frozenset({Role.PROPERTY})

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Only boolean-typed properties."""
        return super().applies_to(identifier, context) and context.is_boolean

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Check 'is' + capital on the unprotected core."""
        core, _ = strip_protected(identifier.name)
        rest = core[len(_BOOLEAN_PREFIX) :]
        if core.startswith(_BOOLEAN_PREFIX) and rest[:1].isupper():
            return ()

        prefix = identifier.name[: len(identifier.name) - len(core)]
        return (
            self.violation(
                identifier,
                "Boolean property name must begin with 'is'",
                expected=f"{prefix}is<Name>",
                actual=identifier.name,
                suggestion=f"{prefix}is{core[:1].upper()}{core[1:]}",
            ),
        )


class LazyPropertyNameRule(BaseIdentifierRule):
    """Lazy backing properties begin with '_' and end with 'Lazy' (_totalLazy)."""

    rule_name = "lazy-property-name"
    roles = frozenset({Role.PROPERTY})

    def applies_to(self, identifier: Identifier, context: IdentifierContext) -> bool:
        """Only lazy backing properties."""
        return super().applies_to(identifier, context) and context.is_lazy

    def check(self, identifier: Identifier, context: IdentifierContext) -> tuple[Violation, ...]:
        """Check underscore prefix and 'Lazy' suffix."""
        name = identifier.name
        core, is_protected = strip_protected(name)
        has_suffix = core.endswith(_LAZY_SUFFIX) and len(core) > len(_LAZY_SUFFIX)
        if is_protected and has_suffix:
            return ()

        stem = core[: -len(_LAZY_SUFFIX)] if has_suffix else core
        missing = []
        if not is_protected:
            missing.append("leading '_'")
        if not has_suffix:
            missing.append(f"'{_LAZY_SUFFIX}' suffix")
        return (
            self.violation(
                identifier,
                f"Lazy property name is missing {' and '.join(missing)}",
                expected=f"_<name>{_LAZY_SUFFIX}",
                actual=name,
                suggestion=f"_{stem}{_LAZY_SUFFIX}",
            ),
        )
