"""Rule engine.

Evaluates identifiers against the ordered identifier rules, and raw
source lines against the line rules.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from conventioncheck.application.methods import METHOD_RULE_NAMES
from conventioncheck.application.rules import (
    builtin_rule_names,
    identifier_rules_from_config,
    line_rules_from_config,
)
from conventioncheck.domain.exceptions.validation import RuleValidationError
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.identifier import IdentifierContext

if TYPE_CHECKING:
    from pathlib import Path

    from conventioncheck.domain.model.identifier import Identifier
    from conventioncheck.domain.model.violation import Violation
    from conventioncheck.domain.ports.rule import IdentifierRuleProtocol, LineRuleProtocol


class RuleEngine:
    """Ordered collection of identifier and line rules.

    Evaluation is a pure function of its input: the same identifier and
    context always yield the same violations in the same order.

    Example:
        engine = RuleEngine.from_config(ConventionConfig())
        violations = engine.evaluate(Identifier("my_property", Role.PROPERTY))
    """

    def __init__(
        self,
        rules: Sequence[IdentifierRuleProtocol] = (),
        line_rules: Sequence[LineRuleProtocol] = (),
    ) -> None:
        """Initialize engine with rules.

        Args:
            rules: Identifier rules in evaluation order
            line_rules: Line rules in evaluation order

        Raises:
            RuleValidationError: Two rules share a name
        """
        self._rules = tuple(rules)
        self._line_rules = tuple(line_rules)
        self._validate_unique_names()

    @classmethod
    def from_config(
        cls,
        config: ConventionConfig | None = None,
        *,
        extra_rules: Sequence[IdentifierRuleProtocol] = (),
    ) -> Self:
        """Create engine with built-in rules enabled by config.

        Args:
            config: Convention configuration (defaults if None)
            extra_rules: User rules evaluated after the built-in ones

        Returns:
            RuleEngine

        Raises:
            RuleValidationError: disabled_rules names an unknown rule
        """
        config = config or ConventionConfig()

        known = builtin_rule_names() | METHOD_RULE_NAMES | {r.rule_name for r in extra_rules}
        for name in sorted(config.disabled_rules - known):
            raise RuleValidationError(name, "unknown rule in disabled_rules")

        extras = tuple(r for r in extra_rules if not config.is_disabled(r.rule_name))
        return cls(
            rules=(*identifier_rules_from_config(config), *extras),
            line_rules=line_rules_from_config(config),
        )

    def _validate_unique_names(self) -> None:
        seen: set[str] = set()
        for rule in (*self._rules, *self._line_rules):
            if rule.rule_name in seen:
                raise RuleValidationError(rule.rule_name, "duplicate rule name")
            seen.add(rule.rule_name)

    def evaluate(
        self,
        identifier: Identifier,
        context: IdentifierContext | None = None,
    ) -> tuple[Violation, ...]:
        """Evaluate all applicable rules against one identifier.

        Args:
            identifier: Identifier under test
            context: Declaration context (default context if None)

        Returns:
            Violations in rule order (empty if compliant)
        """
        context = context or IdentifierContext.default()
        violations: list[Violation] = []

        for rule in self._rules:
            if rule.applies_to(identifier, context):
                violations.extend(rule.check(identifier, context))

        return tuple(violations)

    def evaluate_lines(self, path: Path, lines: Sequence[str]) -> tuple[Violation, ...]:
        """Evaluate line rules against every line of a file.

        Args:
            path: File the lines belong to
            lines: Source lines, first line is line 1

        Returns:
            Violations ordered by line, then rule order
        """
        violations: list[Violation] = []

        for line_number, text in enumerate(lines, start=1):
            for rule in self._line_rules:
                violation = rule.check_line(path, line_number, text)
                if violation is not None:
                    violations.append(violation)

        return tuple(violations)

    @property
    def rule_names(self) -> tuple[str, ...]:
        """Names of configured rules, identifier rules first."""
        return tuple(r.rule_name for r in (*self._rules, *self._line_rules))

    @property
    def rule_count(self) -> int:
        """Number of configured rules."""
        return len(self._rules) + len(self._line_rules)
