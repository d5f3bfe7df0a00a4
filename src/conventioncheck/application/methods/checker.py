"""Method-type contract checks.

MethodChecker classifies a signature and checks it against the contract
of its category. It never raises for bad input: every breach, and every
unclassifiable method, becomes a Violation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from conventioncheck.application.casing import split_words, strip_protected
from conventioncheck.application.methods.classifier import (
    callee_types,
    classify_method,
    is_init_name,
)
from conventioncheck.domain.model.class_hierarchy import ClassHierarchy
from conventioncheck.domain.model.classification import AmbiguousClassification
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import (
    CallScope,
    MethodType,
    ReturnContract,
    RuleCategory,
    Severity,
)
from conventioncheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from conventioncheck.domain.model.method_signature import CallTarget, MethodSignature
    from conventioncheck.domain.model.method_type_rule import MethodTypeRule

logger = structlog.get_logger(__name__)

UNCLASSIFIED = "unclassified-method"
INIT_PARAMETERS = "init-parameters"
GIVE_PARAMETERS = "give-parameters"
VALIDATE_PARAMETERS = "validate-parameters"
GIVE_PARAMETER_NAME = "give-parameter-name"
METHOD_RETURN = "method-return"
METHOD_THROWS = "method-throws"
METHOD_MUTATION = "method-mutation"
METHOD_CALLEE = "method-callee"
ON_VISIBILITY = "on-visibility"
DESIGNATED_INIT_DELEGATION = "designated-init-delegation"
CONVENIENCE_INIT_DELEGATION = "convenience-init-delegation"

METHOD_RULE_NAMES: frozenset[str] = frozenset(
    {
        UNCLASSIFIED,
        INIT_PARAMETERS,
        GIVE_PARAMETERS,
        VALIDATE_PARAMETERS,
        GIVE_PARAMETER_NAME,
        METHOD_RETURN,
        METHOD_THROWS,
        METHOD_MUTATION,
        METHOD_CALLEE,
        ON_VISIBILITY,
        DESIGNATED_INIT_DELEGATION,
        CONVENIENCE_INIT_DELEGATION,
    }
)

_PARAMETER_RULES = {
    MethodType.GIVE: GIVE_PARAMETERS,
    MethodType.VALIDATE: VALIDATE_PARAMETERS,
}


def _capitalize(word: str) -> str:
    core, _ = strip_protected(word)
    return core[:1].upper() + core[1:]


class MethodChecker:
    """Classifies method signatures and enforces method-type contracts.

    Stateless after construction: check() is a pure function of the
    signature, apart from debug logging.

    Attributes:
        _config: Convention configuration
        _hierarchy: Class parent-reference table for designated-init checks
    """

    def __init__(
        self,
        config: ConventionConfig | None = None,
        hierarchy: ClassHierarchy | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            config: Convention configuration (defaults if None)
            hierarchy: Class hierarchy (empty if None)
        """
        self._config = config or ConventionConfig()
        self._hierarchy = hierarchy or ClassHierarchy()

    def classify(self, signature: MethodSignature) -> MethodTypeRule | AmbiguousClassification:
        """Infer the method type of a signature."""
        return classify_method(signature, self._config)

    def check(self, signature: MethodSignature) -> tuple[Violation, ...]:
        """Classify a signature and check it against its contract.

        Args:
            signature: Method signature with body summary

        Returns:
            Tuple of violations (empty if compliant)
        """
        classification = self.classify(signature)
        if isinstance(classification, AmbiguousClassification):
            return self._filter((self._unclassified(signature, classification),))
        return self.check_contract(signature, classification)

    def check_contract(
        self,
        signature: MethodSignature,
        rule: MethodTypeRule,
    ) -> tuple[Violation, ...]:
        """Check a signature against a given contract.

        Usable directly when the source declares the method type
        instead of leaving it to naming.

        Args:
            signature: Method signature with body summary
            rule: Contract to enforce

        Returns:
            Tuple of violations (empty if compliant)
        """
        violations: list[Violation] = []

        violations.extend(self._check_parameters(signature, rule))
        violations.extend(self._check_return(signature, rule))

        if signature.throws and not rule.may_throw:
            violations.append(
                self._violation(
                    METHOD_THROWS,
                    signature,
                    f"{rule.method_type.value.capitalize()} method must not throw",
                    expected="no throw",
                    actual="throws",
                )
            )

        if signature.mutates_state and not rule.may_mutate:
            violations.append(
                self._violation(
                    METHOD_MUTATION,
                    signature,
                    f"{rule.method_type.value.capitalize()} method must not mutate state",
                    expected="no state mutation",
                    actual="mutates state",
                )
            )

        if rule.must_be_protected and not signature.is_protected:
            violations.append(
                self._violation(
                    ON_VISIBILITY,
                    signature,
                    f"{rule.method_type.value.capitalize()} method must be protected",
                    expected=f"_{signature.name}",
                    actual=signature.name,
                    suggestion=f"Rename to _{signature.name}",
                )
            )

        violations.extend(self._check_callees(signature, rule))

        if rule.method_type is MethodType.DESIGNATED_INIT:
            violations.extend(self._check_designated_delegation(signature))
        elif rule.method_type is MethodType.CONVENIENCE_INIT:
            violations.extend(self._check_convenience_delegation(signature))

        return self._filter(violations)

    # ------------------------------------------------------------------
    # Contract parts
    # ------------------------------------------------------------------

    def _check_parameters(
        self,
        signature: MethodSignature,
        rule: MethodTypeRule,
    ) -> list[Violation]:
        count = signature.parameter_count
        method_type = rule.method_type

        if method_type.is_init:
            return self._check_init_parameters(signature)

        if method_type is MethodType.GIVE:
            violations: list[Violation] = []
            if count == 0 and not signature.is_computed_property:
                violations.append(
                    self._violation(
                        GIVE_PARAMETERS,
                        signature,
                        "Give method requires at least one parameter "
                        "unless it substitutes a computed property",
                        expected=rule.param_bounds,
                        actual=f"{count} parameter(s)",
                    )
                )
            violations.extend(self._check_give_name(signature))
            return violations

        if rule.accepts_param_count(count):
            return []

        name = _PARAMETER_RULES.get(method_type, f"{method_type.name.lower()}-parameters")
        return [
            self._violation(
                name,
                signature,
                f"{method_type.value.capitalize()} method requires {rule.param_bounds}",
                expected=rule.param_bounds,
                actual=f"{count} parameter(s)",
            )
        ]

    def _check_init_parameters(self, signature: MethodSignature) -> list[Violation]:
        core = signature.core_name
        count = signature.parameter_count

        if core == "init" and count > 0:
            first = _capitalize(signature.parameters[0])
            return [
                self._violation(
                    INIT_PARAMETERS,
                    signature,
                    "init takes no parameters; initializers with input are named initWith<Param>",
                    expected="0 parameter(s)",
                    actual=f"{count} parameter(s)",
                    suggestion=f"Rename to {signature.name}With{first}",
                )
            ]

        if core != "init" and count == 0:
            return [
                self._violation(
                    INIT_PARAMETERS,
                    signature,
                    "initWith initializers require at least one parameter",
                    expected=">= 1 parameter(s)",
                    actual="0 parameter(s)",
                    suggestion="Rename to init",
                )
            ]

        return []

    def _check_give_name(self, signature: MethodSignature) -> list[Violation]:
        """Give name must carry the first parameter name after a preposition."""
        first = signature.first_parameter
        if first is None:
            return []

        core = signature.core_name
        words = split_words(core)
        param = _capitalize(first)
        prepositions = self._config.prepositions

        for i, word in enumerate(words):
            if word in prepositions and "".join(words[i + 1 :]).startswith(param):
                return []

        if words and words[-1] in prepositions:
            expected = f"{signature.name}{param}"
            suggestion = f"Rename to {expected}"
        else:
            expected = f"name containing <Preposition>{param}"
            suggestion = f"Name the parameter after a preposition, e.g. {signature.name}For{param}"

        return [
            self._violation(
                GIVE_PARAMETER_NAME,
                signature,
                "Give method name must include the first parameter name",
                expected=expected,
                actual=signature.name,
                suggestion=suggestion,
            )
        ]

    def _check_return(self, signature: MethodSignature, rule: MethodTypeRule) -> list[Violation]:
        label = rule.method_type.value.capitalize()
        if rule.returns is ReturnContract.REQUIRED and not signature.returns_value:
            return [
                self._violation(
                    METHOD_RETURN,
                    signature,
                    f"{label} method must return a value",
                    expected="returns a value",
                    actual="returns nothing",
                )
            ]
        if rule.returns is ReturnContract.FORBIDDEN and signature.returns_value:
            return [
                self._violation(
                    METHOD_RETURN,
                    signature,
                    f"{label} method must not return a value",
                    expected="returns nothing",
                    actual="returns a value",
                )
            ]
        return []

    def _check_callees(self, signature: MethodSignature, rule: MethodTypeRule) -> list[Violation]:
        violations: list[Violation] = []
        allowed = rule.allowed_callees
        allowed_text = ", ".join(sorted(t.value for t in allowed)) or "nothing"

        for call in signature.calls:
            candidates = callee_types(call.name, self._config)
            if not candidates or candidates & allowed:
                continue
            kinds = "/".join(sorted(t.value for t in candidates))
            violations.append(
                self._violation(
                    METHOD_CALLEE,
                    signature,
                    f"{rule.method_type.value.capitalize()} method must not call "
                    f"{kinds} method '{call.name}'",
                    expected=f"calls to: {allowed_text}",
                    actual=f"calls {call.name} ({kinds})",
                )
            )

        return violations

    def _check_designated_delegation(self, signature: MethodSignature) -> list[Violation]:
        violations: list[Violation] = []
        super_inits = self._init_calls(signature, CallScope.SUPER)
        self_inits = self._init_calls(signature, CallScope.SELF)

        if self_inits:
            names = ", ".join(c.name for c in self_inits)
            violations.append(
                self._violation(
                    DESIGNATED_INIT_DELEGATION,
                    signature,
                    "Designated init must not delegate across to another init of its class",
                    expected="super designated init call only",
                    actual=f"calls self.{names}",
                )
            )

        owner = signature.owner
        record = self._hierarchy.get(owner) if owner else None
        if record is None:
            logger.debug("designated_init_unresolved", method=signature.name, owner=owner)
            return violations

        if record.is_base:
            return violations

        if not super_inits:
            violations.append(
                self._violation(
                    DESIGNATED_INIT_DELEGATION,
                    signature,
                    f"Designated init of '{owner}' must call a designated init of '{record.parent}'",
                    expected=f"super designated init of {record.parent}",
                    actual="no super init call",
                )
            )
            return violations

        # Only adjudicate when some known ancestor declares its designated inits.
        declared = [a for a in self._hierarchy.ancestors(record.name) if a.designated_inits]
        if not declared:
            return violations

        for call in super_inits:
            if self._hierarchy.designated_init_owner(record.name, call.name) is None:
                known = sorted({name for a in declared for name in a.designated_inits})
                violations.append(
                    self._violation(
                        DESIGNATED_INIT_DELEGATION,
                        signature,
                        f"Designated init must call a superclass designated init, "
                        f"'{call.name}' is not one",
                        expected=f"one of: {', '.join(known)}",
                        actual=f"super.{call.name}",
                    )
                )

        return violations

    def _check_convenience_delegation(self, signature: MethodSignature) -> list[Violation]:
        violations: list[Violation] = []
        super_inits = self._init_calls(signature, CallScope.SUPER)

        if super_inits:
            names = ", ".join(c.name for c in super_inits)
            violations.append(
                self._violation(
                    CONVENIENCE_INIT_DELEGATION,
                    signature,
                    "Convenience init must not call a superclass init",
                    expected="self init call only",
                    actual=f"calls super.{names}",
                )
            )

        if not self._init_calls(signature, CallScope.SELF):
            violations.append(
                self._violation(
                    CONVENIENCE_INIT_DELEGATION,
                    signature,
                    "Convenience init must delegate to an init of its own class",
                    expected="self init call",
                    actual="no self init call",
                )
            )

        return violations

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _init_calls(signature: MethodSignature, scope: CallScope) -> tuple[CallTarget, ...]:
        return tuple(c for c in signature.calls_with_scope(scope) if is_init_name(c.name))

    def _unclassified(
        self,
        signature: MethodSignature,
        ambiguity: AmbiguousClassification,
    ) -> Violation:
        return Violation(
            rule_name=UNCLASSIFIED,
            message=f"Method type cannot be determined: {ambiguity.reason}",
            subject=self._subject(signature),
            severity=Severity.WARNING,
            category=RuleCategory.CLASSIFICATION,
            expected="init, validate, do, _on prefix or give noun phrase",
            actual=signature.name or "''",
            location=signature.location,
            suggestion="Rename the method after its type",
        )

    def _violation(
        self,
        rule_name: str,
        signature: MethodSignature,
        message: str,
        *,
        expected: str,
        actual: str,
        suggestion: str | None = None,
    ) -> Violation:
        return Violation(
            rule_name=rule_name,
            message=message,
            subject=self._subject(signature),
            severity=Severity.ERROR,
            category=RuleCategory.METHOD_CONTRACT,
            expected=expected,
            actual=actual,
            location=signature.location,
            suggestion=suggestion,
        )

    @staticmethod
    def _subject(signature: MethodSignature) -> str:
        return f"method {signature.display}"

    def _filter(self, violations: list[Violation] | tuple[Violation, ...]) -> tuple[Violation, ...]:
        """Drop violations of disabled rules."""
        disabled = self._config.disabled_rules
        if not disabled:
            return tuple(violations)
        return tuple(v for v in violations if v.rule_name not in disabled)
