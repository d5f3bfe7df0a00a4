"""Method-type classification by naming prefix.

Decision order (per method, first match wins):
    0. constructor names                     → CONSTRUCTOR
    1. init / initWith<X>                    → DESIGNATED_INIT or CONVENIENCE_INIT
       calls a super init                      → designated
       calls self inits only                   → convenience
       calls no init                           → designated (base class)
    2. validate / validate<X>                → VALIDATE
    3. do / do<X>                            → DO
       on<X>                                 → ON
    4. preposition word or computed property → GIVE
    5. anything else                         → AmbiguousClassification

Structure never reclassifies: a validate method without parameters is
still VALIDATE and its contract check reports the mismatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventioncheck.application.casing import is_blank, split_words, strip_protected
from conventioncheck.domain.model.classification import AmbiguousClassification
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import CallScope, MethodType
from conventioncheck.domain.model.method_type_rule import MethodTypeRule, rule_for

if TYPE_CHECKING:
    from collections.abc import Set

    from conventioncheck.domain.model.method_signature import MethodSignature

_INIT = "init"
_INIT_WITH = "initWith"
_VALIDATE = "validate"
_DO = "do"
_ON = "on"

_INIT_TYPES = frozenset({MethodType.DESIGNATED_INIT, MethodType.CONVENIENCE_INIT})


def _has_prefix(core: str, prefix: str, *, bare: bool = True) -> bool:
    """Prefix followed by a capital (doSave), or the bare prefix when allowed."""
    if core == prefix:
        return bare
    return core.startswith(prefix) and core[len(prefix) : len(prefix) + 1].isupper()


def is_init_name(name: str) -> bool:
    """init, _init, initWith<X>, _initWith<X>."""
    core, _ = strip_protected(name)
    return core == _INIT or _has_prefix(core, _INIT_WITH, bare=False)


def has_preposition(name: str, prepositions: Set[str]) -> bool:
    """Any word of the name is a configured preposition (squareRootOf)."""
    core, _ = strip_protected(name)
    return any(word in prepositions for word in split_words(core))


def _name_type(name: str, config: ConventionConfig) -> MethodType | None:
    """Type claimed by naming alone. Inits are not split here."""
    core, _ = strip_protected(name)
    if core in config.constructor_names:
        return MethodType.CONSTRUCTOR
    if is_init_name(core):
        return MethodType.DESIGNATED_INIT
    if _has_prefix(core, _VALIDATE):
        return MethodType.VALIDATE
    if _has_prefix(core, _DO):
        return MethodType.DO
    if _has_prefix(core, _ON, bare=False):
        return MethodType.ON
    if has_preposition(core, config.prepositions):
        return MethodType.GIVE
    return None


def callee_types(name: str, config: ConventionConfig | None = None) -> frozenset[MethodType]:
    """Possible types of a called method, inferred from its name.

    Inits could be either init kind. Names with no convention (library
    calls) yield an empty set and are not judged.

    Args:
        name: Called method name
        config: Convention configuration (defaults if None)

    Returns:
        Candidate method types
    """
    method_type = _name_type(name, config or ConventionConfig())
    if method_type is None:
        return frozenset()
    if method_type.is_init:
        return _INIT_TYPES
    return frozenset({method_type})


def classify_method(
    signature: MethodSignature,
    config: ConventionConfig | None = None,
) -> MethodTypeRule | AmbiguousClassification:
    """Infer the method type a signature claims to be.

    Args:
        signature: Method signature with body summary
        config: Convention configuration (defaults if None)

    Returns:
        Contract of the inferred type, or AmbiguousClassification
    """
    config = config or ConventionConfig()

    if is_blank(signature.name):
        return AmbiguousClassification(signature.name, "method name is empty")

    method_type = _name_type(signature.name, config)

    if method_type is MethodType.DESIGNATED_INIT:
        return rule_for(_init_kind(signature))

    if method_type is not None:
        return rule_for(method_type)

    if signature.is_computed_property:
        return rule_for(MethodType.GIVE)

    return AmbiguousClassification(
        signature.name,
        "name has no method-type prefix (init, validate, do, _on) "
        "and no preposition marking a give method",
    )


def _init_kind(signature: MethodSignature) -> MethodType:
    """Designated if it calls up, convenience if it only calls across."""
    init_calls = [c for c in signature.calls if is_init_name(c.name)]
    if any(c.scope is CallScope.SUPER for c in init_calls):
        return MethodType.DESIGNATED_INIT
    if any(c.scope is CallScope.SELF for c in init_calls):
        return MethodType.CONVENIENCE_INIT
    return MethodType.DESIGNATED_INIT
