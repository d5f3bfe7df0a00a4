"""Method-type contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from conventioncheck.domain.model.enums import MethodType, ReturnContract


@dataclass(frozen=True, slots=True)
class MethodTypeRule:
    """Contract that a method of one type must honour.

    Attributes:
        method_type: Category this contract belongs to
        prefixes: Naming prefixes that claim the category
        min_params: Minimum parameter count
        max_params: Maximum parameter count, None = unbounded
        returns: Return-value contract
        may_throw: Method may raise
        allowed_callees: Method types this one may call
        may_mutate: Method may mutate state
        must_be_protected: Name must carry a leading underscore
    """

    method_type: MethodType
    prefixes: tuple[str, ...]
    min_params: int
    max_params: int | None
    returns: ReturnContract
    may_throw: bool
    allowed_callees: frozenset[MethodType]
    may_mutate: bool
    must_be_protected: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.min_params < 0:
            raise ValueError(f"min_params must be >= 0, got {self.min_params}")
        if self.max_params is not None and self.max_params < self.min_params:
            raise ValueError(
                f"max_params ({self.max_params}) must be >= min_params ({self.min_params})"
            )

    def accepts_param_count(self, count: int) -> bool:
        """Check parameter count against bounds."""
        if count < self.min_params:
            return False
        return self.max_params is None or count <= self.max_params

    @property
    def param_bounds(self) -> str:
        """Human-readable parameter bounds."""
        if self.max_params is None:
            return f">= {self.min_params} parameter(s)"
        if self.max_params == self.min_params:
            return f"exactly {self.min_params} parameter(s)"
        return f"{self.min_params}..{self.max_params} parameter(s)"


_INITS = frozenset({MethodType.DESIGNATED_INIT, MethodType.CONVENIENCE_INIT})
_PURE = frozenset({MethodType.GIVE, MethodType.VALIDATE})
_NOT_INIT = frozenset(MethodType) - _INITS - {MethodType.CONSTRUCTOR}

METHOD_TYPE_RULES: Mapping[MethodType, MethodTypeRule] = MappingProxyType(
    {
        MethodType.CONSTRUCTOR: MethodTypeRule(
            method_type=MethodType.CONSTRUCTOR,
            prefixes=("constructor", "construct"),
            min_params=0,
            max_params=None,
            returns=ReturnContract.FORBIDDEN,
            may_throw=True,
            allowed_callees=_INITS,
            may_mutate=True,
        ),
        MethodType.DESIGNATED_INIT: MethodTypeRule(
            method_type=MethodType.DESIGNATED_INIT,
            prefixes=("init", "initWith"),
            min_params=0,
            max_params=None,
            returns=ReturnContract.FORBIDDEN,
            may_throw=True,
            allowed_callees=_PURE | {MethodType.DO} | _INITS,
            may_mutate=True,
        ),
        MethodType.CONVENIENCE_INIT: MethodTypeRule(
            method_type=MethodType.CONVENIENCE_INIT,
            prefixes=("init", "initWith"),
            min_params=0,
            max_params=None,
            returns=ReturnContract.FORBIDDEN,
            may_throw=True,
            allowed_callees=_PURE | {MethodType.DO} | _INITS,
            may_mutate=True,
        ),
        MethodType.GIVE: MethodTypeRule(
            method_type=MethodType.GIVE,
            prefixes=(),
            min_params=1,
            max_params=None,
            returns=ReturnContract.REQUIRED,
            may_throw=False,
            allowed_callees=_PURE,
            may_mutate=False,
        ),
        MethodType.VALIDATE: MethodTypeRule(
            method_type=MethodType.VALIDATE,
            prefixes=("validate",),
            min_params=1,
            max_params=None,
            returns=ReturnContract.FORBIDDEN,
            may_throw=True,
            allowed_callees=_PURE,
            may_mutate=False,
        ),
        MethodType.DO: MethodTypeRule(
            method_type=MethodType.DO,
            prefixes=("do",),
            min_params=0,
            max_params=None,
            returns=ReturnContract.ANY,
            may_throw=True,
            allowed_callees=_NOT_INIT,
            may_mutate=True,
        ),
        MethodType.ON: MethodTypeRule(
            method_type=MethodType.ON,
            prefixes=("on",),
            min_params=0,
            max_params=None,
            returns=ReturnContract.FORBIDDEN,
            may_throw=True,
            allowed_callees=_NOT_INIT,
            may_mutate=True,
            must_be_protected=True,
        ),
    }
)


def rule_for(method_type: MethodType) -> MethodTypeRule:
    """Contract for a method type."""
    return METHOD_TYPE_RULES[method_type]
