"""Method signature entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from conventioncheck.domain.model.enums import CallScope, Visibility

if TYPE_CHECKING:
    from conventioncheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class CallTarget:
    """Method called from a method body.

    Attributes:
        name: Called method name
        scope: Receiver of the call (super, self, external)
    """

    name: str
    scope: CallScope = CallScope.EXTERNAL

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("call target name must not be empty")


@dataclass(frozen=True, slots=True)
class MethodSignature:
    """Method signature plus a summary of its body.

    Produced by the external source parser.

    Attributes:
        name: Method name as written in source
        parameters: Ordered parameter names
        returns_value: Body returns a value
        throws: Body may raise
        mutates_state: Body writes object or global state
        calls: Methods called from the body
        owner: Name of the declaring class, None for free functions
        is_computed_property: Zero-parameter method standing in for a property
        location: Where the method was declared, if known
    """

    name: str
    parameters: tuple[str, ...] = ()
    returns_value: bool = False
    throws: bool = False
    mutates_state: bool = False
    calls: tuple[CallTarget, ...] = ()
    owner: str | None = None
    is_computed_property: bool = False
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        if not isinstance(self.parameters, tuple):
            raise TypeError("parameters must be a tuple")
        if not isinstance(self.calls, tuple):
            raise TypeError("calls must be a tuple")
        if self.is_computed_property and self.parameters:
            raise ValueError("computed property substitute must take no parameters")

    @property
    def core_name(self) -> str:
        """Name with leading underscores stripped."""
        return self.name.lstrip("_")

    @property
    def is_protected(self) -> bool:
        """Leading underscore marks protected visibility."""
        return self.name.startswith("_")

    @property
    def visibility(self) -> Visibility:
        """Visibility by naming convention."""
        return Visibility.PROTECTED if self.is_protected else Visibility.PUBLIC

    @property
    def parameter_count(self) -> int:
        """Number of parameters."""
        return len(self.parameters)

    @property
    def first_parameter(self) -> str | None:
        """First parameter name, None if there are none."""
        return self.parameters[0] if self.parameters else None

    def calls_with_scope(self, scope: CallScope) -> tuple[CallTarget, ...]:
        """Calls made on the given receiver, in body order."""
        return tuple(c for c in self.calls if c.scope is scope)

    @property
    def display(self) -> str:
        """Short form for reports: name(param, ...)."""
        qualified = f"{self.owner}.{self.name}" if self.owner else self.name
        return f"{qualified}({', '.join(self.parameters)})"
