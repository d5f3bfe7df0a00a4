"""Identifier entity and its declaration context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from conventioncheck.domain.model.enums import Role, Visibility

if TYPE_CHECKING:
    from conventioncheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Identifier:
    """Named thing in source code with its declared role.

    The name is not validated here: an empty or malformed name
    is a reportable condition, produced by the rule engine.

    Attributes:
        name: Identifier text as written in source
        role: Declared role (exactly one)
        location: Where the identifier was declared, if known
    """

    name: str
    role: Role
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        if not isinstance(self.role, Role):
            raise TypeError(f"role must be Role, got {type(self.role).__name__}")

    @property
    def is_protected(self) -> bool:
        """Leading underscore marks protected visibility."""
        return self.name.startswith("_")

    @property
    def visibility(self) -> Visibility:
        """Visibility by naming convention."""
        return Visibility.PROTECTED if self.is_protected else Visibility.PUBLIC

    @property
    def display(self) -> str:
        """Role and quoted name, e.g. "property 'isReady'"."""
        return f"{self.role.value} {self.name!r}"


@dataclass(frozen=True, slots=True)
class IdentifierContext:
    """Declaration context supplied by the source parser.

    Attributes:
        is_override: Identifier overrides an externally imposed signature
        is_boolean: Property holds a boolean value
        is_lazy: Property is the backing store of a lazily computed value
    """

    is_override: bool = False
    is_boolean: bool = False
    is_lazy: bool = False

    @classmethod
    def default(cls) -> IdentifierContext:
        """Context with no special flags."""
        return _DEFAULT_CONTEXT


_DEFAULT_CONTEXT = IdentifierContext()
