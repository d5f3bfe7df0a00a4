"""Class parent-reference lookup table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ClassRecord:
    """Class with a reference to its declared parent.

    Attributes:
        name: Class name
        parent: Parent class name, None for base classes
        designated_inits: Names of the class's designated initializers
    """

    name: str
    parent: str | None = None
    designated_inits: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if self.parent == self.name:
            raise ValueError(f"class {self.name!r} cannot be its own parent")

    @property
    def is_base(self) -> bool:
        """Class declares no parent."""
        return self.parent is None


@dataclass(frozen=True, slots=True)
class ClassHierarchy:
    """Explicit table of class records keyed by name.

    Walks are iterative over parent references. A parent that is not in the
    table ends the walk (external base class). Cycles end the walk too.

    Attributes:
        records: Class name → record mapping
    """

    records: Mapping[str, ClassRecord] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for key, record in self.records.items():
            if key != record.name:
                raise ValueError(f"record name {record.name!r} does not match key {key!r}")

    @classmethod
    def from_records(cls, records: Iterable[ClassRecord]) -> ClassHierarchy:
        """Build table from records. Duplicate names raise ValueError."""
        table: dict[str, ClassRecord] = {}
        for record in records:
            if record.name in table:
                raise ValueError(f"duplicate class record {record.name!r}")
            table[record.name] = record
        return cls(MappingProxyType(table))

    def get(self, name: str) -> ClassRecord | None:
        """Record for a class, None if unknown."""
        return self.records.get(name)

    def ancestors(self, name: str) -> Iterator[ClassRecord]:
        """Yield known ancestors nearest first."""
        seen = {name}
        record = self.records.get(name)
        parent = record.parent if record is not None else None
        while parent is not None and parent not in seen:
            seen.add(parent)
            parent_record = self.records.get(parent)
            if parent_record is None:
                return
            yield parent_record
            parent = parent_record.parent

    def designated_init_owner(self, class_name: str, init_name: str) -> str | None:
        """Nearest ancestor that declares init_name as designated init.

        Args:
            class_name: Class whose ancestors are searched (excluded itself)
            init_name: Initializer name called on super

        Returns:
            Ancestor class name, or None when no known ancestor declares it
        """
        for ancestor in self.ancestors(class_name):
            if init_name in ancestor.designated_inits:
                return ancestor.name
        return None

    def __len__(self) -> int:
        return len(self.records)
