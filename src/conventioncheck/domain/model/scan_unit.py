"""Unit of scan input."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
    from conventioncheck.domain.model.method_signature import MethodSignature


@dataclass(frozen=True, slots=True)
class ScanUnit:
    """Everything the source parser extracted from one file or folder.

    Units are independent: any number can be checked in parallel.

    Attributes:
        path: File or folder the unit describes
        identifiers: (identifier, context) pairs in declaration order
        signatures: Method signatures in declaration order
        lines: Raw source lines without line terminators
    """

    path: Path
    identifiers: tuple[tuple[Identifier, IdentifierContext], ...] = ()
    signatures: tuple[MethodSignature, ...] = ()
    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not isinstance(self.identifiers, tuple):
            raise TypeError("identifiers must be a tuple")
        if not isinstance(self.signatures, tuple):
            raise TypeError("signatures must be a tuple")
        if not isinstance(self.lines, tuple):
            raise TypeError("lines must be a tuple")
