"""Scan statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanStats:
    """Statistics from a convention scan.

    Immutable value object tracking scan volume.

    Attributes:
        units_scanned: Number of scan units processed
        identifiers_checked: Number of identifiers evaluated
        signatures_checked: Number of method signatures classified
        lines_checked: Number of source lines checked
        duration_ms: Wall-clock scan time in milliseconds
    """

    units_scanned: int
    identifiers_checked: int
    signatures_checked: int
    lines_checked: int
    duration_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.units_scanned < 0:
            raise ValueError(f"units_scanned must be >= 0, got {self.units_scanned}")
        if self.identifiers_checked < 0:
            raise ValueError(f"identifiers_checked must be >= 0, got {self.identifiers_checked}")
        if self.signatures_checked < 0:
            raise ValueError(f"signatures_checked must be >= 0, got {self.signatures_checked}")
        if self.lines_checked < 0:
            raise ValueError(f"lines_checked must be >= 0, got {self.lines_checked}")
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")

    def __add__(self, other: ScanStats) -> ScanStats:
        """Sum counters. Durations add up as well."""
        return ScanStats(
            units_scanned=self.units_scanned + other.units_scanned,
            identifiers_checked=self.identifiers_checked + other.identifiers_checked,
            signatures_checked=self.signatures_checked + other.signatures_checked,
            lines_checked=self.lines_checked + other.lines_checked,
            duration_ms=self.duration_ms + other.duration_ms,
        )

    @classmethod
    def empty(cls) -> ScanStats:
        """Create empty scan stats."""
        return cls(
            units_scanned=0,
            identifiers_checked=0,
            signatures_checked=0,
            lines_checked=0,
            duration_ms=0.0,
        )
