"""Structural features of an identifier."""

from dataclasses import dataclass

from conventioncheck.domain.model.enums import CasingPattern


@dataclass(frozen=True, slots=True)
class IdentifierShape:
    """Result of tokenizing and classifying an identifier.

    Attributes:
        raw: Identifier as given
        core: Identifier with leading underscores stripped
        pattern: Casing pattern of the core
        words: Word segments of the core
        is_protected: Raw identifier had a leading underscore
    """

    raw: str
    core: str
    pattern: CasingPattern
    words: tuple[str, ...]
    is_protected: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.raw.endswith(self.core):
            raise ValueError(f"core {self.core!r} must be a suffix of raw {self.raw!r}")
        if self.is_protected != self.raw.startswith("_"):
            raise ValueError("is_protected must match the leading underscore of raw")

    @property
    def last_word(self) -> str | None:
        """Last word segment, None for identifiers without words."""
        return self.words[-1] if self.words else None
