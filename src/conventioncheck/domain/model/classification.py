"""Method classification outcome for unclassifiable signatures."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AmbiguousClassification:
    """Signature that matches no method-type pattern.

    Reported for a human to adjudicate, never guessed.

    Attributes:
        signature_name: Name of the unclassified method
        reason: Why no category matched (must not be empty)
    """

    signature_name: str
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.reason:
            raise ValueError("reason must not be empty")
