"""Model compliance tests.

- FAIL-FIRST validation: invalid values raise at construction
- Immutability: value objects are frozen
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from conventioncheck.domain.exceptions.configuration import ConfigurationError
from conventioncheck.domain.model.class_hierarchy import ClassRecord
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.scan_stats import ScanStats
from tests.factories import (
    make_context,
    make_identifier,
    make_location,
    make_signature,
    make_stats,
    make_violation,
)

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid values raise instead of falling back to defaults."""

    def test_location_zero_line_raises(self) -> None:
        """Lines are 1-based."""
        with pytest.raises(ValueError, match="line"):
            make_location(line=0)

    def test_location_negative_column_raises(self) -> None:
        """Columns are 0-based."""
        with pytest.raises(ValueError, match="column"):
            make_location(column=-1)

    def test_negative_stats_raise(self) -> None:
        """Counters are never negative."""
        with pytest.raises(ValueError, match="units_scanned"):
            ScanStats(units_scanned=-1, identifiers_checked=0, signatures_checked=0, lines_checked=0)

    def test_config_bad_line_length_raises(self) -> None:
        """max_line_length must be positive."""
        with pytest.raises(ConfigurationError, match="max_line_length"):
            ConventionConfig(max_line_length=0)

    def test_config_unknown_key_raises(self) -> None:
        """Unknown keys are rejected, not ignored."""
        with pytest.raises(ConfigurationError, match="unknown"):
            ConventionConfig.from_mapping({"maxLineLenght": 80})


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects are frozen dataclasses."""

    @pytest.mark.parametrize(
        ("obj", "attr"),
        [
            (make_location(), "line"),
            (make_identifier("name"), "name"),
            (make_context(), "is_override"),
            (make_signature("doRun"), "name"),
            (make_violation(), "message"),
            (make_stats(), "units_scanned"),
            (ClassRecord("Model"), "parent"),
            (ConventionConfig(), "max_line_length"),
        ],
    )
    def test_frozen(self, obj: object, attr: str) -> None:
        """Assignment raises FrozenInstanceError."""
        with pytest.raises(FrozenInstanceError):
            setattr(obj, attr, None)

    def test_value_objects_hashable(self) -> None:
        """Identifiers and violations can be used in sets."""
        assert len({make_identifier("a"), make_identifier("a")}) == 1
        assert len({make_violation(), make_violation()}) == 1
