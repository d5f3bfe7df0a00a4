"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from conventioncheck.domain.model.location import Location


class TestLocationCreation:
    """Tests for valid Location creation."""

    def test_minimal_valid(self) -> None:
        loc = Location(file=Path("Models/User.php"))
        assert loc.line == 1
        assert loc.column == 0

    def test_str(self) -> None:
        loc = Location(file=Path("Models/User.php"), line=12, column=4)
        assert str(loc) == "Models/User.php:12:4"

    def test_sort_key(self) -> None:
        a = Location(file=Path("A.php"), line=9)
        b = Location(file=Path("B.php"), line=1)
        assert sorted([b, a], key=Location.sort_key) == [a, b]


class TestLocationFailFirst:
    """Tests for FAIL-FIRST validation in Location."""

    def test_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("test.php"), line=0)

    def test_column_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            Location(file=Path("test.php"), column=-1)

    def test_file_none_raises(self) -> None:
        with pytest.raises(TypeError, match="file"):
            Location(file=None)  # type: ignore[arg-type]
