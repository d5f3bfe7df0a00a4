"""Tests for discover_tree()."""

from pathlib import Path

import pytest

from conventioncheck.application.discovery import discover_tree
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import Role
from conventioncheck.domain.model.scan_unit import ScanUnit


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Small project tree.

    Models/User.php, Models/helpers.php, Views/Home.php,
    .git/config, README.md
    """
    (tmp_path / "Models").mkdir()
    (tmp_path / "Models" / "User.php").write_text("<?php\nclass User {}\n")
    (tmp_path / "Models" / "helpers.php").write_text("<?php\n")
    (tmp_path / "Views").mkdir()
    (tmp_path / "Views" / "Home.php").write_text("<?php\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n")
    (tmp_path / "README.md").write_text("# readme\n")
    return tmp_path


def names(units: tuple[ScanUnit, ...]) -> list[str]:
    """Identifier names in unit order."""
    return [unit.identifiers[0][0].name for unit in units]


class TestDiscoverTree:
    """Tests for discover_tree()."""

    def test_sorted_by_path(self, tree: Path) -> None:
        """Units come back in path order; root itself is not reported."""
        assert names(discover_tree(tree)) == [
            "Models",
            "User.php",
            "helpers.php",
            "README.md",
            "Views",
            "Home.php",
        ]

    def test_roles(self, tree: Path) -> None:
        """Folders carry FOLDER, files carry FILE."""
        roles = {u.identifiers[0][0].name: u.identifiers[0][0].role for u in discover_tree(tree)}
        assert roles["Models"] is Role.FOLDER
        assert roles["User.php"] is Role.FILE

    def test_excepted_folders_skipped_entirely(self, tree: Path) -> None:
        """Dot folders are neither reported nor descended into."""
        found = names(discover_tree(tree))
        assert ".git" not in found
        assert "config" not in found

    def test_source_lines_read(self, tree: Path) -> None:
        """Files with a source suffix carry their lines."""
        unit = next(u for u in discover_tree(tree) if u.path.name == "User.php")
        assert unit.lines == ("<?php", "class User {}")

    def test_non_source_files_have_no_lines(self, tree: Path) -> None:
        """Other suffixes are named but not line-checked."""
        unit = next(u for u in discover_tree(tree) if u.path.name == "README.md")
        assert unit.lines == ()

    def test_custom_exceptions(self, tree: Path) -> None:
        """Configured folder patterns replace the defaults."""
        config = ConventionConfig(folder_name_exceptions=("Views",))
        found = names(discover_tree(tree, config))
        assert "Views" not in found
        assert "Home.php" not in found
        assert ".git" in found

    def test_location_points_at_path(self, tree: Path) -> None:
        """Identifier location is the entry path itself."""
        unit = next(u for u in discover_tree(tree) if u.path.name == "Models")
        assert unit.identifiers[0][0].location.file == tree / "Models"

    def test_symlinked_folder_not_followed(self, tree: Path) -> None:
        """A link back to an ancestor is neither reported nor walked."""
        (tree / "Models" / "Loop").symlink_to(tree, target_is_directory=True)
        found = names(discover_tree(tree))
        assert "Loop" not in found
        assert found.count("Models") == 1
        assert len(found) == 6

    def test_symlinked_outside_folder_not_followed(
        self, tree: Path, tmp_path_factory: pytest.TempPathFactory
    ) -> None:
        """Links cannot pull files from outside the root into the scan."""
        outside = tmp_path_factory.mktemp("outside")
        (outside / "Secret.php").write_text("<?php\n")
        (tree / "Shared").symlink_to(outside, target_is_directory=True)
        assert "Secret.php" not in names(discover_tree(tree))

    def test_root_must_be_directory(self, tmp_path: Path) -> None:
        """Files and missing paths are rejected."""
        file = tmp_path / "x.php"
        file.write_text("")
        with pytest.raises(ValueError, match="directory"):
            discover_tree(file)
        with pytest.raises(ValueError, match="directory"):
            discover_tree(tmp_path / "missing")
