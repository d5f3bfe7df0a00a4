"""Folder and file discovery from a directory tree."""

from __future__ import annotations

import fnmatch
from pathlib import Path

import structlog

from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import Role
from conventioncheck.domain.model.identifier import Identifier, IdentifierContext
from conventioncheck.domain.model.location import Location
from conventioncheck.domain.model.scan_unit import ScanUnit

logger = structlog.get_logger(__name__)


def discover_tree(root: Path, config: ConventionConfig | None = None) -> tuple[ScanUnit, ...]:
    """Build scan units for every folder and file below root.

    Each folder yields a unit with one FOLDER identifier. Each file yields
    a unit with one FILE identifier, plus its lines when the suffix is one
    of config.source_suffixes. Folders matching folder_name_exceptions are
    neither reported nor descended into, and neither are symlinked folders,
    so links cannot leave the tree or loop. The root itself is not reported.

    Args:
        root: Directory to scan
        config: Convention configuration (defaults if None)

    Returns:
        Tuple of ScanUnits in sorted path order

    Raises:
        ValueError: If root is not a directory

    Example:
        >>> discover_tree(Path("src"))
        (ScanUnit(path=PosixPath('src/Models'), ...), ...)
    """
    if not root.is_dir():
        raise ValueError(f"root must be a directory: {root}")

    config = config or ConventionConfig()
    units: list[ScanUnit] = []
    pending = [root]

    # Explicit stack: deep trees must not hit the recursion limit
    while pending:
        folder = pending.pop()
        for entry in sorted(folder.iterdir(), reverse=True):
            if entry.is_dir():
                if entry.is_symlink() or _is_excepted(entry.name, config.folder_name_exceptions):
                    continue
                units.append(_folder_unit(entry))
                pending.append(entry)
            elif entry.is_file():
                units.append(_file_unit(entry, config))

    units.sort(key=lambda u: str(u.path))
    logger.debug(
        "tree_discovered",
        root=str(root),
        folders=sum(1 for u in units if u.identifiers[0][0].role is Role.FOLDER),
        units=len(units),
    )
    return tuple(units)


def _is_excepted(name: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatchcase(name, p) for p in patterns)


def _folder_unit(path: Path) -> ScanUnit:
    identifier = Identifier(path.name, Role.FOLDER, Location(path))
    return ScanUnit(path=path, identifiers=((identifier, IdentifierContext.default()),))


def _file_unit(path: Path, config: ConventionConfig) -> ScanUnit:
    identifier = Identifier(path.name, Role.FILE, Location(path))
    lines: tuple[str, ...] = ()
    if path.suffix in config.source_suffixes:
        text = path.read_text(encoding="utf-8", errors="replace")
        lines = tuple(text.splitlines())
    return ScanUnit(
        path=path,
        identifiers=((identifier, IdentifierContext.default()),),
        lines=lines,
    )
