"""Discovery layer: scan units from a directory tree."""

from conventioncheck.application.discovery.paths import discover_tree

__all__ = [
    "discover_tree",
]
