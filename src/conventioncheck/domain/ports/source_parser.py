"""Source parser port.

Language-specific tokenization lives outside the core. A parser turns
source files into ScanUnits the checker consumes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from conventioncheck.domain.model.scan_unit import ScanUnit


class SourceParserProtocol(Protocol):
    """Contract for source parsers.

    Example:
        class PhpParser:
            def parse(self, paths: Iterable[Path]) -> Iterable[ScanUnit]:
                for path in paths:
                    yield ScanUnit(path=path, identifiers=..., signatures=...)
    """

    def parse(self, paths: Iterable[Path]) -> Iterable[ScanUnit]:
        """Produce one ScanUnit per source file.

        Args:
            paths: Files to parse

        Returns:
            Scan units, in any order
        """
        ...
