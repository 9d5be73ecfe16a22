"""Resolve a Go package identifier to its source directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from .errors import InvalidArgumentError, NotFoundError
from .logging import get_logger


class SourceLocator:
    """Searches ``<root>/<source_dir>/<package_id>`` for each configured root in order."""

    def __init__(self, roots: Sequence[Path], source_dir: str = "src") -> None:
        self.roots: List[Path] = list(roots)
        self.source_dir = source_dir
        self.logger = get_logger("locator")

    def locate(self, package_id: str) -> Path:
        if not package_id or not package_id.strip():
            raise InvalidArgumentError("no package identifier given")
        if not self.roots:
            raise NotFoundError(f"cannot find package {package_id!r}: no source roots configured")

        for root in self.roots:
            base = root / self.source_dir if self.source_dir else root
            # Identifiers always join under the root, even when they look absolute.
            candidate = Path(os.path.abspath(os.path.join(str(base), package_id.lstrip("/\\"))))
            self.logger.debug("Looking for %s in %s", package_id, candidate)
            if candidate.is_dir():
                return candidate

        searched = ", ".join(str(root) for root in self.roots)
        raise NotFoundError(f"cannot find package {package_id!r} in any of: {searched}")


__all__ = ["SourceLocator"]
