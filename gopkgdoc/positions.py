"""Resolve syntax positions into root-relative file coordinates."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence, Tuple

from tree_sitter import Point

from .models import FilePos, Pos
from .syntax.parser import FileSet, SourceFile

Span = Tuple[SourceFile, Point, Point]


class PositionResolver:
    """Maps declaration spans to :class:`Pos` values.

    File names are reported relative to the first ``<root>/<source_dir>`` prefix
    they live under, or unchanged when no root matches.
    """

    def __init__(self, fset: FileSet, roots: Sequence[Path], source_dir: str = "src") -> None:
        self.fset = fset
        self._prefixes: List[str] = [
            os.path.abspath(os.path.join(str(root), source_dir)) for root in roots
        ]

    def relative_path(self, path: str) -> str:
        for prefix in self._prefixes:
            prefix = prefix.rstrip(os.sep)
            if not prefix or not path.startswith(prefix):
                continue
            rest = path[len(prefix):]
            if rest and not rest.startswith(os.sep):
                # "/go/src" must not match "/go/srcfoo/bar.go".
                continue
            return rest.lstrip(os.sep)
        return path

    def file_pos(self, source_file: SourceFile, point: Point) -> FilePos:
        filename, line, column = self.fset.position(source_file, point)
        return FilePos(line=line, column=column, file=self.relative_path(filename))

    def resolve(self, span: Span) -> Pos:
        source_file, start, end = span
        return Pos(start=self.file_pos(source_file, start), end=self.file_pos(source_file, end))


__all__ = ["PositionResolver", "Span"]
