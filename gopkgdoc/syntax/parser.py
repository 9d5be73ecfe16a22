"""Tree-sitter powered Go package parser."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Point, Tree

from ..config import PACKAGE_SELECTION_LAST, PACKAGE_SELECTION_STRICT
from ..errors import AmbiguousPackageError, NoPackageError, SourceSyntaxError
from ..logging import get_logger
from .nodes import children_of_type, find_syntax_error, text

GO_LANGUAGE = Language(tree_sitter_go.language())

_GO_SUFFIX = ".go"
_TEST_FILE_SUFFIX = "_test.go"
_TEST_PACKAGE_SUFFIX = "_test"


@dataclass
class SourceFile:
    """One parsed Go file."""

    path: str
    source: bytes
    tree: Tree
    package: str

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def package_clause(self) -> Optional[Node]:
        clauses = children_of_type(self.root, "package_clause")
        return clauses[0] if clauses else None


class FileSet:
    """Registry of parsed files; maps syntax points to file coordinates."""

    def __init__(self) -> None:
        self._files: Dict[str, SourceFile] = {}

    def add(self, source_file: SourceFile) -> None:
        self._files[source_file.path] = source_file

    def files(self) -> List[SourceFile]:
        return [self._files[path] for path in sorted(self._files)]

    def position(self, source_file: SourceFile, point: Point) -> Tuple[str, int, int]:
        """Return ``(filename, line, column)``, both 1-based; columns count bytes."""
        row, column = point
        return source_file.path, row + 1, column + 1

    def __len__(self) -> int:
        return len(self._files)


@dataclass
class SyntaxPackage:
    """The files of one package name found in a directory."""

    name: str
    directory: str
    files: Dict[str, SourceFile] = field(default_factory=dict)

    def sorted_files(self) -> List[SourceFile]:
        return [self.files[path] for path in sorted(self.files)]


class SyntaxParser:
    """Parses every non-test Go file of a directory into one package tree.

    With ``package_selection="last"`` a directory that declares several
    non-test package names yields the package of the last such file in
    file-name order. That choice is unsound for such directories;
    ``package_selection="strict"`` rejects them instead.
    """

    def __init__(self, package_selection: str = PACKAGE_SELECTION_LAST) -> None:
        self._parser = Parser(GO_LANGUAGE)
        self._package_selection = package_selection
        self.logger = get_logger("syntax")

    def parse_file(self, path: str, fset: FileSet) -> SourceFile:
        with open(path, "rb") as handle:
            source = handle.read()
        tree = self._parser.parse(source)

        error = find_syntax_error(tree.root_node)
        if error is not None:
            row, column = error.start_point
            if error.is_missing:
                message = f"expected {error.type!r}"
            else:
                snippet = text(error).strip().splitlines()
                message = f"unexpected {snippet[0]!r}" if snippet else "unexpected end of file"
            raise SourceSyntaxError(path, row + 1, column + 1, f"syntax error: {message}")

        clauses = children_of_type(tree.root_node, "package_clause")
        if not clauses:
            row, column = tree.root_node.end_point
            raise SourceSyntaxError(path, row + 1, column + 1, "expected 'package' clause")
        names = children_of_type(clauses[0], "package_identifier", "identifier")
        package = text(names[0]) if names else ""

        source_file = SourceFile(path=path, source=source, tree=tree, package=package)
        fset.add(source_file)
        self.logger.debug("Parsed %s (package %s)", path, package)
        return source_file

    def parse_dir(self, directory: str, fset: FileSet) -> Dict[str, SyntaxPackage]:
        """Parse every non-test Go file, grouped by declared package name."""
        packages: Dict[str, SyntaxPackage] = {}
        for path in self._iter_go_files(directory):
            source_file = self.parse_file(path, fset)
            package = packages.setdefault(
                source_file.package,
                SyntaxPackage(name=source_file.package, directory=directory),
            )
            package.files[path] = source_file
        return packages

    def parse_package(self, directory: str, fset: FileSet) -> SyntaxPackage:
        packages = self.parse_dir(directory, fset)

        # Package names in the order their last file was seen.
        order: List[str] = []
        for source_file in fset.files():
            name = source_file.package
            if name in packages and not name.endswith(_TEST_PACKAGE_SUFFIX):
                if name in order:
                    order.remove(name)
                order.append(name)

        if not order:
            raise NoPackageError(f"no package found at {directory}")
        if len(order) > 1:
            if self._package_selection == PACKAGE_SELECTION_STRICT:
                raise AmbiguousPackageError(directory, sorted(order))
            self.logger.warning(
                "Multiple packages in %s (%s); using %s",
                directory,
                ", ".join(sorted(order)),
                order[-1],
            )
        return packages[order[-1]]

    @staticmethod
    def _iter_go_files(directory: str) -> Iterator[str]:
        for name in sorted(os.listdir(directory)):
            if not name.endswith(_GO_SUFFIX) or name.endswith(_TEST_FILE_SUFFIX):
                continue
            path = os.path.join(directory, name)
            if Path(path).is_file():
                yield path


__all__ = ["FileSet", "GO_LANGUAGE", "SourceFile", "SyntaxPackage", "SyntaxParser"]
