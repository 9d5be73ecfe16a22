"""Go syntax parsing backed by tree-sitter."""

from __future__ import annotations

from .parser import GO_LANGUAGE, FileSet, SourceFile, SyntaxPackage, SyntaxParser

__all__ = ["FileSet", "GO_LANGUAGE", "SourceFile", "SyntaxPackage", "SyntaxParser"]
