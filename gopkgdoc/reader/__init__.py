"""Documentation model construction for Go packages."""

from __future__ import annotations

from .builder import DocReader
from .comments import CommentGroup, CommentMap
from .filter import filter_package, exclude_prefix
from .model import DocFunc, DocNote, DocPackage, DocType, DocValue, FuncDecl, GenDecl, Spec

__all__ = [
    "CommentGroup",
    "CommentMap",
    "DocFunc",
    "DocNote",
    "DocPackage",
    "DocReader",
    "DocType",
    "DocValue",
    "FuncDecl",
    "GenDecl",
    "Spec",
    "filter_package",
    "exclude_prefix",
]
