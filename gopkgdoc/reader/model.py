"""Intermediate documentation model that still references the syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tree_sitter import Node, Point

from ..syntax.nodes import signature_end
from ..syntax.parser import SourceFile
from .comments import CommentGroup, CommentMap


@dataclass
class Spec:
    """One const/var/type spec kept after export filtering."""

    node: Node
    names: List[str]
    doc: Optional[CommentGroup] = None
    comment: Optional[CommentGroup] = None


@dataclass
class GenDecl:
    """A documented const, var or type declaration.

    ``start_point``/``end_point`` follow go/ast: a grouped declaration spans from
    its keyword to just past the closing parenthesis, an ungrouped one ends with
    its spec. A type split out of a ``type ( ... )`` group starts at its name.
    """

    file: SourceFile
    comments: CommentMap
    token: str
    node: Node
    specs: List[Spec]
    grouped: bool
    start_point: Point
    end_point: Point


@dataclass
class FuncDecl:
    """A function or method declaration; bodies are never documented.

    ``recv_type`` replaces the receiver type when a method is promoted to an
    embedding type.
    """

    file: SourceFile
    comments: CommentMap
    node: Node
    recv_type: Optional[str] = None

    @property
    def start_point(self) -> Point:
        return self.node.start_point

    @property
    def end_point(self) -> Point:
        return signature_end(self.node).end_point


@dataclass
class DocValue:
    doc: str
    names: List[str]
    decl: GenDecl
    order: int = 0


@dataclass
class DocFunc:
    doc: str
    name: str
    decl: Optional[FuncDecl]
    recv: str = ""
    orig: str = ""
    level: int = 0


@dataclass
class DocType:
    doc: str
    name: str
    decl: GenDecl
    consts: List[DocValue] = field(default_factory=list)
    vars: List[DocValue] = field(default_factory=list)
    funcs: List[DocFunc] = field(default_factory=list)
    methods: List[DocFunc] = field(default_factory=list)


@dataclass
class DocNote:
    file: SourceFile
    start_point: Point
    end_point: Point
    uid: str
    body: str


@dataclass
class DocPackage:
    doc: str
    name: str
    import_path: str
    imports: List[str] = field(default_factory=list)
    filenames: List[str] = field(default_factory=list)
    notes: Dict[str, List[DocNote]] = field(default_factory=dict)
    bugs: List[str] = field(default_factory=list)
    consts: List[DocValue] = field(default_factory=list)
    types: List[DocType] = field(default_factory=list)
    vars: List[DocValue] = field(default_factory=list)
    funcs: List[DocFunc] = field(default_factory=list)


__all__ = [
    "DocFunc",
    "DocNote",
    "DocPackage",
    "DocType",
    "DocValue",
    "FuncDecl",
    "GenDecl",
    "Spec",
]
