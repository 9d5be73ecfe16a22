"""Output data model and its JSON serialization."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class FilePos:
    """A 1-based line and byte column inside a root-relative file."""

    line: int
    column: int
    file: str

    def to_dict(self) -> Dict[str, Any]:
        return {"line": self.line, "column": self.column, "file": self.file}


@dataclass
class Pos:
    start: FilePos
    end: FilePos

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass
class Note:
    """A ``MARKER(uid): body`` annotation."""

    uid: str
    body: str
    pos: Pos

    def to_dict(self) -> Dict[str, Any]:
        return {"uid": self.uid, "body": self.body, "pos": self.pos.to_dict()}


@dataclass
class Value:
    """A const or var declaration, possibly declaring several names."""

    doc: str
    names: List[str]
    decl: str
    pos: Pos
    kind: str = "value"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "doc": self.doc,
            "names": list(self.names),
            "decl": self.decl,
            "pos": self.pos.to_dict(),
        }


@dataclass
class Func:
    """A function or method.

    ``recv`` is empty for functions; for promoted methods it names the embedding
    type while ``orig`` keeps the receiver the method was declared with.
    """

    doc: str
    name: str
    decl: str
    pos: Pos
    recv: str = ""
    orig: str = ""
    level: int = 0
    kind: str = "func"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "doc": self.doc,
            "name": self.name,
            "decl": self.decl,
            "recv": self.recv,
            "orig": self.orig,
            "level": self.level,
            "pos": self.pos.to_dict(),
        }


@dataclass
class Type:
    doc: str
    name: str
    decl: str
    pos: Pos
    consts: List[Value] = field(default_factory=list)
    vars: List[Value] = field(default_factory=list)
    funcs: List[Func] = field(default_factory=list)
    methods: List[Func] = field(default_factory=list)
    kind: str = "type"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "doc": self.doc,
            "name": self.name,
            "decl": self.decl,
            "pos": self.pos.to_dict(),
            "consts": [value.to_dict() for value in self.consts],
            "vars": [value.to_dict() for value in self.vars],
            "funcs": [func.to_dict() for func in self.funcs],
            "methods": [method.to_dict() for method in self.methods],
        }


@dataclass
class Package:
    """Documentation of one Go package, ready for serialization."""

    doc: str
    name: str
    import_path: str
    imports: List[str] = field(default_factory=list)
    filenames: List[str] = field(default_factory=list)
    notes: Dict[str, List[Note]] = field(default_factory=dict)
    bugs: List[str] = field(default_factory=list)
    consts: List[Value] = field(default_factory=list)
    types: List[Type] = field(default_factory=list)
    vars: List[Value] = field(default_factory=list)
    funcs: List[Func] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc": self.doc,
            "name": self.name,
            "importPath": self.import_path,
            "imports": list(self.imports),
            "filenames": list(self.filenames),
            "notes": {
                marker: [note.to_dict() for note in notes]
                for marker, notes in sorted(self.notes.items())
            },
            "bugs": list(self.bugs),
            "consts": [value.to_dict() for value in self.consts],
            "types": [typ.to_dict() for typ in self.types],
            "vars": [value.to_dict() for value in self.vars],
            "funcs": [func.to_dict() for func in self.funcs],
        }


def dump_json(package: Package) -> str:
    """Serialize ``package`` as a tab-indented UTF-8 JSON document."""
    return json.dumps(package.to_dict(), indent="\t", ensure_ascii=False)


__all__ = ["FilePos", "Func", "Note", "Package", "Pos", "Type", "Value", "dump_json"]
