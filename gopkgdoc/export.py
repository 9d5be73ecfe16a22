"""Conversion of the documentation model into serializable output entities."""

from __future__ import annotations

from typing import Dict, List

from .errors import RenderError
from .logging import get_logger
from .models import Func, Note, Package, Type, Value
from .positions import PositionResolver
from .reader.model import DocFunc, DocNote, DocPackage, DocType, DocValue
from .render import DeclarationRenderer


class PackageExporter:
    """Resolves positions and renders declarations for every documented entry."""

    def __init__(self, resolver: PositionResolver, renderer: DeclarationRenderer | None = None) -> None:
        self.resolver = resolver
        self.renderer = renderer or DeclarationRenderer()
        self.logger = get_logger("export")

    def export(self, package: DocPackage) -> Package:
        notes: Dict[str, List[Note]] = {
            marker: [self._note(note) for note in entries]
            for marker, entries in package.notes.items()
        }
        result = Package(
            doc=package.doc,
            name=package.name,
            import_path=package.import_path,
            imports=list(package.imports),
            filenames=[self.resolver.relative_path(path) for path in package.filenames],
            notes=notes,
            bugs=list(package.bugs),
            consts=[self._value(value) for value in package.consts],
            types=[self._type(typ) for typ in package.types],
            vars=[self._value(value) for value in package.vars],
            funcs=[self._func(func) for func in package.funcs],
        )
        self.logger.debug("Exported %d declarations of %s", self._count(result), result.name)
        return result

    def _value(self, value: DocValue) -> Value:
        decl = value.decl
        return Value(
            doc=value.doc,
            names=list(value.names),
            decl=self.renderer.render_value(decl),
            pos=self.resolver.resolve((decl.file, decl.start_point, decl.end_point)),
        )

    def _func(self, func: DocFunc) -> Func:
        decl = func.decl
        if decl is None:
            raise RenderError(f"function {func.name} has no declaration to render")
        return Func(
            doc=func.doc,
            name=func.name,
            decl=self.renderer.render_func(decl),
            pos=self.resolver.resolve((decl.file, decl.start_point, decl.end_point)),
            recv=func.recv,
            orig=func.orig,
            level=func.level,
        )

    def _type(self, typ: DocType) -> Type:
        decl = typ.decl
        return Type(
            doc=typ.doc,
            name=typ.name,
            decl=self.renderer.render_type(decl),
            pos=self.resolver.resolve((decl.file, decl.start_point, decl.end_point)),
            consts=[self._value(value) for value in typ.consts],
            vars=[self._value(value) for value in typ.vars],
            funcs=[self._func(func) for func in typ.funcs],
            methods=[self._func(method) for method in typ.methods],
        )

    def _note(self, note: DocNote) -> Note:
        return Note(
            uid=note.uid,
            body=note.body,
            pos=self.resolver.resolve((note.file, note.start_point, note.end_point)),
        )

    @staticmethod
    def _count(package: Package) -> int:
        nested = sum(
            len(typ.consts) + len(typ.vars) + len(typ.funcs) + len(typ.methods)
            for typ in package.types
        )
        return len(package.consts) + len(package.vars) + len(package.funcs) + len(package.types) + nested


__all__ = ["PackageExporter"]
