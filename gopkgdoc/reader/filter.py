"""Name-based pruning of a documentation model."""

from __future__ import annotations

from typing import Callable, List

from .model import DocFunc, DocPackage, DocType, DocValue

NamePredicate = Callable[[str], bool]


def exclude_prefix(prefix: str = "Test") -> NamePredicate:
    """Reject names that start with ``prefix`` (test helpers such as ``TestFoo``)."""

    def keep(name: str) -> bool:
        return not (prefix and name.startswith(prefix))

    return keep


def _filter_values(values: List[DocValue], keep: NamePredicate) -> List[DocValue]:
    return [value for value in values if not value.names or keep(value.names[0])]


def _filter_funcs(funcs: List[DocFunc], keep: NamePredicate) -> List[DocFunc]:
    return [func for func in funcs if keep(func.name)]


def _filter_type(typ: DocType, keep: NamePredicate) -> DocType:
    return DocType(
        doc=typ.doc,
        name=typ.name,
        decl=typ.decl,
        consts=_filter_values(typ.consts, keep),
        vars=_filter_values(typ.vars, keep),
        funcs=_filter_funcs(typ.funcs, keep),
        methods=_filter_funcs(typ.methods, keep),
    )


def filter_package(package: DocPackage, keep: NamePredicate) -> DocPackage:
    """Return a copy of ``package`` without the entries whose name fails ``keep``.

    Members of kept types are filtered as well. Entries that survive keep their
    relative order; the input is not modified.
    """
    return DocPackage(
        doc=package.doc,
        name=package.name,
        import_path=package.import_path,
        imports=list(package.imports),
        filenames=list(package.filenames),
        notes={marker: list(notes) for marker, notes in package.notes.items()},
        bugs=list(package.bugs),
        consts=_filter_values(package.consts, keep),
        types=[_filter_type(typ, keep) for typ in package.types if keep(typ.name)],
        vars=_filter_values(package.vars, keep),
        funcs=_filter_funcs(package.funcs, keep),
    )


__all__ = ["NamePredicate", "filter_package", "exclude_prefix"]
