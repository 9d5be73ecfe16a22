"""Builds the documentation model of a Go package from its syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set, Tuple

from tree_sitter import Node

from ..logging import get_logger
from ..syntax.nodes import (
    PREDECLARED_TYPES,
    base_type_name,
    children_of_type,
    field_names,
    is_exported,
    receiver_string,
    receiver_type,
    text,
    unquote,
)
from ..syntax.parser import SourceFile, SyntaxPackage
from .comments import CommentGroup, CommentMap
from .model import (
    DocFunc,
    DocNote,
    DocPackage,
    DocType,
    DocValue,
    FuncDecl,
    GenDecl,
    Spec,
)
from .notes import read_notes

# Share of typed specs needed before a const/var group is listed under its type.
_TYPED_VALUE_THRESHOLD = 0.75


@dataclass
class _NamedType:
    name: str
    decl: Optional[GenDecl] = None
    doc: str = ""
    is_struct: bool = False
    is_embedded: bool = False
    # embedded type name -> embedded through a pointer
    embedded: Dict[str, bool] = field(default_factory=dict)
    values: List[DocValue] = field(default_factory=list)
    funcs: Dict[str, DocFunc] = field(default_factory=dict)
    methods: Dict[str, DocFunc] = field(default_factory=dict)


def _doc_text(group: Optional[CommentGroup]) -> str:
    return group.text() if group is not None else ""


def _specs(decl: Node, spec_types: Tuple[str, ...]) -> Tuple[List[Node], bool]:
    """Return the spec nodes of a declaration and whether they are parenthesized."""
    specs: List[Node] = []
    grouped = False
    for child in decl.children:
        if child.type == "(":
            grouped = True
        elif child.type in spec_types:
            specs.append(child)
        elif child.type.endswith("_spec_list"):
            grouped = True
            specs.extend(children_of_type(child, *spec_types))
    return specs, grouped


def _set_func(mset: Dict[str, DocFunc], func: DocFunc) -> None:
    existing = mset.get(func.name)
    if existing is not None and existing.doc:
        # A documented declaration with the same name wins.
        return
    mset[func.name] = func


def _add_method(mset: Dict[str, DocFunc], method: DocFunc) -> None:
    old = mset.get(method.name)
    if old is None or method.level < old.level:
        mset[method.name] = method
        return
    if method.level == old.level:
        # Same name at the same depth: neither method is reachable.
        mset[method.name] = DocFunc(doc="", name=method.name, decl=None, level=method.level)


def _customize_recv(method: DocFunc, recv_type_name: str, embedded_is_ptr: bool, level: int) -> DocFunc:
    recv = recv_type_name
    if not embedded_is_ptr and method.orig.startswith("*"):
        recv = "*" + recv_type_name
    decl = replace(method.decl, recv_type=recv) if method.decl is not None else None
    return DocFunc(
        doc=method.doc,
        name=method.name,
        decl=decl,
        recv=recv,
        orig=method.orig,
        level=level,
    )


def _sorting_name(value: DocValue) -> str:
    specs = value.decl.specs
    if len(specs) == 1 and specs[0].names:
        return specs[0].names[0]
    return ""


def _sorted_values(values: List[DocValue], token: str) -> List[DocValue]:
    selected = [value for value in values if value.decl.token == token]
    return sorted(selected, key=lambda value: (_sorting_name(value), value.order))


def _sorted_funcs(mset: Dict[str, DocFunc]) -> List[DocFunc]:
    return sorted((func for func in mset.values() if func.decl is not None), key=lambda func: func.name)


class _PackageReader:
    """Single-use reader state for one package."""

    def __init__(self) -> None:
        self.doc = ""
        self.imports: Set[str] = set()
        self.has_dot_import = False
        self.notes: Dict[str, List[DocNote]] = {}
        self.values: List[DocValue] = []
        self.types: Dict[str, _NamedType] = {}
        self.funcs: Dict[str, DocFunc] = {}
        self.order = 0

    def lookup_type(self, name: str) -> Optional[_NamedType]:
        if not name or name == "_":
            return None
        typ = self.types.get(name)
        if typ is None:
            typ = _NamedType(name=name)
            self.types[name] = typ
        return typ

    # --- files ---

    def read_file(self, source_file: SourceFile, comments: CommentMap) -> None:
        clause = source_file.package_clause()
        if clause is not None:
            lead = comments.lead_comment(clause)
            if lead is not None:
                text_ = lead.text()
                self.doc = text_ if not self.doc else self.doc + "\n" + text_

        for child in source_file.root.named_children:
            if child.type == "import_declaration":
                self.read_imports(child)
            elif child.type in ("const_declaration", "var_declaration"):
                self.read_value(child, source_file, comments)
            elif child.type == "type_declaration":
                self.read_types(child, source_file, comments)

        for marker, note in read_notes(comments):
            self.notes.setdefault(marker, []).append(note)

    def read_imports(self, decl: Node) -> None:
        specs, _ = _specs(decl, ("import_spec",))
        for spec in specs:
            path = spec.child_by_field_name("path")
            if path is not None:
                self.imports.add(unquote(path))
            name = spec.child_by_field_name("name")
            if name is not None and text(name) == ".":
                self.has_dot_import = True

    # --- values ---

    def read_value(self, decl: Node, source_file: SourceFile, comments: CommentMap) -> None:
        token = "const" if decl.type == "const_declaration" else "var"
        spec_nodes, grouped = _specs(decl, (f"{token}_spec",))

        kept: List[Spec] = []
        for spec_node in spec_nodes:
            names = field_names(spec_node, "name")
            has_values = spec_node.child_by_field_name("value") is not None
            has_type = spec_node.child_by_field_name("type") is not None
            if has_values or not has_type:
                # Positions matter: keep the list aligned with the values.
                if not any(is_exported(name) for name in names):
                    continue
                display = [name if is_exported(name) else "_" for name in names]
            else:
                display = [name for name in names if is_exported(name)]
                if not display:
                    continue
            kept.append(
                Spec(
                    node=spec_node,
                    names=display,
                    doc=comments.lead_comment(spec_node) if grouped else None,
                    comment=comments.line_comment(spec_node),
                )
            )
        if not kept:
            return

        value = DocValue(
            doc=_doc_text(comments.lead_comment(decl)),
            names=[name for spec in kept for name in spec.names],
            decl=GenDecl(
                file=source_file,
                comments=comments,
                token=token,
                node=decl,
                specs=kept,
                grouped=grouped,
                start_point=decl.start_point,
                end_point=decl.end_point,
            ),
            order=self.order,
        )
        self.order += 1

        target = self.values
        dominant, frequency = self._dominant_type(kept, token)
        if (
            dominant
            and is_exported(dominant)
            and frequency >= int(len(kept) * _TYPED_VALUE_THRESHOLD)
        ):
            typ = self.lookup_type(dominant)
            if typ is not None:
                target = typ.values
        target.append(value)

    @staticmethod
    def _dominant_type(specs: List[Spec], token: str) -> Tuple[str, int]:
        dominant = ""
        frequency = 0
        previous = ""
        for spec in specs:
            name = ""
            type_node = spec.node.child_by_field_name("type")
            if type_node is not None:
                base, imported = base_type_name(type_node)
                if not imported:
                    name = base
            elif token == "const" and spec.node.child_by_field_name("value") is None:
                # iota continuation: inherits the previous spec's type
                name = previous
            if name:
                if dominant and dominant != name:
                    return "", 0
                dominant = name
                frequency += 1
            previous = name
        return dominant, frequency

    # --- types ---

    def read_types(self, decl: Node, source_file: SourceFile, comments: CommentMap) -> None:
        spec_nodes, grouped = _specs(decl, ("type_spec", "type_alias"))
        decl_doc = comments.lead_comment(decl)
        for spec_node in spec_nodes:
            name_node = spec_node.child_by_field_name("name")
            typ = self.lookup_type(text(name_node) if name_node is not None else "")
            if typ is None:
                continue
            type_node = spec_node.child_by_field_name("type")
            typ.is_struct = type_node is not None and type_node.type == "struct_type"
            if typ.is_struct:
                self.record_embedded(typ, type_node)
            if not is_exported(typ.name):
                continue

            if grouped or len(spec_nodes) > 1:
                # Each spec of a group is documented as its own declaration.
                start_point = spec_node.start_point
                doc = comments.lead_comment(spec_node) or decl_doc
            else:
                start_point = decl.start_point
                doc = decl_doc
            typ.decl = GenDecl(
                file=source_file,
                comments=comments,
                token="type",
                node=decl,
                specs=[
                    Spec(
                        node=spec_node,
                        names=[typ.name],
                        comment=comments.line_comment(spec_node),
                    )
                ],
                grouped=False,
                start_point=start_point,
                end_point=spec_node.end_point,
            )
            typ.doc = _doc_text(doc)

    def record_embedded(self, typ: _NamedType, struct: Node) -> None:
        for field_list in children_of_type(struct, "field_declaration_list"):
            for field_decl in children_of_type(field_list, "field_declaration"):
                if field_decl.child_by_field_name("name") is not None:
                    continue
                base, imported = base_type_name(field_decl.child_by_field_name("type"))
                if imported:
                    continue
                embedded = self.lookup_type(base)
                if embedded is None:
                    continue
                embedded.is_embedded = True
                typ.embedded[base] = any(child.type == "*" for child in field_decl.children)

    # --- funcs ---

    def read_func(self, node: Node, source_file: SourceFile, comments: CommentMap) -> None:
        name_node = node.child_by_field_name("name")
        name = text(name_node) if name_node is not None else ""
        if not is_exported(name):
            return
        decl = FuncDecl(file=source_file, comments=comments, node=node)
        doc = _doc_text(comments.lead_comment(node))

        if node.type == "method_declaration":
            recv_node = receiver_type(node)
            if recv_node is None:
                return
            base, imported = base_type_name(recv_node)
            if imported:
                return
            typ = self.lookup_type(base)
            if typ is not None:
                recv = receiver_string(recv_node)
                _set_func(typ.methods, DocFunc(doc=doc, name=name, decl=decl, recv=recv, orig=recv))
            return

        factory_type = self._factory_type(node)
        func = DocFunc(doc=doc, name=name, decl=decl)
        if factory_type is not None:
            _set_func(factory_type.funcs, func)
        else:
            _set_func(self.funcs, func)

    def _factory_type(self, node: Node) -> Optional[_NamedType]:
        """Return the single package type a constructor-like function returns."""
        result = node.child_by_field_name("result")
        if result is None:
            return None
        if result.type == "parameter_list":
            result_types = [
                param.child_by_field_name("type")
                for param in result.named_children
                if param.type in ("parameter_declaration", "variadic_parameter_declaration")
            ]
        else:
            result_types = [result]

        type_params: Set[str] = set()
        params = node.child_by_field_name("type_parameters")
        if params is not None:
            for param in children_of_type(params, "type_parameter_declaration"):
                type_params.update(field_names(param, "name"))

        found: Optional[_NamedType] = None
        count = 0
        for result_type in result_types:
            if result_type is not None and result_type.type in ("slice_type", "array_type"):
                result_type = result_type.child_by_field_name("element")
            base, imported = base_type_name(result_type)
            if imported or not is_exported(base) or base in PREDECLARED_TYPES:
                continue
            if base in type_params:
                continue
            typ = self.lookup_type(base)
            if typ is not None:
                found = typ
                count += 1
                if count > 1:
                    break
        return found if count == 1 else None

    # --- method sets ---

    def compute_method_sets(self) -> None:
        for typ in list(self.types.values()):
            if typ.is_struct:
                self.collect_embedded_methods(typ)

    def collect_embedded_methods(self, typ: _NamedType) -> None:
        """Promote methods of embedded types, breadth first by embedding depth."""
        visited = {typ.name}
        frontier: List[Tuple[_NamedType, bool]] = [(typ, False)]
        level = 1
        while frontier:
            next_frontier: List[Tuple[_NamedType, bool]] = []
            expanded: Set[str] = set()
            for current, is_ptr in frontier:
                for name, embedded_ptr in current.embedded.items():
                    embedded = self.types.get(name)
                    if embedded is None:
                        continue
                    # Pointer embedding is sticky for the rest of the path.
                    this_ptr = is_ptr or embedded_ptr
                    for method in list(embedded.methods.values()):
                        if method.level == 0 and method.decl is not None:
                            _add_method(typ.methods, _customize_recv(method, typ.name, this_ptr, level))
                    if name not in visited:
                        next_frontier.append((embedded, this_ptr))
                        expanded.add(name)
            visited |= expanded
            frontier = next_frontier
            level += 1

    def cleanup_types(self) -> None:
        for name, typ in list(self.types.items()):
            visible = is_exported(name)
            if typ.decl is None and visible and (typ.is_embedded or self.has_dot_import):
                # Declared elsewhere: keep its values and factories at package level.
                self.values.extend(typ.values)
                for func_name, func in typ.funcs.items():
                    self.funcs[func_name] = func
                for method_name, method in typ.methods.items():
                    # A package func of the same name wins.
                    if method_name not in self.funcs:
                        self.funcs[method_name] = method
            if typ.decl is None or not visible:
                del self.types[name]

    # --- result ---

    def build(self, package: SyntaxPackage, import_path: str) -> DocPackage:
        types: List[DocType] = []
        for name in sorted(self.types):
            typ = self.types[name]
            if typ.decl is None:
                # dropped by cleanup_types
                continue
            types.append(
                DocType(
                    doc=typ.doc,
                    name=typ.name,
                    decl=typ.decl,
                    consts=_sorted_values(typ.values, "const"),
                    vars=_sorted_values(typ.values, "var"),
                    funcs=_sorted_funcs(typ.funcs),
                    methods=_sorted_funcs(typ.methods),
                )
            )
        return DocPackage(
            doc=self.doc,
            name=package.name,
            import_path=import_path,
            imports=sorted(self.imports),
            filenames=sorted(package.files),
            notes=self.notes,
            bugs=[note.body for note in self.notes.get("BUG", [])],
            consts=_sorted_values(self.values, "const"),
            types=types,
            vars=_sorted_values(self.values, "var"),
            funcs=_sorted_funcs(self.funcs),
        )


class DocReader:
    """Reads the exported API of a parsed package into a DocPackage."""

    def __init__(self) -> None:
        self.logger = get_logger("reader")

    def read(self, package: SyntaxPackage, import_path: str) -> DocPackage:
        reader = _PackageReader()
        files = package.sorted_files()
        comment_maps = {source_file.path: CommentMap(source_file) for source_file in files}

        for source_file in files:
            reader.read_file(source_file, comment_maps[source_file.path])

        # Functions are read last so that every receiver and result type is known.
        for source_file in files:
            for node in children_of_type(source_file.root, "function_declaration", "method_declaration"):
                reader.read_func(node, source_file, comment_maps[source_file.path])

        reader.compute_method_sets()
        reader.cleanup_types()
        doc_package = reader.build(package, import_path)
        self.logger.debug(
            "Read package %s: %d consts, %d vars, %d types, %d funcs",
            doc_package.name,
            len(doc_package.consts),
            len(doc_package.vars),
            len(doc_package.types),
            len(doc_package.funcs),
        )
        return doc_package


__all__ = ["DocReader"]
