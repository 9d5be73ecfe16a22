"""Helpers for walking tree-sitter Go syntax trees."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node

# Nodes emitted as a single token even though the grammar gives them children.
ATOMIC_TYPES = frozenset(
    {
        "comment",
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
    }
)

# Statement terminators inserted by the grammar for newlines and end of file.
TERMINATOR_TYPES = frozenset({"\n", "\0"})

PREDECLARED_TYPES = frozenset(
    {
        "any",
        "bool",
        "byte",
        "comparable",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)


def text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def is_exported(name: str) -> bool:
    """Go exports identifiers that start with an upper-case letter."""
    return bool(name) and name[0].isupper()


def same_node(a: Optional[Node], b: Optional[Node]) -> bool:
    if a is None or b is None:
        return False
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte


def iter_leaves(node: Node) -> Iterator[Node]:
    """Yield the tokens below ``node`` in source order, skipping terminators."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in ATOMIC_TYPES or current.child_count == 0:
            if current.type not in TERMINATOR_TYPES and current.end_byte > current.start_byte:
                yield current
            continue
        stack.extend(reversed(current.children))


def children_of_type(node: Node, *types: str) -> List[Node]:
    return [child for child in node.children if child.type in types]


def field_names(node: Node, field: str) -> List[str]:
    """Return the identifier texts stored under ``field`` (skipping commas)."""
    return [text(child) for child in node.children_by_field_name(field) if child.is_named]


def unquote(literal: Node) -> str:
    """Return the value of a Go string literal used as an import path or tag."""
    raw = text(literal)
    if literal.type == "raw_string_literal":
        return raw[1:-1]
    body = raw[1:-1]
    if "\\" not in body:
        return body
    return body.encode("latin-1", errors="backslashreplace").decode("unicode_escape")


def base_type_name(node: Optional[Node]) -> Tuple[str, bool]:
    """Return the base type name of a type expression and whether it is imported.

    ``*T``, ``T[K]`` and ``(T)`` all reduce to ``T``; ``pkg.T`` reduces to ``T``
    and is reported as imported.
    """
    while node is not None:
        if node.type in ("type_identifier", "identifier"):
            return text(node), False
        if node.type == "qualified_type":
            name = node.child_by_field_name("name")
            return (text(name) if name is not None else ""), True
        if node.type == "generic_type":
            node = node.child_by_field_name("type")
            continue
        if node.type in ("pointer_type", "parenthesized_type"):
            node = node.named_children[-1] if node.named_children else None
            continue
        break
    return "", False


def receiver_string(node: Optional[Node]) -> str:
    """Render a receiver type the way go/doc reports it (``T``, ``*T``, ``T[K]``)."""
    if node is None:
        return ""
    if node.type in ("type_identifier", "identifier"):
        return text(node)
    if node.type == "pointer_type" and node.named_children:
        return "*" + receiver_string(node.named_children[-1])
    if node.type == "parenthesized_type" and node.named_children:
        return receiver_string(node.named_children[-1])
    if node.type == "generic_type":
        base = receiver_string(node.child_by_field_name("type"))
        args = node.child_by_field_name("type_arguments")
        params = [text(arg) for arg in args.named_children] if args is not None else []
        return f"{base}[{', '.join(params)}]"
    return "BADRECV"


def receiver_type(method: Node) -> Optional[Node]:
    """Return the type node of a method's single receiver parameter."""
    receiver = method.child_by_field_name("receiver")
    if receiver is None:
        return None
    params = [
        child
        for child in receiver.named_children
        if child.type in ("parameter_declaration", "variadic_parameter_declaration")
    ]
    if len(params) != 1:
        return None
    return params[0].child_by_field_name("type")


def signature_end(func: Node) -> Node:
    """Return the last node of a function signature, ignoring its body."""
    for field in ("result", "parameters"):
        child = func.child_by_field_name(field)
        if child is not None:
            return child
    return func


def find_syntax_error(node: Node) -> Optional[Node]:
    """Return the first ERROR or missing node below ``node``, if any."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


__all__ = [
    "ATOMIC_TYPES",
    "PREDECLARED_TYPES",
    "TERMINATOR_TYPES",
    "base_type_name",
    "children_of_type",
    "field_names",
    "find_syntax_error",
    "is_exported",
    "iter_leaves",
    "receiver_string",
    "receiver_type",
    "same_node",
    "signature_end",
    "text",
    "unquote",
]
