"""Canonical source text of Go declarations, laid out the way gofmt prints them."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from ..errors import RenderError
from ..logging import get_logger
from ..reader.comments import CommentGroup, CommentMap
from ..reader.model import FuncDecl, GenDecl, Spec
from ..syntax.nodes import (
    ATOMIC_TYPES,
    PREDECLARED_TYPES,
    TERMINATOR_TYPES,
    base_type_name,
    field_names,
    is_exported,
    receiver_type,
    same_node,
    text,
)
from .tabwriter import align, escape

FILTERED_FIELDS = "// contains filtered or unexported fields"
FILTERED_METHODS = "// contains filtered or unexported methods"

# Longest struct or interface body gofmt keeps on the line of its braces.
_ONE_LINE_MAX = 30

_OPENERS = frozenset({"(", "[", "{"})
_CLOSERS = frozenset({")", "]", "}"})
_ASSIGN_OPS = frozenset(
    {"=", ":=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", "&^="}
)
_PREFIX_OPS = frozenset({"*", "&", "-", "+", "!", "^", "<-", "~"})
_ARRAY_TYPES = frozenset({"slice_type", "array_type", "implicit_length_array_type"})
_METHOD_ELEMS = frozenset({"method_elem", "method_spec"})
_WORD_TYPES = frozenset(
    {
        "identifier",
        "type_identifier",
        "field_identifier",
        "package_identifier",
        "label_name",
        "blank_identifier",
        "int_literal",
        "float_literal",
        "imaginary_literal",
        "rune_literal",
        "interpreted_string_literal",
        "raw_string_literal",
        "true",
        "false",
        "nil",
        "iota",
    }
)

_PRECEDENCE = {
    "||": 1,
    "&&": 2,
    "==": 3,
    "!=": 3,
    "<": 3,
    "<=": 3,
    ">": 3,
    ">=": 3,
    "+": 4,
    "-": 4,
    "|": 4,
    "^": 4,
    "*": 5,
    "/": 5,
    "%": 5,
    "<<": 5,
    ">>": 5,
    "&": 5,
    "&^": 5,
}

Key = Tuple[int, int]


def _key(node: Node) -> Key:
    return node.start_byte, node.end_byte


def _is_word(node: Node) -> bool:
    return node.type in _WORD_TYPES or (not node.is_named and node.type.isalpha())


def _ends_word(node: Node) -> bool:
    return _is_word(node) or node.type in (")", "}")


def _precedence(node: Node) -> int:
    operator = node.child_by_field_name("operator")
    return _PRECEDENCE.get(text(operator), 0) if operator is not None else 0


BinaryInfo = Tuple[bool, bool, int]


def _binary_operands(node: Node, prec: int) -> List[Node]:
    """Operands that belong to the same run of binary operators as ``node``."""
    operands: List[Node] = []
    left = node.child_by_field_name("left")
    if left is not None and left.type == "binary_expression" and _precedence(left) >= prec:
        operands.append(left)
    right = node.child_by_field_name("right")
    if right is not None and right.type == "binary_expression" and _precedence(right) > prec:
        operands.append(right)
    return operands


def _operator_clash(node: Node) -> int:
    """Precedence needed to keep ``a / *p`` or ``a + +b`` from reading as one token."""
    right = node.child_by_field_name("right")
    if right is None or right.type != "unary_expression":
        return 0
    operator = node.child_by_field_name("operator")
    unary = right.child_by_field_name("operator")
    pair = text(operator) + text(unary) if operator is not None and unary is not None else ""
    if pair in ("/*", "&&", "&^"):
        return 5
    if pair in ("++", "--"):
        return 4
    return 0


def _walk_binary(node: Node, cache: Dict[Key, BinaryInfo]) -> BinaryInfo:
    """Report whether precedence 4 and 5 operators mix and the worst operator clash.

    Results are memoized in ``cache`` so a long operator chain is walked once.
    """
    stack: List[Tuple[Node, bool]] = [(node, False)]
    while stack:
        current, ready = stack.pop()
        if _key(current) in cache:
            continue
        prec = _precedence(current)
        operands = _binary_operands(current, prec)
        if not ready:
            stack.append((current, True))
            stack.extend((operand, False) for operand in operands)
            continue
        has4, has5, problem = prec == 4, prec == 5, _operator_clash(current)
        for operand in operands:
            o4, o5, op = cache[_key(operand)]
            has4, has5, problem = has4 or o4, has5 or o5, max(problem, op)
        cache[_key(current)] = (has4, has5, problem)
    return cache[_key(node)]


def _cutoff(node: Node, depth: int, cache: Dict[Key, BinaryInfo]) -> int:
    has4, has5, problem = _walk_binary(node, cache)
    if problem > 0:
        return problem + 1
    if has4 and has5:
        return 5 if depth == 1 else 4
    return 6 if depth == 1 else 4


def _keep_type_column(specs: List[Spec]) -> List[bool]:
    """Whether each spec keeps an (empty) type column within its run of specs with values."""
    keep = [False] * len(specs)
    start = -1
    keep_type = False
    for index, spec in enumerate(specs):
        if spec.node.child_by_field_name("value") is not None:
            if start < 0:
                start = index
                keep_type = False
        elif start >= 0:
            if keep_type:
                keep[start:index] = [True] * (index - start)
            start = -1
        if spec.node.child_by_field_name("type") is not None:
            keep_type = True
    if start >= 0 and keep_type:
        keep[start:] = [True] * (len(specs) - start)
    return keep


def _flat_size(node: Node) -> int:
    return len(" ".join(text(node).split()))


class _Printer:
    """Writes one declaration as tabwriter input, then aligns it."""

    def __init__(self, comments: CommentMap, filter_unexported: bool) -> None:
        self.comments = comments
        self.filter_unexported = filter_unexported
        self._out: List[str] = []
        self._indent = 0
        self._bol = True
        # One entry per open bracket: whether its contents were broken onto new lines.
        self._frames: List[bool] = []
        # End offsets of binary expressions continued on an indented line.
        self._continuations: List[int] = []
        self._blanks: Dict[Key, bool] = {}
        self._prev: Optional[Node] = None
        self._prev_word = False
        self._force_space = False
        self._last_row: Optional[int] = None
        self._recv: Optional[Tuple[Key, str]] = None
        self._trailing_comment = False

    def result(self) -> str:
        aligned = align("".join(self._out))
        # A line comment that ends the declaration keeps its newline.
        return aligned + "\n" if self._trailing_comment else aligned

    # --- operator spacing ---

    def scan(self, root: Node, depth: int = 1) -> None:
        """Decide blanks around binary operators the way gofmt does (``a*b + c``)."""
        cache: Dict[Key, BinaryInfo] = {}
        pending: List[Tuple[Node, int]] = [(root, depth)]
        while pending:
            node, depth = pending.pop()
            kind = node.type
            if kind == "binary_expression":
                prec = _precedence(node)
                operator = node.child_by_field_name("operator")
                if operator is not None:
                    self._blanks[_key(operator)] = prec < _cutoff(node, depth, cache)
                left = node.child_by_field_name("left")
                if left is not None:
                    same = left.type == "binary_expression" and _precedence(left) == prec
                    pending.append((left, depth if same else depth + 1))
                right = node.child_by_field_name("right")
                if right is not None:
                    pending.append((right, depth + 1))
            elif kind == "parenthesized_expression":
                pending.extend((child, max(depth - 1, 1)) for child in node.named_children)
            elif kind == "call_expression":
                function = node.child_by_field_name("function")
                if function is not None:
                    pending.append((function, depth))
                arguments = node.child_by_field_name("arguments")
                if arguments is not None:
                    items = [child for child in arguments.named_children if child.type != "comment"]
                    inner = depth + 1 if len(items) > 1 else depth
                    pending.extend((item, inner) for item in items)
            elif kind == "index_expression":
                operand = node.child_by_field_name("operand")
                if operand is not None:
                    pending.append((operand, depth))
                pending.extend((index, depth + 1) for index in node.children_by_field_name("index"))
            elif kind in ("literal_value", "keyed_element"):
                pending.extend((child, 1) for child in node.named_children)
            else:
                pending.extend((child, depth) for child in node.named_children)

    # --- low level output ---

    def _write(self, value: str) -> None:
        if not value:
            return
        self._trailing_comment = False
        if self._bol:
            self._out.append("\t" * self._indent)
            self._bol = False
        self._out.append(value)

    def _sep(self, value: str) -> None:
        """Write a separator; the next token gets no automatic blank."""
        self._write(value)
        self._prev = None
        self._prev_word = False
        self._force_space = False

    def _linebreak(self, rows: int = 1, *, section: bool = False) -> None:
        rows = max(1, min(rows, 2))
        self._out.append("\f" if section else "\n")
        self._out.append("\n" * (rows - 1))
        self._bol = True
        self._prev = None
        self._prev_word = False

    def _newline(self, rows: int) -> None:
        """Reproduce a source line break found inside an expression."""
        prev = self._prev
        if prev is not None and _key(prev) in self._blanks and prev.parent is not None:
            self._continuations.append(prev.parent.end_byte)
            self._indent += 1
        elif self._frames and not self._frames[-1]:
            self._frames[-1] = True
            self._indent += 1
        self._linebreak(rows, section=True)

    def _advance(self, node: Node) -> None:
        """Close finished continuations and brackets, then break or space before ``node``."""
        while self._continuations and self._continuations[-1] <= node.start_byte:
            self._continuations.pop()
            self._indent -= 1
        if node.type in _CLOSERS and self._frames:
            if self._frames.pop():
                self._indent -= 1
        row = node.start_point.row
        if self._last_row is not None and row > self._last_row:
            self._newline(row - self._last_row)
        elif self._needs_space(node):
            self._write(" ")
        self._force_space = False

    def _token(self, node: Node) -> None:
        if node.type in TERMINATOR_TYPES or node.end_byte <= node.start_byte:
            return
        self._advance(node)
        value = text(node)
        self._write(escape(value) if node.type in ATOMIC_TYPES else value)
        if node.type in _OPENERS:
            self._frames.append(False)
        self._prev = node
        self._prev_word = _ends_word(node)
        self._last_row = node.end_point.row

    def _word(self, value: str, node: Node) -> None:
        """Write ``value`` in place of ``node`` (a rewritten receiver type)."""
        self._advance(node)
        self._write(value)
        self._prev = None
        self._prev_word = True
        self._last_row = node.end_point.row

    def _needs_space(self, cur: Node) -> bool:
        if self._force_space:
            return True
        prev = self._prev
        if prev is None:
            return self._prev_word and _is_word(cur)

        c, p = cur.type, prev.type
        blank = self._blanks.get(_key(cur))
        if blank is None:
            blank = self._blanks.get(_key(prev))
        if blank is not None:
            return blank

        parent = cur.parent.type if cur.parent is not None else ""
        prev_parent = prev.parent.type if prev.parent is not None else ""
        if c in (",", ";", ":"):
            return False
        if p in (",", ";"):
            return True
        if c == "}" and parent == "block":
            return p != "{"
        if c in _CLOSERS:
            return False
        if p in _OPENERS:
            return p == "{" and prev_parent == "block"
        if c in _ASSIGN_OPS or p in _ASSIGN_OPS:
            return True
        if p == ":":
            return prev_parent == "keyed_element"
        if c == "." or p == ".":
            return False
        if c == "...":
            return _is_word(prev)
        if p == "...":
            return False
        if c == "|" or p == "|":
            return True
        if p in _PREFIX_OPS:
            # chan<- T
            sibling = prev.prev_sibling
            return p == "<-" and sibling is not None and sibling.type == "chan"
        if c == "<-" and p == "chan":
            return False
        if c == "(":
            return self._starts_field(cur, ("result",)) or self._is_receiver(cur.parent)
        if c == "{":
            return parent == "block"
        if c == "[":
            return parent in _ARRAY_TYPES and _ends_word(prev)
        if self._starts_field(cur, ("result", "type")):
            return True
        if c in _PREFIX_OPS:
            return _ends_word(prev)
        return _ends_word(prev) and _is_word(cur)

    @staticmethod
    def _starts_field(cur: Node, fields: Tuple[str, ...]) -> bool:
        """Whether ``cur`` is the first token of a non-leading ``fields`` child."""
        node = cur
        while node.parent is not None and node.start_byte == cur.start_byte:
            parent = node.parent
            for name in fields:
                if same_node(parent.child_by_field_name(name), node) and node.prev_sibling is not None:
                    return True
            node = parent
        return False

    @staticmethod
    def _is_receiver(node: Optional[Node]) -> bool:
        if node is None or node.parent is None:
            return False
        return same_node(node.parent.child_by_field_name("receiver"), node)

    # --- tree walk ---

    def walk(self, root: Node) -> None:
        pending = [root]
        while pending:
            node = pending.pop()
            kind = node.type
            if kind == "comment":
                continue
            if self._recv is not None and _key(node) == self._recv[0]:
                self._word(self._recv[1], node)
                continue
            if kind == "struct_type":
                self._struct_type(node)
                continue
            if kind == "interface_type":
                self._interface_type(node)
                continue
            if kind == "parameter_list":
                bare = self._bare_result(node)
                if bare is not None:
                    # func F() (T) prints as func F() T
                    self._force_space = True
                    pending.append(bare)
                    continue
            if kind in ATOMIC_TYPES or node.child_count == 0:
                self._token(node)
                continue
            children = node.children
            if kind in ("function_declaration", "method_declaration"):
                body = node.child_by_field_name("body")
                children = [child for child in children if not same_node(child, body)]
            pending.extend(reversed(children))

    @staticmethod
    def _bare_result(node: Node) -> Optional[Node]:
        parent = node.parent
        if parent is None or not same_node(parent.child_by_field_name("result"), node):
            return None
        params = [child for child in node.named_children if child.type != "comment"]
        if len(params) != 1 or params[0].type != "parameter_declaration":
            return None
        if params[0].child_by_field_name("name") is not None:
            return None
        return params[0].child_by_field_name("type")

    # --- comments ---

    def _comment_lines(self, group: CommentGroup) -> List[str]:
        lines: List[str] = []
        for comment in group.comments:
            source_lines = comment.text.split("\n")
            lines.append(source_lines[0].rstrip())
            column = comment.start_point.column
            for line in source_lines[1:]:
                stripped = line[:column].lstrip(" \t")
                lines.append((stripped + line[column:]).rstrip())
        return lines

    def _doc_comment(self, group: CommentGroup) -> None:
        for line in self._comment_lines(group):
            self._write(escape(line))
            self._linebreak(1, section=True)

    def _line_comment(self, group: CommentGroup) -> None:
        lines = self._comment_lines(group)
        for index, line in enumerate(lines):
            if index:
                self._linebreak(1, section=True)
            self._write(escape(line))
        self._prev = None
        self._prev_word = False
        self._trailing_comment = True

    def _closing(self, brace: Node) -> None:
        self._write("}")
        self._prev = brace
        self._prev_word = True
        self._last_row = brace.end_point.row

    # --- struct and interface bodies ---

    def _keep_embedded(self, node: Optional[Node], *, interface: bool) -> bool:
        if not self.filter_unexported:
            return True
        if node is None:
            return False
        if node.type in ("type_elem", "constraint_elem", "interface_type_name"):
            named = [child for child in node.named_children if child.type != "comment"]
            if len(named) != 1:
                # unions and other constraint terms
                return True
            node = named[0]
        name, _ = base_type_name(node)
        if not name:
            return interface
        return is_exported(name) or (interface and name in PREDECLARED_TYPES)

    def _struct_type(self, node: Node) -> None:
        keyword = node.children[0]
        self._token(keyword)
        body = next((child for child in node.children if child.type == "field_declaration_list"), None)
        if body is None or body.child_count < 2:
            raise RenderError(f"struct without field list at row {node.start_point.row + 1}")
        lbrace, rbrace = body.children[0], body.children[-1]

        items: List[Tuple[Node, List[str]]] = []
        incomplete = False
        for field_decl in body.named_children:
            if field_decl.type != "field_declaration":
                continue
            names = field_names(field_decl, "name")
            if names:
                kept = [name for name in names if is_exported(name)] if self.filter_unexported else names
                if len(kept) < len(names):
                    incomplete = True
                if kept:
                    items.append((field_decl, kept))
            elif self._keep_embedded(field_decl.child_by_field_name("type"), interface=False):
                items.append((field_decl, []))
            else:
                incomplete = True

        if not incomplete and lbrace.start_point.row == rbrace.start_point.row:
            if not items:
                self._write("{")
                self._closing(rbrace)
                return
            if len(items) == 1 and self._struct_fits(*items[0]):
                field_decl, names = items[0]
                self._write("{ ")
                if names:
                    self._write(", ".join(names) + " ")
                self._sep("")
                self._field_type(field_decl)
                self._write(" ")
                self._closing(rbrace)
                return

        self._write(" {")
        self._indent += 1
        sep = "\v" if len(items) > 1 else " "
        previous: Optional[Node] = None
        for field_decl, names in items:
            doc = self.comments.lead_comment(field_decl)
            self._item_break(previous, doc.start_point.row if doc else field_decl.start_point.row)
            if doc is not None:
                self._doc_comment(doc)
            self._last_row = field_decl.start_point.row

            if names:
                self._write(", ".join(names))
                self._sep(sep)
                extra_tabs = 1
            else:
                extra_tabs = 2
            self._sep("")
            self._field_type(field_decl)
            tag = field_decl.child_by_field_name("tag")
            if tag is not None:
                self._sep(sep)
                self._write(escape(text(tag)))
                extra_tabs = 0
            comment = self.comments.line_comment(field_decl)
            if comment is not None:
                if sep == "\v" and extra_tabs:
                    self._sep("\v" * extra_tabs)
                else:
                    self._sep("\t")
                self._line_comment(comment)
            previous = field_decl

        if incomplete:
            self._linebreak(1, section=True)
            self._write(escape(FILTERED_FIELDS))
        self._indent -= 1
        self._linebreak(1, section=True)
        self._closing(rbrace)

    def _field_type(self, field_decl: Node) -> None:
        for child in field_decl.children:
            if child.type == "comment" or same_node(child, field_decl.child_by_field_name("tag")):
                continue
            if child.type in ("field_identifier", ","):
                continue
            self.walk(child)

    def _struct_fits(self, field_decl: Node, names: List[str]) -> bool:
        if field_decl.child_by_field_name("tag") is not None:
            return False
        if self.comments.line_comment(field_decl) is not None:
            return False
        type_node = field_decl.child_by_field_name("type")
        size = (1 if names else 0) + (_flat_size(type_node) if type_node is not None else 0)
        return size <= _ONE_LINE_MAX

    def _interface_type(self, node: Node) -> None:
        keyword = node.children[0]
        self._token(keyword)
        braces = [child for child in node.children if child.type in ("{", "}")]
        if len(braces) != 2:
            raise RenderError(f"interface without braces at row {node.start_point.row + 1}")
        lbrace, rbrace = braces

        items: List[Node] = []
        incomplete = False
        for element in node.named_children:
            if element.type == "comment":
                continue
            if element.type in _METHOD_ELEMS:
                name = element.child_by_field_name("name")
                keep = not self.filter_unexported or (name is not None and is_exported(text(name)))
            else:
                keep = self._keep_embedded(element, interface=True)
            if keep:
                items.append(element)
            else:
                incomplete = True

        if not incomplete and lbrace.start_point.row == rbrace.start_point.row:
            if not items:
                self._write("{")
                self._closing(rbrace)
                return
            if len(items) == 1 and self._interface_fits(items[0]):
                self._write("{ ")
                self._sep("")
                self._last_row = items[0].start_point.row
                self.walk(items[0])
                self._write(" ")
                self._closing(rbrace)
                return

        self._write(" {")
        self._indent += 1
        previous: Optional[Node] = None
        for element in items:
            doc = self.comments.lead_comment(element)
            self._item_break(previous, doc.start_point.row if doc else element.start_point.row)
            if doc is not None:
                self._doc_comment(doc)
            self._last_row = element.start_point.row
            self._sep("")
            self.walk(element)
            comment = self.comments.line_comment(element)
            if comment is not None:
                self._sep("\t")
                self._line_comment(comment)
            previous = element

        if incomplete:
            self._linebreak(1, section=True)
            self._write(escape(FILTERED_METHODS))
        self._indent -= 1
        self._linebreak(1, section=True)
        self._closing(rbrace)

    def _interface_fits(self, element: Node) -> bool:
        if self.comments.line_comment(element) is not None:
            return False
        if element.type in _METHOD_ELEMS:
            name = element.child_by_field_name("name")
            # counted as: name, "func" and the signature
            size = 1 + len("func") + _flat_size(element) - (len(text(name)) if name is not None else 0)
        else:
            size = _flat_size(element)
        return size <= _ONE_LINE_MAX

    def _item_break(self, previous: Optional[Node], first_row: int) -> None:
        """Break before a field, method or spec; a multi-line predecessor starts a new section."""
        if previous is None:
            self._linebreak(1, section=True)
            return
        self._linebreak(
            first_row - previous.end_point.row,
            section=previous.end_point.row > previous.start_point.row,
        )

    # --- declarations ---

    def value_decl(self, decl: GenDecl) -> None:
        self._write(decl.token)
        if not decl.grouped:
            self._sep(" ")
            self._value_spec(decl.specs[0], keep_type=False, cells=False)
            return

        self._write(" (")
        if decl.specs:
            self._indent += 1
            cells = len(decl.specs) > 1
            keep = _keep_type_column(decl.specs)
            previous: Optional[Node] = None
            for spec, keep_type in zip(decl.specs, keep):
                first_row = spec.doc.start_point.row if spec.doc else spec.node.start_point.row
                self._item_break(previous, first_row)
                if spec.doc is not None:
                    self._doc_comment(spec.doc)
                self._last_row = spec.node.start_point.row
                self._value_spec(spec, keep_type=keep_type, cells=cells)
                previous = spec.node
            self._indent -= 1
            self._linebreak(1, section=True)
        self._write(")")

    def _value_spec(self, spec: Spec, *, keep_type: bool, cells: bool) -> None:
        type_node = spec.node.child_by_field_name("type")
        value_node = spec.node.child_by_field_name("value")
        self._sep(", ".join(spec.names))

        extra_tabs = 3
        if cells:
            if type_node is not None or keep_type:
                self._sep("\v")
                extra_tabs -= 1
            if type_node is not None:
                self.walk(type_node)
            if value_node is not None:
                self._sep("\v= ")
                self.walk(value_node)
                extra_tabs -= 1
        else:
            if type_node is not None:
                self._sep(" ")
                self.walk(type_node)
            if value_node is not None:
                self._sep(" = ")
                self.walk(value_node)

        if spec.comment is not None:
            self._sep("\v" * extra_tabs if cells else "\t")
            self._line_comment(spec.comment)

    def type_decl(self, decl: GenDecl) -> None:
        if not decl.specs:
            raise RenderError("type declaration without spec")
        spec = decl.specs[0]
        name = spec.node.child_by_field_name("name")
        type_node = spec.node.child_by_field_name("type")
        if name is None or type_node is None:
            raise RenderError(f"incomplete type spec at row {spec.node.start_point.row + 1}")

        self._write("type")
        self._sep(" ")
        self._last_row = name.start_point.row
        self.walk(name)
        params = spec.node.child_by_field_name("type_parameters")
        if params is not None:
            self.walk(params)
        self._sep(" = " if spec.node.type == "type_alias" else " ")
        self.walk(type_node)
        if spec.comment is not None:
            self._sep("\t")
            self._line_comment(spec.comment)

    def func_decl(self, decl: FuncDecl) -> None:
        node = decl.node
        if node.child_by_field_name("name") is None:
            raise RenderError(f"function without name at row {node.start_point.row + 1}")
        if decl.recv_type and node.type == "method_declaration":
            recv = receiver_type(node)
            if recv is not None:
                self._recv = (_key(recv), decl.recv_type)
        self.walk(node)


class DeclarationRenderer:
    """Renders documented declarations as canonical Go source.

    Declaration docs are not part of the output; docs and line comments of
    struct fields, interface methods and grouped specs are. With
    ``exported_only`` unexported fields and methods of rendered types are
    replaced by a "contains filtered" comment.
    """

    def __init__(self, exported_only: bool = True) -> None:
        self.exported_only = exported_only
        self.logger = get_logger("render")

    def render_value(self, decl: GenDecl) -> str:
        printer = _Printer(decl.comments, self.exported_only)
        printer.scan(decl.node)
        printer.value_decl(decl)
        return printer.result()

    def render_type(self, decl: GenDecl) -> str:
        printer = _Printer(decl.comments, self.exported_only)
        printer.scan(decl.specs[0].node if decl.specs else decl.node)
        printer.type_decl(decl)
        return printer.result()

    def render_func(self, decl: FuncDecl) -> str:
        # Signatures of functions are printed as written.
        printer = _Printer(decl.comments, filter_unexported=False)
        printer.scan(decl.node)
        printer.func_decl(decl)
        return printer.result()


__all__ = ["DeclarationRenderer", "FILTERED_FIELDS", "FILTERED_METHODS"]
