"""Tests for comment grouping and doc-comment association."""

from __future__ import annotations

from gopkgdoc.reader import CommentMap
from tests._fixtures.gopath_builder import GoPathBuilder

SOURCE = """
package c

// First line.
// Second line.

// Detached.

// Doc for X.
var X = 1 // trailing

// Doc line.
//go:generate stringer -type=T
//
// More.
func F() {}

/*Block*/
type T int
"""


def _comment_map(gopath: GoPathBuilder) -> CommentMap:
    [source] = gopath.parse("c", SOURCE).sorted_files()
    return CommentMap(source)


def _declarations(comment_map: CommentMap, kind: str):
    return [node for node in comment_map.file.root.named_children if node.type == kind]


def test_adjacent_comments_form_groups(gopath: GoPathBuilder) -> None:
    groups = _comment_map(gopath).groups

    assert [len(group.comments) for group in groups] == [2, 1, 1, 1, 4, 1]
    assert [group.trailing for group in groups] == [False, False, False, True, False, False]
    assert groups[0].text() == "First line.\nSecond line.\n"


def test_lead_and_line_comments(gopath: GoPathBuilder) -> None:
    comment_map = _comment_map(gopath)
    [var_decl] = _declarations(comment_map, "var_declaration")

    lead = comment_map.lead_comment(var_decl)
    line = comment_map.line_comment(var_decl)

    assert lead is not None and lead.text() == "Doc for X.\n"
    assert line is not None and line.text() == "trailing\n"


def test_text_drops_directives_and_keeps_paragraphs(gopath: GoPathBuilder) -> None:
    comment_map = _comment_map(gopath)
    [func] = _declarations(comment_map, "function_declaration")

    lead = comment_map.lead_comment(func)

    assert lead is not None
    assert lead.text() == "Doc line.\n\nMore.\n"
    assert comment_map.line_comment(func) is None


def test_block_comment_text(gopath: GoPathBuilder) -> None:
    comment_map = _comment_map(gopath)
    [type_decl] = _declarations(comment_map, "type_declaration")

    lead = comment_map.lead_comment(type_decl)

    assert lead is not None and lead.text() == "Block\n"


def test_comment_separated_by_blank_line_is_not_lead(gopath: GoPathBuilder) -> None:
    [source] = gopath.parse("d", "package d\n\n// Floating.\n\nvar Y = 2\n").sorted_files()
    comment_map = CommentMap(source)
    var_decl = source.root.named_children[-1]

    assert comment_map.lead_comment(var_decl) is None
    assert len(comment_map.groups) == 1
