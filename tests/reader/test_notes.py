"""Tests for MARKER(uid): note extraction."""

from __future__ import annotations

from gopkgdoc.reader import CommentMap
from gopkgdoc.reader.notes import clean_body, read_notes
from tests._fixtures.gopath_builder import GoPathBuilder

SOURCE = """
package n

// TODO(alice): first thing
// continues here.
// BUG(bob): second
//   spaced   out
func F() {}

// NOTE(x) no colon works too

// TODO(y):

// X(z): single letter markers are not notes
"""


def test_read_notes_splits_groups_at_markers(gopath: GoPathBuilder) -> None:
    [source] = gopath.parse("n", SOURCE).sorted_files()

    notes = read_notes(CommentMap(source))

    assert [(marker, note.uid, note.body) for marker, note in notes] == [
        ("TODO", "alice", "first thing\ncontinues here.\n"),
        ("BUG", "bob", "second\n spaced out\n"),
        ("NOTE", "x", "no colon works too\n"),
        ("TODO", "y", "\n"),
    ]
    todo = notes[0][1]
    assert todo.start_point.row == 2
    assert todo.end_point.row == 3
    assert todo.file is source


def test_clean_body_collapses_blanks() -> None:
    assert clean_body("  a\t\tb  \n c ") == "a b \n c"
    assert clean_body("   ") == ""
