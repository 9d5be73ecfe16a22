"""MARKER(uid): annotation notes found in comments."""

from __future__ import annotations

import re
from typing import List, Tuple

from .comments import Comment, CommentMap, comment_text
from .model import DocNote

# MARKER is at least two capital letters, uid at least one character.
_NOTE_MARKER = r"([A-Z][A-Z]+)\(([^)]+)\):?"
_NOTE_MARKER_RE = re.compile(r"^[ \t]*" + _NOTE_MARKER)
_NOTE_COMMENT_RE = re.compile(r"^/[/*][ \t]*" + _NOTE_MARKER)


def clean_body(body: str) -> str:
    """Collapse runs of blanks, tabs and CRs into one space; keep newlines."""
    out: List[str] = []
    previous = " "
    for char in body:
        if char in "\r\t":
            char = " "
        if char != " " or previous != " ":
            out.append(char)
            previous = char
    if out and previous == " ":
        out.pop()
    return "".join(out)


def _read_note(comments: List[Comment], comment_map: CommentMap) -> Tuple[str, DocNote] | None:
    body_text = comment_text(comments)
    match = _NOTE_MARKER_RE.match(body_text)
    if match is None:
        return None
    body = clean_body(body_text[match.end():])
    if not body:
        return None
    note = DocNote(
        file=comment_map.file,
        start_point=comments[0].start_point,
        end_point=comments[-1].end_point,
        uid=match.group(2),
        body=body,
    )
    return match.group(1), note


def read_notes(comment_map: CommentMap) -> List[Tuple[str, DocNote]]:
    """Collect notes in source order.

    A note starts at a comment beginning with ``MARKER(uid):`` and runs to the
    next such comment or the end of its comment group.
    """
    notes: List[Tuple[str, DocNote]] = []
    for group in comment_map.groups:
        start = -1
        for index, comment in enumerate(group.comments):
            if _NOTE_COMMENT_RE.match(comment.text):
                if start >= 0:
                    found = _read_note(group.comments[start:index], comment_map)
                    if found is not None:
                        notes.append(found)
                start = index
        if start >= 0:
            found = _read_note(group.comments[start:], comment_map)
            if found is not None:
                notes.append(found)
    return notes


__all__ = ["clean_body", "read_notes"]
