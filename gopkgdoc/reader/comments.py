"""Comment grouping and doc-comment association by line adjacency."""

from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tree_sitter import Node, Point

from ..syntax.nodes import iter_leaves, text
from ..syntax.parser import SourceFile

_DIRECTIVE_RE = re.compile(r"[a-z0-9]+:[a-z0-9]")
_DIRECTIVE_PREFIXES = ("line ", "extern ", "export ")


@dataclass
class Comment:
    node: Node
    text: str

    @property
    def start_point(self) -> Point:
        return self.node.start_point

    @property
    def end_point(self) -> Point:
        return self.node.end_point


@dataclass
class CommentGroup:
    """Adjacent comments with no code and no blank line between them.

    A trailing group starts on the same line as a preceding code token; it can
    only continue on that line.
    """

    comments: List[Comment] = field(default_factory=list)
    trailing: bool = False

    @property
    def start_point(self) -> Point:
        return self.comments[0].start_point

    @property
    def end_point(self) -> Point:
        return self.comments[-1].end_point

    def text(self) -> str:
        return comment_text(self.comments)


def comment_text(comments: List[Comment]) -> str:
    """Return comment text with markers removed, as Go's CommentGroup.Text does."""
    lines: List[str] = []
    for comment in comments:
        body = comment.text
        if body.startswith("//"):
            body = body[2:]
            if body.startswith(" "):
                body = body[1:]
            elif _is_directive(body):
                continue
        elif body.startswith("/*"):
            body = body[2:-2]
        for line in body.split("\n"):
            lines.append(line.rstrip(" \t\n\r"))

    # Drop leading blank lines and collapse runs of interior blank lines.
    kept: List[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)
    if kept and kept[-1]:
        kept.append("")
    return "\n".join(kept)


def _is_directive(body: str) -> bool:
    if body.startswith(_DIRECTIVE_PREFIXES):
        return True
    return _DIRECTIVE_RE.match(body) is not None


class CommentMap:
    """Groups the comments of one file and answers lead/line comment queries."""

    def __init__(self, source_file: SourceFile) -> None:
        self.file = source_file
        self._leaves: List[Node] = list(iter_leaves(source_file.root))
        self._starts = [leaf.start_byte for leaf in self._leaves]
        self._group_at: Dict[int, CommentGroup] = {}
        self.groups: List[CommentGroup] = []
        self._build()

    def _build(self) -> None:
        group: Optional[CommentGroup] = None
        last_index = -2
        for index, leaf in enumerate(self._leaves):
            if leaf.type != "comment":
                continue
            comment = Comment(node=leaf, text=text(leaf))
            row = leaf.start_point.row
            if group is not None and last_index == index - 1 and (
                (group.trailing and row == group.end_point.row)
                or (not group.trailing and row <= group.end_point.row + 1)
            ):
                group.comments.append(comment)
            else:
                previous = self._leaves[index - 1] if index > 0 else None
                trailing = (
                    previous is not None
                    and previous.type != "comment"
                    and previous.end_point.row == row
                )
                group = CommentGroup(comments=[comment], trailing=trailing)
                self.groups.append(group)
            self._group_at[index] = group
            last_index = index

    def lead_comment(self, node: Node) -> Optional[CommentGroup]:
        """Return the group ending on the line directly above ``node``."""
        index = bisect_left(self._starts, node.start_byte)
        if index == 0:
            return None
        group = self._group_at.get(index - 1)
        if group is None or group.trailing:
            return None
        if group.end_point.row + 1 != node.start_point.row:
            return None
        return group

    def line_comment(self, node: Node) -> Optional[CommentGroup]:
        """Return the trailing group that follows ``node`` on its last line."""
        index = bisect_left(self._starts, node.end_byte)
        group = self._group_at.get(index)
        if group is None or not group.trailing:
            return None
        if group.comments[0].node.start_byte != self._starts[index]:
            return None
        if group.start_point.row != node.end_point.row:
            return None
        return group


__all__ = ["Comment", "CommentGroup", "CommentMap", "comment_text"]
