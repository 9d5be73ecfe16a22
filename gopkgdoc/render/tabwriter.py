"""Elastic tabstop alignment with the settings go/printer hands to text/tabwriter.

Input text uses ``\\t`` (hard) and ``\\v`` (soft) cell terminators, ``\\n`` line
breaks and ``\\f`` line breaks that also end every open column block. Text
between two :data:`ESCAPE` characters is opaque: it never splits into cells and
the escape characters are dropped from the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

ESCAPE = "\uffff"

MIN_WIDTH = 8
TAB_WIDTH = 8
PADDING = 1


@dataclass
class _Cell:
    text: str
    width: int
    htab: bool


def escape(value: str) -> str:
    return f"{ESCAPE}{value}{ESCAPE}"


def _parse(text: str) -> List[Tuple[List[_Cell], bool]]:
    lines: List[Tuple[List[_Cell], bool]] = []
    cells: List[_Cell] = []
    buf: List[str] = []
    escaped = False
    for char in text:
        if escaped:
            if char == ESCAPE:
                escaped = False
            else:
                buf.append(char)
            continue
        if char == ESCAPE:
            escaped = True
        elif char in "\t\v":
            cells.append(_Cell("".join(buf), len(buf), char == "\t"))
            buf = []
        elif char in "\n\f":
            cells.append(_Cell("".join(buf), len(buf), False))
            buf = []
            lines.append((cells, char == "\f"))
            cells = []
        else:
            buf.append(char)
    cells.append(_Cell("".join(buf), len(buf), False))
    lines.append((cells, False))
    return lines


def _padding(text_width: int, cell_width: int) -> str:
    if cell_width == 0:
        return ""
    cell_width = (cell_width + TAB_WIDTH - 1) // TAB_WIDTH * TAB_WIDTH
    missing = cell_width - text_width
    return "\t" * ((missing + TAB_WIDTH - 1) // TAB_WIDTH)


def _format(lines: List[List[_Cell]]) -> List[str]:
    rendered: List[str] = []
    widths: List[int] = []

    def write_lines(start: int, end: int) -> None:
        for cells in lines[start:end]:
            parts: List[str] = []
            for column, cell in enumerate(cells):
                parts.append(cell.text)
                if column < len(widths):
                    parts.append(_padding(cell.width, widths[column]))
            rendered.append("".join(parts))

    def format_block(start: int, end: int) -> None:
        # A column block is a run of lines that all have a terminated cell
        # in this column; columns further right are formatted per block.
        column = len(widths)
        line0 = start
        current = start
        while current < end:
            if column >= len(lines[current]) - 1:
                current += 1
                continue
            write_lines(line0, current)
            line0 = current

            width = MIN_WIDTH
            discardable = True
            while current < end and column < len(lines[current]) - 1:
                cell = lines[current][column]
                width = max(width, cell.width + PADDING)
                if cell.width > 0 or cell.htab:
                    discardable = False
                current += 1
            if discardable:
                width = 0

            widths.append(width)
            format_block(line0, current)
            widths.pop()
            line0 = current
        write_lines(line0, end)

    format_block(0, len(lines))
    return rendered


def align(text: str) -> str:
    """Align cells into tab-padded columns and trim trailing blanks."""
    output: List[str] = []
    block: List[List[_Cell]] = []
    for cells, flush in _parse(text):
        block.append(cells)
        if flush:
            output.extend(_format(block))
            block = []
    if block:
        output.extend(_format(block))
    return "\n".join(line.rstrip(" \t") for line in output)


__all__ = ["ESCAPE", "align", "escape"]
