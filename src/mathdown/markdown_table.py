"""
Table extraction.

A table is a header row containing `|`, a separator row made of dashes, colons
and pipes, and then every following line that contains a `|`.  Rows are padded
or truncated so each has exactly as many cells as the header.
"""

import re
from typing import List, Tuple

from mathdown.markdown_ast_node import (
    MarkdownASTTableNode, MarkdownASTTableHeaderNode, MarkdownASTTableBodyNode,
    MarkdownASTTableRowNode, MarkdownASTTableCellNode
)
from mathdown.markdown_inline_parser import MarkdownInlineParser


_separator_pattern = re.compile(r'^\s*\|?(\s*:?-+:?\s*\|)+(\s*:?-+:?\s*)?\|?\s*$')


def is_table_separator(line: str) -> bool:
    """
    Check if a line is a table separator row (e.g. `|---|:--:|`).

    Args:
        line: The line to check

    Returns:
        True if the line has the shape of a separator row
    """
    return _separator_pattern.match(line) is not None


def is_table_start(lines: List[str], index: int, end: int | None = None) -> bool:
    """
    Check if a table starts at `lines[index]`.

    Args:
        lines: All lines of the input
        index: Index of the candidate header row
        end: Index the table must start before, defaults to the end of the input

    Returns:
        True if the line contains a `|` and the next line is a separator row
    """
    limit = len(lines) if end is None else end
    return index + 1 < limit and '|' in lines[index] and is_table_separator(lines[index + 1])


def split_table_row(line: str) -> List[str]:
    """
    Split a table row into trimmed cell strings.

    One leading and one trailing pipe are removed first so outer pipes do not
    produce empty cells.

    Args:
        line: The row to split

    Returns:
        The cell contents
    """
    row = line.strip()
    if row.startswith('|'):
        row = row[1:]

    if row.endswith('|'):
        row = row[:-1]

    return [cell.strip() for cell in row.split('|')]


def _parse_alignment(cell: str) -> str | None:
    """
    Work out the alignment a separator cell asks for.

    Args:
        cell: A separator cell such as `:--:`

    Returns:
        'left', 'center', 'right', or None if no colons are present
    """
    starts = cell.startswith(':')
    ends = cell.endswith(':')
    if starts and ends:
        return 'center'

    if ends:
        return 'right'

    if starts:
        return 'left'

    return None


def _normalize_cells(cells: List[str], width: int) -> List[str]:
    if len(cells) < width:
        return cells + [''] * (width - len(cells))

    return cells[:width]


def extract_table(
    lines: List[str],
    index: int,
    inline_parser: MarkdownInlineParser
) -> Tuple[MarkdownASTTableNode, int]:
    """
    Extract a table whose header row is at `lines[index]`.

    The caller must already have checked the table shape with `is_table_start`.

    Args:
        lines: All lines of the input
        index: Index of the header row
        inline_parser: Parser used for the contents of each cell

    Returns:
        A tuple of (table_node, next_index) where next_index is the first line
        that is not part of the table
    """
    headers = split_table_row(lines[index])
    width = len(headers)

    # The separator's cell count need not match the header
    alignments: List[str | None] = [_parse_alignment(cell) for cell in split_table_row(lines[index + 1])]
    alignments = alignments[:width] + [None] * (width - len(alignments))

    table = MarkdownASTTableNode()
    header = MarkdownASTTableHeaderNode()
    table.add_child(header)
    header_row = MarkdownASTTableRowNode()
    header.add_child(header_row)
    for cell_text, alignment in zip(headers, alignments):
        cell = MarkdownASTTableCellNode(is_header=True, alignment=alignment)
        cell.add_children(inline_parser.parse(cell_text))
        header_row.add_child(cell)

    body = MarkdownASTTableBodyNode()
    table.add_child(body)

    i = index + 2
    while i < len(lines) and '|' in lines[i]:
        row = MarkdownASTTableRowNode()
        for cell_text, alignment in zip(_normalize_cells(split_table_row(lines[i]), width), alignments):
            cell = MarkdownASTTableCellNode(alignment=alignment)
            cell.add_children(inline_parser.parse(cell_text))
            row.add_child(cell)

        body.add_child(row)
        i += 1

    return table, i
