"""
Fenced code block extraction.

A fence opens with a line starting with three or more backticks, optionally
followed by a language name, and closes with a line holding only backticks
(at least as many as opened it).  Inside a block, a fence line that carries a
language name opens a nested fence, as AIs often show markdown that itself
contains code.  A fence that never closes runs to the end of the input.
"""

import re
from typing import List, Tuple

from mathdown.markdown_ast_node import MarkdownASTCodeBlockNode


FENCE_MARKER = '```'

_closing_fence_pattern = re.compile(r'^(`{3,})\s*$')


def line_indent(line: str) -> int:
    """
    Get the number of leading whitespace characters in a line.

    Args:
        line: The line to measure

    Returns:
        The indentation of the line
    """
    return len(line) - len(line.lstrip())


def is_fence(line: str) -> bool:
    """
    Check if a line is a code fence (opening or closing).

    Args:
        line: The line to check

    Returns:
        True if the line starts with a fence marker once indentation is removed
    """
    return line.strip().startswith(FENCE_MARKER)


def dedent_line(line: str, amount: int) -> str:
    """
    Remove up to `amount` leading whitespace characters from a line.

    Non-whitespace characters are never removed, so under-indented lines lose
    only the indentation they have.

    Args:
        line: The line to de-indent
        amount: The maximum number of characters to remove

    Returns:
        The de-indented line
    """
    return line[min(amount, line_indent(line)):]


def _fence_length(stripped_line: str) -> int:
    return len(stripped_line) - len(stripped_line.lstrip('`'))


def find_fence_end(lines: List[str], index: int) -> Tuple[int, int]:
    """
    Find where the fence opened at `lines[index]` closes.

    Args:
        lines: All lines of the input
        index: Index of the opening fence line

    Returns:
        A tuple of (closing_index, next_index).  For an unterminated fence both
        are `len(lines)`.
    """
    opening_length = _fence_length(lines[index].strip())
    nesting_level = 0
    i = index + 1
    while i < len(lines):
        stripped = lines[i].strip()
        closing = _closing_fence_pattern.match(stripped)
        if closing:
            # Only the outermost fence needs a closing run at least as long as its opening
            if nesting_level > 0:
                nesting_level -= 1

            elif len(closing.group(1)) >= opening_length:
                return i, i + 1

        elif is_fence(stripped) and stripped.lstrip('`').strip():
            # A fence with a language name inside a code block opens a nested fence
            nesting_level += 1

        i += 1

    return len(lines), len(lines)


def extract_code_fence(
    lines: List[str],
    index: int,
    base_indent: int = 0
) -> Tuple[MarkdownASTCodeBlockNode, int]:
    """
    Extract a fenced code block.

    Args:
        lines: All lines of the input
        index: Index of the opening fence line
        base_indent: Indentation to remove from each body line (the fence's own
            indentation when the block sits inside a list item)

    Returns:
        A tuple of (code_block_node, next_index) where next_index is the first
        line after the closing fence
    """
    language = lines[index].strip().lstrip('`').strip() or None
    closing_index, next_index = find_fence_end(lines, index)
    body = [dedent_line(line, base_indent) for line in lines[index + 1:closing_index]]
    return MarkdownASTCodeBlockNode(language, '\n'.join(body)), next_index
