"""
Builder for nested bullet and numbered lists.

Nesting is driven purely by indentation.  Each call reads the items of one list
at a given indent and recurses for deeper list runs, passing the line cursor
explicitly rather than sharing any state between calls.
"""

import re
from typing import List, Tuple

from mathdown.markdown_ast_node import (
    MarkdownASTListNode, MarkdownASTOrderedListNode, MarkdownASTUnorderedListNode,
    MarkdownASTListItemNode, MarkdownASTParagraphNode
)
from mathdown.markdown_code_fence import extract_code_fence, is_fence, line_indent
from mathdown.markdown_inline_parser import MarkdownInlineParser


LIST_MARKER_PATTERN = re.compile(r'^(\s*)([*-]|\d+\.)\s+(.*)$')


def match_list_marker(line: str) -> re.Match[str] | None:
    """
    Match a list item line.

    Args:
        line: The line to check

    Returns:
        A match whose groups are (indent, marker, content), or None if the line
        does not start with `*`, `-` or `<digits>.` followed by whitespace
    """
    return LIST_MARKER_PATTERN.match(line)


def is_ordered_marker(marker: str) -> bool:
    """
    Check if a list marker is a numbered one.

    Args:
        marker: The marker text, e.g. `-` or `12.`

    Returns:
        True for `<digits>.` markers
    """
    return marker[0].isdigit()


class MarkdownListBuilder:
    """Builds list nodes from runs of list lines."""

    def __init__(self, inline_parser: MarkdownInlineParser) -> None:
        """
        Initialize the list builder.

        Args:
            inline_parser: Parser used for the text of each item
        """
        self._inline_parser = inline_parser

    def build_list(self, lines: List[str], index: int, min_indent: int) -> Tuple[MarkdownASTListNode | None, int]:
        """
        Build a list whose first item is at or after `lines[index]`.

        The first item's marker decides whether the list is ordered.  Later
        items at the same indent join the list whatever marker they use.  The
        list ends at the first non-blank line indented less than `min_indent`.

        Args:
            lines: All lines available to the list
            index: Index to start reading from
            min_indent: Indentation of this list's markers

        Returns:
            A tuple of (list_node, next_index).  list_node is None, and the index
            is unchanged, if no list item starts here.
        """
        i = index
        while i < len(lines) and not lines[i].strip():
            i += 1

        if i >= len(lines):
            return None, index

        first = match_list_marker(lines[i])
        if first is None or line_indent(lines[i]) != min_indent:
            return None, index

        return self._read_items(lines, i, min_indent, first)

    def _read_items(
        self,
        lines: List[str],
        index: int,
        min_indent: int,
        first: re.Match[str]
    ) -> Tuple[MarkdownASTListNode, int]:
        """
        Read the items of a list whose first marker line is at `lines[index]`.

        Args:
            lines: All lines available to the list
            index: Index of the first item's marker line
            min_indent: Indentation of this list's markers
            first: The marker match for the first item

        Returns:
            A tuple of (list_node, next_index)
        """
        marker = first.group(2)
        list_node: MarkdownASTListNode
        if is_ordered_marker(marker):
            list_node = MarkdownASTOrderedListNode(min_indent, int(marker[:-1]))

        else:
            list_node = MarkdownASTUnorderedListNode(min_indent)

        i = index
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                i += 1
                continue

            if line_indent(line) < min_indent:
                break

            match = match_list_marker(line)
            if match is None:
                # Items consume everything at or past this indent except markers
                # and fences, so this line belongs to whatever follows the list
                break

            item, i = self._build_item(lines, i, min_indent, match)
            list_node.add_child(item)

        return list_node, i

    def _flush_text(self, item: MarkdownASTListItemNode, text_lines: List[str]) -> None:
        """
        Turn accumulated item text into a paragraph.

        Args:
            item: The item to add the paragraph to
            text_lines: The lines of text; cleared on return
        """
        text = '\n'.join(text_lines).strip()
        text_lines.clear()
        if not text:
            return

        paragraph = MarkdownASTParagraphNode()
        paragraph.add_children(self._inline_parser.parse(text))
        item.add_child(paragraph)

    def _add_nested_list(self, item: MarkdownASTListItemNode, nested: MarkdownASTListNode) -> None:
        """
        Attach a nested list to an item, merging into any nested list it already has.

        Args:
            item: The list item
            nested: The nested list to attach
        """
        existing = item.nested
        if existing is None:
            item.add_child(nested)
            return

        for nested_item in nested.items:
            existing.add_child(nested_item)

    def _build_item(
        self,
        lines: List[str],
        index: int,
        min_indent: int,
        match: re.Match[str]
    ) -> Tuple[MarkdownASTListItemNode, int]:
        """
        Build one list item, starting at its marker line.

        Args:
            lines: All lines available to the list
            index: Index of the item's marker line
            min_indent: Indentation of the list's markers
            match: The marker match for the item's first line

        Returns:
            A tuple of (item_node, next_index)
        """
        item = MarkdownASTListItemNode()
        text_lines = [match.group(3)]

        i = index + 1
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                # A blank line ends the current paragraph but not the item
                self._flush_text(item, text_lines)
                i += 1
                continue

            indent = line_indent(line)
            if indent < min_indent:
                break

            if indent == min_indent:
                # A fence at the list's own indent ends the list
                if match_list_marker(line) or is_fence(line):
                    break

                # Not a valid marker (e.g. "-x" or "1.x"), so it's text for this item
                text_lines.append(line.strip())
                i += 1
                continue

            nested_match = match_list_marker(line)
            if nested_match:
                self._flush_text(item, text_lines)
                nested, i = self._read_items(lines, i, indent, nested_match)
                self._add_nested_list(item, nested)
                continue

            if is_fence(line):
                self._flush_text(item, text_lines)
                code_block, i = extract_code_fence(lines, i, indent)
                item.add_child(code_block)
                continue

            text_lines.append(line.strip())
            i += 1

        self._flush_text(item, text_lines)
        return item, i
