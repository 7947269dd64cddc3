"""
Parser to construct an AST from markdown written by an AI.

The text is split into blocks on blank lines (except inside code fences), each
block is classified and handed to the matching builder.  Every call builds a
brand new tree, so the same text always gives the same document, however many
times it is re-parsed while a response streams in.
"""

import logging
import re
from typing import List, Tuple

from mathdown.markdown_ast_node import (
    MarkdownASTNode, MarkdownASTDocumentNode, MarkdownASTHeadingNode, MarkdownASTParagraphNode
)
from mathdown.markdown_code_fence import extract_code_fence, find_fence_end, is_fence, line_indent
from mathdown.markdown_inline_parser import MarkdownInlineParser
from mathdown.markdown_list_builder import MarkdownListBuilder, is_ordered_marker, match_list_marker
from mathdown.markdown_render_settings import MarkdownRenderSettings
from mathdown.markdown_table import extract_table, is_table_start


class MarkdownASTBuilder:
    """
    Builder class for constructing an AST from markdown text.

    The builder holds no per-parse state, so one instance can be reused for
    every update of a streaming message.
    """

    def __init__(self, settings: MarkdownRenderSettings | None = None) -> None:
        """
        Initialize the AST builder.

        Args:
            settings: Render settings; defaults are used if not given
        """
        self._settings = settings if settings is not None else MarkdownRenderSettings()
        self._inline_parser = MarkdownInlineParser(
            math_enabled=self._settings.math_enabled,
            strikethrough_enabled=self._settings.strikethrough_enabled
        )
        self._list_builder = MarkdownListBuilder(self._inline_parser)

        self._heading_pattern = re.compile(r'^\s*(#{1,6}) (.*)$')

        self._logger = logging.getLogger("MarkdownASTBuilder")

    def build_ast(self, text: str) -> MarkdownASTDocumentNode:
        """
        Build a complete AST from the given text.

        Args:
            text: The markdown text to parse

        Returns:
            The document root node
        """
        document = MarkdownASTDocumentNode()
        lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')

        i = 0
        while i < len(lines):
            if not lines[i].strip():
                i += 1
                continue

            node, i = self._parse_block(lines, i)
            document.add_child(node)

        self._logger.debug("Built document with %d blocks from %d lines", len(document.children), len(lines))
        return document

    def _find_block_end(self, lines: List[str], index: int) -> int:
        """
        Find the end of the block starting at `lines[index]`.

        Blocks end at a blank line, but blank lines inside a code fence do not count.

        Args:
            lines: All lines of the input
            index: Index of the block's first line

        Returns:
            Index of the first line after the block
        """
        i = index
        while i < len(lines) and lines[i].strip():
            if is_fence(lines[i]):
                _, i = find_fence_end(lines, i)
                continue

            i += 1

        return i

    def _find_list_end(self, lines: List[str], index: int) -> int:
        """
        Find the end of a list that starts at `lines[index]`, following it across blank lines.

        After a blank line the list carries on if the next line is indented more
        than the list (continuation text, a nested list or code in an item) or is
        another marker of the same kind at the list's own indent.

        Args:
            lines: All lines of the input
            index: Index of the list's first line

        Returns:
            Index of the first line after the list
        """
        first = match_list_marker(lines[index])
        assert first is not None, "List must start with a marker line"
        base_indent = line_indent(lines[index])
        ordered = is_ordered_marker(first.group(2))

        end = self._find_block_end(lines, index)
        while True:
            next_index = end
            while next_index < len(lines) and not lines[next_index].strip():
                next_index += 1

            if next_index >= len(lines):
                return end

            next_line = lines[next_index]
            indent = line_indent(next_line)
            match = match_list_marker(next_line)
            continues = indent > base_indent or (
                match is not None and indent == base_indent and is_ordered_marker(match.group(2)) == ordered
            )
            if not continues:
                return end

            end = self._find_block_end(lines, next_index)

    def _parse_heading(self, level: int, content: str) -> MarkdownASTHeadingNode:
        """
        Parse a heading line and create a heading node.

        Args:
            level: The heading level (1-6)
            content: The heading content

        Returns:
            The heading node
        """
        heading = MarkdownASTHeadingNode(level)
        heading.add_children(self._inline_parser.parse(content.strip()))
        return heading

    def _parse_paragraph(self, lines: List[str], index: int, end: int) -> Tuple[MarkdownASTParagraphNode, int]:
        """
        Parse a whole block as one paragraph, keeping single newlines as soft breaks.

        Lines inside the block that look like headings, list items or tables
        stay part of the paragraph text.

        Args:
            lines: All lines of the input
            index: Index of the paragraph's first line
            end: End of the block containing the paragraph

        Returns:
            A tuple of (paragraph_node, next_index)
        """
        paragraph = MarkdownASTParagraphNode()
        paragraph.add_children(self._inline_parser.parse('\n'.join(lines[index:end]).strip()))
        return paragraph, end

    def _parse_block(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int]:
        """
        Classify and parse the block starting at `lines[index]`.

        Args:
            lines: All lines of the input
            index: Index of the block's first (non-blank) line

        Returns:
            A tuple of (block_node, next_index)
        """
        line = lines[index]

        heading_match = self._heading_pattern.match(line)
        if heading_match:
            return self._parse_heading(len(heading_match.group(1)), heading_match.group(2)), index + 1

        if is_fence(line):
            return extract_code_fence(lines, index, line_indent(line))

        block_end = self._find_block_end(lines, index)
        if is_table_start(lines, index, block_end):
            return extract_table(lines, index, self._inline_parser)

        if match_list_marker(line):
            list_end = self._find_list_end(lines, index)
            list_node, consumed = self._list_builder.build_list(lines[index:list_end], 0, line_indent(line))
            if list_node is not None:
                self._logger.debug("List at line %d spans %d lines", index, consumed)
                return list_node, index + consumed

        return self._parse_paragraph(lines, index, block_end)


def parse(text: str, settings: MarkdownRenderSettings | None = None) -> MarkdownASTDocumentNode:
    """
    Parse markdown text into a new document tree.

    Args:
        text: The markdown text to parse
        settings: Render settings; defaults are used if not given

    Returns:
        The document root node
    """
    return MarkdownASTBuilder(settings).build_ast(text)
