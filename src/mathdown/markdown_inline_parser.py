"""
Inline span scanner for AI message text.

Scanning runs in two phases.  Math literals (`$...$` and `$$...$$`) are cut out
first and passed through untouched for a later typesetting pass.  The remaining
text is then scanned with a single combined pattern in which each kind of span
has its own named group, so a match is classified by the group that matched.
"""

import re
from typing import List

from mathdown.markdown_ast_node import (
    MarkdownASTNode, MarkdownASTTextNode, MarkdownASTBoldNode, MarkdownASTEmphasisNode,
    MarkdownASTInlineCodeNode, MarkdownASTStrikethroughNode, MarkdownASTMathNode
)


class MarkdownInlineParser:
    """Splits a line or paragraph of text into a sequence of span nodes."""

    # Display math is tried first so `$$x$$` is never read as two inline pieces
    MATH_PATTERN = re.compile(r'\$\$[\s\S]+?\$\$|\$[^$]+\$')

    def __init__(self, math_enabled: bool = True, strikethrough_enabled: bool = True) -> None:
        """
        Initialize the inline parser.

        Args:
            math_enabled: Whether `$` delimited math is isolated
            strikethrough_enabled: Whether `~~` delimited text is struck through
        """
        self._math_enabled = math_enabled

        # Bold must come before italic as both use `*`.  Spans never cross a line break.
        span_patterns = [
            r'\*\*(?P<bold>.+?)\*\*',
            r'\*(?P<italic>.+?)\*',
            r'`(?P<code>.+?)`',
        ]
        if strikethrough_enabled:
            span_patterns.append(r'~~(?P<strikethrough>.+?)~~')

        self._span_pattern = re.compile('|'.join(span_patterns))

    def parse(self, text: str) -> List[MarkdownASTNode]:
        """
        Parse inline formatting in text.

        Args:
            text: The text to parse; may contain single newlines

        Returns:
            The span nodes for the text, in order
        """
        if not self._math_enabled:
            return self._parse_spans(text)

        nodes: List[MarkdownASTNode] = []
        pos = 0
        for match in self.MATH_PATTERN.finditer(text):
            nodes.extend(self._parse_spans(text[pos:match.start()]))
            nodes.append(MarkdownASTMathNode(match.group(0)))
            pos = match.end()

        nodes.extend(self._parse_spans(text[pos:]))
        return nodes

    def _parse_spans(self, text: str) -> List[MarkdownASTNode]:
        """
        Parse bold, italic, inline code and strikethrough in text that holds no math.

        Args:
            text: The text to parse

        Returns:
            The span nodes for the text
        """
        nodes: List[MarkdownASTNode] = []
        pos = 0
        for match in self._span_pattern.finditer(text):
            if match.start() > pos:
                nodes.append(MarkdownASTTextNode(text[pos:match.start()]))

            kind = match.lastgroup
            body = match.group(kind)
            if kind == 'code':
                nodes.append(MarkdownASTInlineCodeNode(body))

            else:
                if kind == 'bold':
                    node: MarkdownASTNode = MarkdownASTBoldNode()

                elif kind == 'italic':
                    node = MarkdownASTEmphasisNode()

                else:
                    node = MarkdownASTStrikethroughNode()

                node.add_children(self._parse_spans(body))
                nodes.append(node)

            pos = match.end()

        if pos < len(text):
            nodes.append(MarkdownASTTextNode(text[pos:]))

        return nodes
