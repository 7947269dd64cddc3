"""
Visitor class to print markdown AST structures for debugging
"""
from typing import Any, List, TextIO

from mathdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownASTNode, MarkdownASTTextNode, MarkdownASTHeadingNode,
    MarkdownASTInlineCodeNode, MarkdownASTMathNode, MarkdownASTCodeBlockNode,
    MarkdownASTOrderedListNode, MarkdownASTTableCellNode
)


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that prints the AST structure for debugging."""
    def __init__(self, output: TextIO | None = None) -> None:
        """
        Initialize the AST printer with zero indentation.

        Args:
            output: Stream to print to; stdout if not given
        """
        super().__init__()
        self.indent_level = 0
        self._output = output

    def _indent(self) -> str:
        """
        Get the current indentation string.

        Returns:
            A string of spaces for the current indentation level
        """
        return "  " * self.indent_level

    def _print(self, text: str) -> None:
        print(f"{self._indent()}{text}", file=self._output)

    def _print_with_children(self, label: str, node: MarkdownASTNode) -> List[Any]:
        self._print(label)
        self.indent_level += 1
        results = super().generic_visit(node)
        self.indent_level -= 1
        return results

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method that prints the node type.

        Args:
            node: The node to visit

        Returns:
            The results of visiting the children
        """
        return self._print_with_children(node.__class__.__name__.removeprefix("MarkdownAST"), node)

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> str:  # pylint: disable=invalid-name
        """
        Visit a text node and print its content.

        Args:
            node: The text node to visit

        Returns:
            The text content
        """
        self._print(f"Text: {node.content!r}")
        return node.content

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> str:  # pylint: disable=invalid-name
        """Print an inline code node."""
        self._print(f"InlineCode: {node.content!r}")
        return node.content

    def visit_MarkdownASTMathNode(self, node: MarkdownASTMathNode) -> str:  # pylint: disable=invalid-name
        """Print a math node."""
        kind = "display" if node.display else "inline"
        self._print(f"Math ({kind}): {node.content!r}")
        return node.content

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> List[Any]:  # pylint: disable=invalid-name
        """
        Visit a heading node and print its level.

        Args:
            node: The heading node to visit

        Returns:
            The results of visiting the children
        """
        return self._print_with_children(f"Heading (level {node.level})", node)

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print an ordered list and its start number."""
        return self._print_with_children(f"OrderedList (start {node.start})", node)

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """
        Visit a code block node and print its language and line count.

        Args:
            node: The code block node to visit

        Returns:
            The code content
        """
        language = node.language or "none"
        line_count = len(node.content.split('\n')) if node.content else 0
        self._print(f"CodeBlock (language: {language}, lines: {line_count})")
        return node.content

    def visit_MarkdownASTTableCellNode(self, node: MarkdownASTTableCellNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print a table cell with its kind and alignment."""
        cell_type = "Header" if node.is_header else "Data"
        alignment = f", align: {node.alignment}" if node.alignment else ""
        return self._print_with_children(f"TableCell ({cell_type}{alignment})", node)
