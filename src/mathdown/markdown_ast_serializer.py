"""
Visitor class for serializing markdown AST structures to plain dictionaries.

The serialized form is used for structural comparison of documents and for
JSON output from the command line tool.
"""

from typing import Any, Dict

from mathdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownASTNode, MarkdownASTDocumentNode, MarkdownASTTextNode,
    MarkdownASTEmphasisNode, MarkdownASTBoldNode, MarkdownASTStrikethroughNode, MarkdownASTMathNode,
    MarkdownASTHeadingNode, MarkdownASTParagraphNode, MarkdownASTOrderedListNode,
    MarkdownASTUnorderedListNode, MarkdownASTListItemNode, MarkdownASTInlineCodeNode,
    MarkdownASTCodeBlockNode, MarkdownASTTableNode, MarkdownASTTableHeaderNode,
    MarkdownASTTableBodyNode, MarkdownASTTableRowNode, MarkdownASTTableCellNode
)


class MarkdownASTSerializer(MarkdownASTVisitor):
    """Visitor that serializes the AST structure to dictionaries."""

    def _with_children(self, node_type: str, node: MarkdownASTNode) -> Dict[str, Any]:
        return {
            "type": node_type,
            "children": super().generic_visit(node)
        }

    def generic_visit(self, node: MarkdownASTNode) -> Dict[str, Any]:
        """Serialize a node type with no dedicated handler."""
        return self._with_children(node.__class__.__name__, node)

    def visit_MarkdownASTDocumentNode(self, node: MarkdownASTDocumentNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a document node."""
        return self._with_children("document", node)

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a text node."""
        return {"type": "text", "content": node.content}

    def visit_MarkdownASTEmphasisNode(self, node: MarkdownASTEmphasisNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize an emphasis node."""
        return self._with_children("emphasis", node)

    def visit_MarkdownASTBoldNode(self, node: MarkdownASTBoldNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a bold node."""
        return self._with_children("bold", node)

    def visit_MarkdownASTStrikethroughNode(  # pylint: disable=invalid-name
        self,
        node: MarkdownASTStrikethroughNode
    ) -> Dict[str, Any]:
        """Serialize a strikethrough node."""
        return self._with_children("strikethrough", node)

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize an inline code node."""
        return {"type": "inline_code", "content": node.content}

    def visit_MarkdownASTMathNode(self, node: MarkdownASTMathNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a math node."""
        return {"type": "math", "content": node.content}

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a heading node."""
        result = self._with_children("heading", node)
        result["level"] = node.level
        return result

    def visit_MarkdownASTParagraphNode(self, node: MarkdownASTParagraphNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a paragraph node."""
        return self._with_children("paragraph", node)

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize an ordered list node."""
        result = self._with_children("ordered_list", node)
        result["start"] = node.start
        return result

    def visit_MarkdownASTUnorderedListNode(  # pylint: disable=invalid-name
        self,
        node: MarkdownASTUnorderedListNode
    ) -> Dict[str, Any]:
        """Serialize an unordered list node."""
        return self._with_children("unordered_list", node)

    def visit_MarkdownASTListItemNode(self, node: MarkdownASTListItemNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a list item node."""
        return self._with_children("list_item", node)

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a code block node."""
        return {
            "type": "code_block",
            "language": node.language,
            "content": node.content
        }

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a table node."""
        return self._with_children("table", node)

    def visit_MarkdownASTTableHeaderNode(self, node: MarkdownASTTableHeaderNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a table header node."""
        return self._with_children("table_header", node)

    def visit_MarkdownASTTableBodyNode(self, node: MarkdownASTTableBodyNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a table body node."""
        return self._with_children("table_body", node)

    def visit_MarkdownASTTableRowNode(self, node: MarkdownASTTableRowNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a table row node."""
        return self._with_children("table_row", node)

    def visit_MarkdownASTTableCellNode(self, node: MarkdownASTTableCellNode) -> Dict[str, Any]:  # pylint: disable=invalid-name
        """Serialize a table cell node."""
        result = self._with_children("table_cell", node)
        result["is_header"] = node.is_header
        result["alignment"] = node.alignment
        return result
