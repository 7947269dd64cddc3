"""
Markdown AST visitor to render the AST as HTML.
"""

import html

from mathdown.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownASTNode, MarkdownASTDocumentNode, MarkdownASTParagraphNode,
    MarkdownASTHeadingNode, MarkdownASTOrderedListNode, MarkdownASTUnorderedListNode,
    MarkdownASTListItemNode, MarkdownASTTextNode, MarkdownASTBoldNode, MarkdownASTEmphasisNode,
    MarkdownASTStrikethroughNode, MarkdownASTInlineCodeNode, MarkdownASTMathNode,
    MarkdownASTCodeBlockNode, MarkdownASTTableNode, MarkdownASTTableHeaderNode,
    MarkdownASTTableBodyNode, MarkdownASTTableRowNode, MarkdownASTTableCellNode
)


class MarkdownHTMLRenderer(MarkdownASTVisitor):
    """Visitor that renders the AST to HTML."""

    def __init__(self, code_class_prefix: str = "language-") -> None:
        """
        Initialize the HTML renderer.

        Args:
            code_class_prefix: Prefix for the CSS class naming a code block's language
        """
        super().__init__()
        self._code_class_prefix = code_class_prefix

    def _render_children(self, node: MarkdownASTNode) -> str:
        return "".join(self.visit(child) for child in node.children)

    def render(self, document: MarkdownASTDocumentNode) -> str:
        """
        Render a whole document.

        Args:
            document: The document to render

        Returns:
            The HTML for the document
        """
        return str(self.visit(document))

    def generic_visit(self, node: MarkdownASTNode) -> str:  # type: ignore[override]
        """Render a node with no dedicated handler by rendering its children."""
        return self._render_children(node)

    def visit_MarkdownASTParagraphNode(self, node: MarkdownASTParagraphNode) -> str:  # pylint: disable=invalid-name
        """
        Render a paragraph node to HTML.

        Args:
            node: The paragraph node to render

        Returns:
            The HTML string representation of the paragraph
        """
        return f"<p>{self._render_children(node)}</p>"

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> str:  # pylint: disable=invalid-name
        """
        Render a heading node to HTML.

        Args:
            node: The heading node to render

        Returns:
            The HTML string representation of the heading
        """
        return f"<h{node.level}>{self._render_children(node)}</h{node.level}>"

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> str:  # pylint: disable=invalid-name
        """
        Render an ordered list node to HTML.

        Args:
            node: The ordered list node to render

        Returns:
            The HTML string representation of the ordered list
        """
        start = f' start="{node.start}"' if node.start != 1 else ""
        return f"<ol{start}>{self._render_children(node)}</ol>"

    def visit_MarkdownASTUnorderedListNode(self, node: MarkdownASTUnorderedListNode) -> str:  # pylint: disable=invalid-name
        """Render an unordered list node to HTML."""
        return f"<ul>{self._render_children(node)}</ul>"

    def visit_MarkdownASTListItemNode(self, node: MarkdownASTListItemNode) -> str:  # pylint: disable=invalid-name
        """Render a list item node to HTML."""
        return f"<li>{self._render_children(node)}</li>"

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> str:  # pylint: disable=invalid-name
        """
        Render a text node to HTML.

        Single newlines inside a paragraph are soft breaks and become `<br />`.

        Args:
            node: The text node to render

        Returns:
            The escaped text content
        """
        return html.escape(node.content, quote=False).replace("\n", "<br />\n")

    def visit_MarkdownASTBoldNode(self, node: MarkdownASTBoldNode) -> str:  # pylint: disable=invalid-name
        """Render a bold node to HTML."""
        return f"<strong>{self._render_children(node)}</strong>"

    def visit_MarkdownASTEmphasisNode(self, node: MarkdownASTEmphasisNode) -> str:  # pylint: disable=invalid-name
        """Render an emphasis node to HTML."""
        return f"<em>{self._render_children(node)}</em>"

    def visit_MarkdownASTStrikethroughNode(self, node: MarkdownASTStrikethroughNode) -> str:  # pylint: disable=invalid-name
        """Render a strikethrough node to HTML."""
        return f"<del>{self._render_children(node)}</del>"

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> str:  # pylint: disable=invalid-name
        """Render an inline code node to HTML."""
        return f"<code>{html.escape(node.content, quote=False)}</code>"

    def visit_MarkdownASTMathNode(self, node: MarkdownASTMathNode) -> str:  # pylint: disable=invalid-name
        """
        Render a math node to HTML.

        The delimiters are kept so the typesetter can find the math in the page.

        Args:
            node: The math node to render

        Returns:
            The math source in a span marked for typesetting
        """
        css_class = "math display" if node.display else "math"
        return f'<span class="{css_class}">{html.escape(node.content, quote=False)}</span>'

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """
        Render a code block node to HTML.

        Args:
            node: The code block node to render

        Returns:
            The HTML string representation of the code block
        """
        language_class = ""
        if node.language:
            language_class = f' class="{html.escape(self._code_class_prefix + node.language)}"'

        return f"<pre><code{language_class}>{html.escape(node.content, quote=False)}</code></pre>"

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> str:  # pylint: disable=invalid-name
        """Render a table node to HTML."""
        return f"<table>{self._render_children(node)}</table>"

    def visit_MarkdownASTTableHeaderNode(self, node: MarkdownASTTableHeaderNode) -> str:  # pylint: disable=invalid-name
        """Render a table header section to HTML."""
        return f"<thead>{self._render_children(node)}</thead>"

    def visit_MarkdownASTTableBodyNode(self, node: MarkdownASTTableBodyNode) -> str:  # pylint: disable=invalid-name
        """Render a table body section to HTML."""
        return f"<tbody>{self._render_children(node)}</tbody>"

    def visit_MarkdownASTTableRowNode(self, node: MarkdownASTTableRowNode) -> str:  # pylint: disable=invalid-name
        """Render a table row to HTML."""
        return f"<tr>{self._render_children(node)}</tr>"

    def visit_MarkdownASTTableCellNode(self, node: MarkdownASTTableCellNode) -> str:  # pylint: disable=invalid-name
        """
        Render a table cell to HTML.

        Args:
            node: The table cell to render

        Returns:
            A `<th>` or `<td>` element, with alignment if the separator row gave one
        """
        tag = "th" if node.is_header else "td"
        style = f' style="text-align: {node.alignment}"' if node.alignment else ""
        return f"<{tag}{style}>{self._render_children(node)}</{tag}>"
