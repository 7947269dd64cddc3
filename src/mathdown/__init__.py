"""A parser and renderer for markdown with math, as written by AIs."""

from mathdown.markdown_ast_builder import MarkdownASTBuilder, parse
from mathdown.markdown_ast_node import (
    MarkdownASTBoldNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTEmphasisNode,
    MarkdownASTHeadingNode,
    MarkdownASTInlineCodeNode,
    MarkdownASTListItemNode,
    MarkdownASTListNode,
    MarkdownASTMathNode,
    MarkdownASTNode,
    MarkdownASTOrderedListNode,
    MarkdownASTParagraphNode,
    MarkdownASTStrikethroughNode,
    MarkdownASTTableBodyNode,
    MarkdownASTTableCellNode,
    MarkdownASTTableHeaderNode,
    MarkdownASTTableNode,
    MarkdownASTTableRowNode,
    MarkdownASTTextNode,
    MarkdownASTUnorderedListNode,
    MarkdownASTVisitor
)
from mathdown.markdown_ast_printer import MarkdownASTPrinter
from mathdown.markdown_ast_serializer import MarkdownASTSerializer
from mathdown.markdown_content_renderer import MarkdownContentRenderer
from mathdown.markdown_html_renderer import MarkdownHTMLRenderer
from mathdown.markdown_inline_parser import MarkdownInlineParser
from mathdown.markdown_list_builder import MarkdownListBuilder
from mathdown.markdown_render_settings import MarkdownRenderSettings, MarkdownRenderSettingsError
from mathdown.math_typesetter import MarkdownRenderRegion, MathTypesetter, MathTypesetterError


__all__ = [
    "MarkdownASTBoldNode",
    "MarkdownASTBuilder",
    "MarkdownASTCodeBlockNode",
    "MarkdownASTDocumentNode",
    "MarkdownASTEmphasisNode",
    "MarkdownASTHeadingNode",
    "MarkdownASTInlineCodeNode",
    "MarkdownASTListItemNode",
    "MarkdownASTListNode",
    "MarkdownASTMathNode",
    "MarkdownASTNode",
    "MarkdownASTOrderedListNode",
    "MarkdownASTParagraphNode",
    "MarkdownASTPrinter",
    "MarkdownASTSerializer",
    "MarkdownASTStrikethroughNode",
    "MarkdownASTTableBodyNode",
    "MarkdownASTTableCellNode",
    "MarkdownASTTableHeaderNode",
    "MarkdownASTTableNode",
    "MarkdownASTTableRowNode",
    "MarkdownASTTextNode",
    "MarkdownASTUnorderedListNode",
    "MarkdownASTVisitor",
    "MarkdownContentRenderer",
    "MarkdownHTMLRenderer",
    "MarkdownInlineParser",
    "MarkdownListBuilder",
    "MarkdownRenderRegion",
    "MarkdownRenderSettings",
    "MarkdownRenderSettingsError",
    "MathTypesetter",
    "MathTypesetterError",
    "parse"
]
