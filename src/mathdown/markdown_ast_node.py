"""
AST node classes for markdown produced by an AI.

The tree is rebuilt from scratch on every parse, so nodes carry no state beyond
their content and their place in the tree.
"""

from typing import Any, List, Optional


class MarkdownASTNode:
    """Base class for all Markdown AST nodes."""

    def __init__(self) -> None:
        """Initialize a node with no parent and no children."""
        self.parent: Optional['MarkdownASTNode'] = None
        self.children: List['MarkdownASTNode'] = []

    def add_child(self, child: 'MarkdownASTNode') -> 'MarkdownASTNode':
        """
        Add a child node to this node.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        child.parent = self
        self.children.append(child)
        return child

    def add_children(self, children: List['MarkdownASTNode']) -> None:
        """
        Add a sequence of child nodes, in order.

        Args:
            children: The nodes to add
        """
        for child in children:
            self.add_child(child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkdownASTNode):
            return NotImplemented

        # Imported here as the serializer depends on this module
        from mathdown.markdown_ast_serializer import MarkdownASTSerializer  # pylint: disable=import-outside-toplevel

        serializer = MarkdownASTSerializer()
        return bool(serializer.visit(self) == serializer.visit(other))

    # Equality is structural and nodes are mutable, so nodes are unhashable
    __hash__ = None  # type: ignore[assignment]


class MarkdownASTVisitor:
    """
    Base visitor class for Markdown AST traversal.

    Dispatches to `visit_<ClassName>` if the subclass defines one, otherwise
    to `generic_visit`.
    """

    def visit(self, node: MarkdownASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        return [self.visit(child) for child in node.children]


class MarkdownASTDocumentNode(MarkdownASTNode):
    """Root node representing a whole message."""


class MarkdownASTParagraphNode(MarkdownASTNode):
    """Node representing a paragraph."""


class MarkdownASTHeadingNode(MarkdownASTNode):
    """Node representing a heading (levels 1 to 6)."""
    def __init__(self, level: int) -> None:
        """
        Initialize a heading node.

        Args:
            level: The heading level (1-6)
        """
        super().__init__()

        # Level should be 1-6
        self.level = max(1, min(6, level))


class MarkdownASTListNode(MarkdownASTNode):
    """Base class for ordered and unordered lists."""

    def __init__(self, indent: int = 0) -> None:
        """
        Initialize a list node.

        Args:
            indent: The indentation of this list's markers in the source
        """
        super().__init__()
        self.indent = indent

    @property
    def ordered(self) -> bool:
        """True for numbered lists."""
        return False

    @property
    def items(self) -> List['MarkdownASTListItemNode']:
        """The list's items."""
        return [child for child in self.children if isinstance(child, MarkdownASTListItemNode)]


class MarkdownASTOrderedListNode(MarkdownASTListNode):
    """Node representing a numbered list."""
    def __init__(self, indent: int = 0, start: int = 1) -> None:
        """
        Initialize an ordered list node.

        Args:
            indent: The indentation of this list's markers in the source
            start: The number of the first item
        """
        super().__init__(indent)
        self.start = start

    @property
    def ordered(self) -> bool:
        return True


class MarkdownASTUnorderedListNode(MarkdownASTListNode):
    """Node representing a bullet list."""


class MarkdownASTListItemNode(MarkdownASTNode):
    """
    Node representing a list item.

    Children are the item's own blocks (paragraphs and code blocks) and at
    most one nested list, in source order.
    """

    @property
    def content(self) -> List[MarkdownASTNode]:
        """The item's blocks, excluding any nested list."""
        return [child for child in self.children if not isinstance(child, MarkdownASTListNode)]

    @property
    def nested(self) -> MarkdownASTListNode | None:
        """The nested list, if this item has one."""
        for child in self.children:
            if isinstance(child, MarkdownASTListNode):
                return child

        return None


class MarkdownASTTextNode(MarkdownASTNode):
    """Node representing plain text content."""
    def __init__(self, content: str) -> None:
        """
        Initialize a text node.

        Args:
            content: The text content
        """
        super().__init__()
        self.content = content


class MarkdownASTBoldNode(MarkdownASTNode):
    """Node representing bold text."""


class MarkdownASTEmphasisNode(MarkdownASTNode):
    """Node representing italic text."""


class MarkdownASTStrikethroughNode(MarkdownASTNode):
    """Node representing struck-through text."""


class MarkdownASTInlineCodeNode(MarkdownASTNode):
    """Node representing inline code."""
    def __init__(self, content: str = "") -> None:
        """
        Initialize an inline code node.

        Args:
            content: The code content
        """
        super().__init__()
        self.content = content


class MarkdownASTMathNode(MarkdownASTNode):
    """
    Node representing a math literal.

    The content keeps its `$` or `$$` delimiters exactly as they appeared in the
    source so an external typesetter can pick it up unchanged.
    """
    def __init__(self, content: str) -> None:
        """
        Initialize a math node.

        Args:
            content: The math source, including delimiters
        """
        super().__init__()
        self.content = content

    @property
    def display(self) -> bool:
        """True for `$$...$$` display math."""
        return self.content.startswith('$$')


class MarkdownASTCodeBlockNode(MarkdownASTNode):
    """Node representing a fenced code block."""
    def __init__(self, language: str | None, content: str) -> None:
        """
        Initialize a code block node.

        Args:
            language: The language tag from the opening fence, if any
            content: The verbatim code content
        """
        super().__init__()
        self.language = language
        self.content = content


class MarkdownASTTableNode(MarkdownASTNode):
    """
    Node representing a table.

    Children are a header section followed by a body section.
    """

    def _section(self, section_type: type) -> MarkdownASTNode | None:
        for child in self.children:
            if isinstance(child, section_type):
                return child

        return None

    @property
    def headers(self) -> List[List[MarkdownASTNode]]:
        """The header cells, each as a list of spans."""
        header = self._section(MarkdownASTTableHeaderNode)
        if header is None or not header.children:
            return []

        return [cell.children for cell in header.children[0].children]

    @property
    def rows(self) -> List[List[List[MarkdownASTNode]]]:
        """The body rows, each a list of cells, each cell a list of spans."""
        body = self._section(MarkdownASTTableBodyNode)
        if body is None:
            return []

        return [[cell.children for cell in row.children] for row in body.children]


class MarkdownASTTableHeaderNode(MarkdownASTNode):
    """Node representing the header row section of a table."""


class MarkdownASTTableBodyNode(MarkdownASTNode):
    """Node representing the body section of a table."""


class MarkdownASTTableRowNode(MarkdownASTNode):
    """Node representing a table row."""


class MarkdownASTTableCellNode(MarkdownASTNode):
    """Node representing a table cell."""
    def __init__(self, is_header: bool = False, alignment: str | None = None) -> None:
        """
        Initialize a table cell node.

        Args:
            is_header: Whether this is a header cell or a data cell
            alignment: Cell alignment ('left', 'center', 'right'), or None if unspecified
        """
        super().__init__()
        self.is_header = is_header
        self.alignment = alignment
