"""
Tests for the debug tree printer
"""
import io

from mathdown import MarkdownASTPrinter


def test_print_tree(ast_builder):
    """Test the printed form of a small document."""
    document = ast_builder.build_ast(
        "# Hi `x`\n\n"
        "3. $a$\n\n"
        "```py\none\ntwo\n```\n\n"
        "| A |\n|--:|\n| $$b$$ |"
    )
    output = io.StringIO()
    MarkdownASTPrinter(output).visit(document)
    assert output.getvalue().splitlines() == [
        "DocumentNode",
        "  Heading (level 1)",
        "    Text: 'Hi '",
        "    InlineCode: 'x'",
        "  OrderedList (start 3)",
        "    ListItemNode",
        "      ParagraphNode",
        "        Math (inline): '$a$'",
        "  CodeBlock (language: py, lines: 2)",
        "  TableNode",
        "    TableHeaderNode",
        "      TableRowNode",
        "        TableCell (Header, align: right)",
        "          Text: 'A'",
        "    TableBodyNode",
        "      TableRowNode",
        "        TableCell (Data, align: right)",
        "          Math (display): '$$b$$'",
    ]


def test_print_empty_code_block(ast_builder):
    """Test that an empty code block has no lines."""
    output = io.StringIO()
    MarkdownASTPrinter(output).visit(ast_builder.build_ast("```\n```"))
    assert output.getvalue().splitlines() == ["DocumentNode", "  CodeBlock (language: none, lines: 0)"]
