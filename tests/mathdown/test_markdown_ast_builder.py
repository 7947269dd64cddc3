"""
Tests for the markdown AST builder
"""
import random

import pytest

from mathdown import (
    MarkdownASTBuilder, MarkdownASTDocumentNode, MarkdownASTHeadingNode, MarkdownASTParagraphNode,
    MarkdownASTOrderedListNode, MarkdownASTUnorderedListNode, MarkdownASTCodeBlockNode, MarkdownASTTableNode,
    MarkdownASTMathNode, MarkdownASTTextNode, MarkdownRenderSettings, parse
)

from markdown_test_utils import serialize, span_text


def block_types(document):
    """Get the class of each top-level block."""
    return [type(child) for child in document.children]


def test_empty_input(ast_builder):
    """Test that empty or blank input gives an empty document."""
    for text in ["", "\n", "   \n\n  "]:
        document = ast_builder.build_ast(text)
        assert isinstance(document, MarkdownASTDocumentNode)
        assert document.children == []


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_heading_levels(ast_builder, level):
    """Test headings at every level."""
    document = ast_builder.build_ast("#" * level + " Title")
    heading = document.children[0]
    assert isinstance(heading, MarkdownASTHeadingNode)
    assert heading.level == level
    assert span_text(heading.children) == "Title"


@pytest.mark.parametrize("text", ["####### Too deep", "#NoSpace"])
def test_not_headings(ast_builder, text):
    """Test lines that look like headings but are paragraphs."""
    document = ast_builder.build_ast(text)
    assert block_types(document) == [MarkdownASTParagraphNode]


def test_indented_heading(ast_builder):
    """Test that leading whitespace before a heading marker is ignored."""
    document = ast_builder.build_ast("    # indented")
    assert block_types(document) == [MarkdownASTHeadingNode]
    assert span_text(document.children[0].children) == "indented"


def test_heading_keeps_trailing_hashes(ast_builder):
    """Test that the whole rest of the line is the heading text."""
    document = ast_builder.build_ast("# Step #")
    assert span_text(document.children[0].children) == "Step #"
    document = ast_builder.build_ast("## Title ##")
    assert span_text(document.children[0].children) == "Title ##"


def test_heading_takes_only_its_line(ast_builder):
    """Test that text under a heading is a separate paragraph."""
    document = ast_builder.build_ast("# Title\nSome text\nmore")
    assert block_types(document) == [MarkdownASTHeadingNode, MarkdownASTParagraphNode]
    assert span_text(document.children[1].children) == "Some text\nmore"


def test_heading_with_math(ast_builder):
    """Test that heading text is inline parsed."""
    document = ast_builder.build_ast("# Energy $E = mc^2$")
    spans = document.children[0].children
    assert isinstance(spans[1], MarkdownASTMathNode)
    assert spans[1].content == "$E = mc^2$"


def test_paragraphs(ast_builder):
    """Test that blank lines separate paragraphs and single newlines are kept."""
    document = ast_builder.build_ast("one\ntwo\n\n\nthree")
    assert block_types(document) == [MarkdownASTParagraphNode, MarkdownASTParagraphNode]
    assert span_text(document.children[0].children) == "one\ntwo"
    assert span_text(document.children[1].children) == "three"


def test_paragraph_keeps_list_lines(ast_builder):
    """Test that list marker lines inside a paragraph block stay paragraph text."""
    document = ast_builder.build_ast("Steps:\n- a\n- b")
    assert block_types(document) == [MarkdownASTParagraphNode]
    assert span_text(document.children[0].children) == "Steps:\n- a\n- b"


def test_paragraph_keeps_heading_lines(ast_builder):
    """Test that heading lines inside a paragraph block stay paragraph text."""
    document = ast_builder.build_ast("Intro:\n# Heading\n- a")
    assert block_types(document) == [MarkdownASTParagraphNode]
    assert span_text(document.children[0].children) == "Intro:\n# Heading\n- a"


def test_paragraph_keeps_fence_lines(ast_builder):
    """Test that a fence that does not start the block is paragraph text."""
    document = ast_builder.build_ast("Run this:\n```sh\nls\n```")
    assert block_types(document) == [MarkdownASTParagraphNode]


def test_paragraph_keeps_table_lines(ast_builder):
    """Test that a table that does not start the block is paragraph text."""
    document = ast_builder.build_ast("Results:\n| A |\n|---|\n| 1 |")
    assert block_types(document) == [MarkdownASTParagraphNode]
    assert span_text(document.children[0].children) == "Results:\n| A |\n|---|\n| 1 |"


def test_code_block_keeps_blank_lines(ast_builder):
    """Test that blank lines inside a fence do not split the block."""
    document = ast_builder.build_ast("```python\nx = 1\n\n\ny = 2\n```\nafter")
    assert block_types(document) == [MarkdownASTCodeBlockNode, MarkdownASTParagraphNode]
    assert document.children[0].language == "python"
    assert document.children[0].content == "x = 1\n\n\ny = 2"


def test_unterminated_code_block(ast_builder):
    """Test that an unclosed fence, as seen mid-stream, takes the rest of the text."""
    document = ast_builder.build_ast("```js\nlet a = 1;\n\n# not a heading")
    assert block_types(document) == [MarkdownASTCodeBlockNode]
    assert document.children[0].content == "let a = 1;\n\n# not a heading"


def test_table_then_paragraph(ast_builder):
    """Test that the line after a table is parsed on its own."""
    document = ast_builder.build_ast("| A | B |\n|---|---|\n| 1 | 2 |\nDone.")
    assert block_types(document) == [MarkdownASTTableNode, MarkdownASTParagraphNode]
    assert span_text(document.children[1].children) == "Done."


def test_pipe_without_separator_is_paragraph(ast_builder):
    """Test that a line with pipes but no separator row is text."""
    document = ast_builder.build_ast("a | b\nc | d")
    assert block_types(document) == [MarkdownASTParagraphNode]


def test_list_across_blank_lines(ast_builder):
    """Test that loose list items form one list."""
    document = ast_builder.build_ast("1. a\n\n2. b\n\n3. c")
    assert block_types(document) == [MarkdownASTOrderedListNode]
    assert len(document.children[0].items) == 3


def test_item_paragraphs_across_blank_lines(ast_builder):
    """Test that indented text after a blank line stays in the item."""
    document = ast_builder.build_ast("1. a\n\n   more\n\n2. b")
    list_node = document.children[0]
    assert len(list_node.items) == 2
    first = list_node.items[0]
    assert [span_text(block.children) for block in first.content] == ["a", "more"]


def test_different_list_kind_after_blank_line(ast_builder):
    """Test that a blank line then a different marker kind starts a new list."""
    document = ast_builder.build_ast("- a\n\n1. b")
    assert block_types(document) == [MarkdownASTUnorderedListNode, MarkdownASTOrderedListNode]


def test_mixed_markers_without_blank_line(ast_builder):
    """Test that adjacent mixed markers form one list."""
    document = ast_builder.build_ast("- a\n1. b")
    assert block_types(document) == [MarkdownASTUnorderedListNode]
    assert len(document.children[0].items) == 2


def test_paragraph_after_list(ast_builder):
    """Test that unindented text after a blank line ends the list."""
    document = ast_builder.build_ast("- a\n- b\n\nAfter the list")
    assert block_types(document) == [MarkdownASTUnorderedListNode, MarkdownASTParagraphNode]


def test_fence_after_list(ast_builder):
    """Test that a fence at the list's indent ends the list."""
    document = ast_builder.build_ast("- a\n```\ncode\n```")
    assert block_types(document) == [MarkdownASTUnorderedListNode, MarkdownASTCodeBlockNode]
    assert document.children[1].content == "code"


def test_indented_list(ast_builder):
    """Test a list whose markers are indented."""
    document = ast_builder.build_ast("  - a\n  - b")
    list_node = document.children[0]
    assert isinstance(list_node, MarkdownASTUnorderedListNode)
    assert list_node.indent == 2
    assert len(list_node.items) == 2


def test_nested_list_with_code(ast_builder):
    """Test a numbered list holding a nested list and a code block."""
    text = (
        "1. Install:\n"
        "   ```bash\n"
        "   pip install mathdown\n"
        "   ```\n"
        "2. Check\n"
        "   - nested"
    )
    document = ast_builder.build_ast(text)
    list_node = document.children[0]
    assert len(list_node.items) == 2
    code = list_node.items[0].content[1]
    assert isinstance(code, MarkdownASTCodeBlockNode)
    assert code.content == "pip install mathdown"
    assert list_node.items[1].nested is not None


def test_display_math_block(ast_builder):
    """Test that a multi-line display math paragraph is one math span."""
    document = ast_builder.build_ast("$$\n\\sum_{i=1}^n i\n$$")
    paragraph = document.children[0]
    assert isinstance(paragraph, MarkdownASTParagraphNode)
    assert len(paragraph.children) == 1
    assert isinstance(paragraph.children[0], MarkdownASTMathNode)
    assert paragraph.children[0].display


def test_display_math_is_not_split_by_markers(ast_builder):
    """Test that lines inside display math never start new blocks."""
    document = ast_builder.build_ast("$$\n- x\n# y\n$$")
    assert block_types(document) == [MarkdownASTParagraphNode]
    assert document.children[0].children[0].content == "$$\n- x\n# y\n$$"


def test_crlf_line_endings(ast_builder):
    """Test that Windows line endings parse the same as Unix ones."""
    assert ast_builder.build_ast("# T\r\n\r\ntext\r\nmore") == ast_builder.build_ast("# T\n\ntext\nmore")
    assert ast_builder.build_ast("a\rb") == ast_builder.build_ast("a\nb")


def test_math_disabled_in_settings():
    """Test that the builder follows the math setting."""
    builder = MarkdownASTBuilder(MarkdownRenderSettings(math_enabled=False))
    spans = builder.build_ast("costs $5 and $6").children[0].children
    assert len(spans) == 1
    assert isinstance(spans[0], MarkdownASTTextNode)


def test_parse_function():
    """Test the module level parse function."""
    document = parse("# Hi")
    assert isinstance(document.children[0], MarkdownASTHeadingNode)


def test_reparse_gives_equal_trees(ast_builder):
    """Test that parsing the same text twice gives equal, distinct trees."""
    text = "# A\n\n- **b** $c$\n  1. d\n\n| x |\n|---|\n| `y` |\n\n```\nz\n```"
    first = ast_builder.build_ast(text)
    second = ast_builder.build_ast(text)
    assert first == second
    assert first is not second
    assert serialize(first) == serialize(parse(text))


def test_every_prefix_parses(ast_builder):
    """Test that each prefix of a message, as seen while streaming, parses."""
    text = (
        "# Results\n\nThe value of $\\pi$ is **about** 3.14.\n\n"
        "1. First\n   ```python\n   print(1)\n   ```\n2. Second\n   - sub\n\n"
        "| a | b |\n|:-:|--:|\n| 1 | 2 |\n\n$$\nx^2\n$$\n"
    )
    for end in range(len(text) + 1):
        document = ast_builder.build_ast(text[:end])
        assert isinstance(document, MarkdownASTDocumentNode)
        assert document == ast_builder.build_ast(text[:end])


def test_random_input_always_parses(ast_builder):
    """Test that arbitrary input always produces a document."""
    pieces = ["#", "# ", " ", "  ", "\n", "\n\n", "-", "- ", "* ", "1. ", "```", "$", "$$", "|", "---", ":", "~~", "`", "a", "b"]
    rng = random.Random(1234)
    for _ in range(300):
        text = "".join(rng.choice(pieces) for _ in range(rng.randint(0, 40)))
        document = ast_builder.build_ast(text)
        assert isinstance(document, MarkdownASTDocumentNode)
        assert document == ast_builder.build_ast(text)


def test_nodes_compare_by_structure_and_are_unhashable(ast_builder):
    """Test that equal trees compare equal and nodes cannot be hashed."""
    document = ast_builder.build_ast("# A")
    assert document == ast_builder.build_ast("# A")
    assert document != ast_builder.build_ast("# B")
    with pytest.raises(TypeError):
        hash(document)
