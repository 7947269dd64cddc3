"""Shared fixtures for mathdown tests."""

import pytest

from mathdown import MarkdownASTBuilder, MarkdownInlineParser, MarkdownListBuilder


@pytest.fixture
def ast_builder():
    """Fixture providing a markdown AST builder with default settings."""
    return MarkdownASTBuilder()


@pytest.fixture
def inline_parser():
    """Fixture providing an inline parser with math and strikethrough enabled."""
    return MarkdownInlineParser()


@pytest.fixture
def list_builder(inline_parser):
    """Fixture providing a list builder."""
    return MarkdownListBuilder(inline_parser)
