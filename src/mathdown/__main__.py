"""Command line tool to parse AI message markdown and show the result."""

import argparse
import json
import logging
import sys
from typing import List

from mathdown.markdown_ast_builder import MarkdownASTBuilder
from mathdown.markdown_ast_printer import MarkdownASTPrinter
from mathdown.markdown_ast_serializer import MarkdownASTSerializer
from mathdown.markdown_html_renderer import MarkdownHTMLRenderer
from mathdown.markdown_render_settings import MarkdownRenderSettings, MarkdownRenderSettingsError


def setup_logging(debug: bool) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def main(argv: List[str] | None = None) -> int:
    """
    Parse a markdown file (or stdin) and print its AST, JSON or HTML.

    Args:
        argv: Command line arguments, excluding the program name

    Returns:
        The process exit status
    """
    parser = argparse.ArgumentParser(prog="mathdown", description="Parse markdown with math, as written by AIs")
    parser.add_argument("file", nargs="?", help="Markdown file to parse (reads stdin if omitted)")
    parser.add_argument(
        "--format", choices=["tree", "json", "html"], default="tree", help="Output format (default: tree)"
    )
    parser.add_argument("--settings", help="JSON file of render settings")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        settings = MarkdownRenderSettings.load(args.settings) if args.settings else MarkdownRenderSettings()

    except MarkdownRenderSettingsError as e:
        print(f"mathdown: {str(e)}", file=sys.stderr)
        return 1

    source = args.file if args.file else "stdin"
    try:
        if args.file:
            with open(args.file, 'r', encoding='utf-8') as f:
                text = f.read()

        else:
            text = sys.stdin.read()

    except (OSError, UnicodeDecodeError) as e:
        print(f"mathdown: failed to read {source}: {str(e)}", file=sys.stderr)
        return 1

    document = MarkdownASTBuilder(settings).build_ast(text)

    if args.format == "json":
        print(json.dumps(MarkdownASTSerializer().visit(document), indent=2))

    elif args.format == "html":
        print(MarkdownHTMLRenderer(settings.code_class_prefix).render(document))

    else:
        MarkdownASTPrinter(sys.stdout).visit(document)

    return 0


if __name__ == "__main__":
    sys.exit(main())
