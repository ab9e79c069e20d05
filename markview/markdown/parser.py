"""Markdown parsing using markdown-it-py.

Configures markdown-it with the rules the typed tree can represent:
- CommonMark base (or another preset)
- GFM tables and strikethrough
"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

DEFAULT_PRESET = "commonmark"


def create_parser(preset: str = DEFAULT_PRESET) -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt(preset)
    md.enable("table")
    md.enable("strikethrough")
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str, parser: MarkdownIt | None = None) -> SyntaxTreeNode:
    """Parse markdown text into AST.

    Args:
        text: Markdown text to parse
        parser: Parser to use instead of the default singleton

    Returns:
        Root SyntaxTreeNode of the AST
    """
    parser = parser or get_parser()
    tokens = parser.parse(text)
    return SyntaxTreeNode(tokens)
