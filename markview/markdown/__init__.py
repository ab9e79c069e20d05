"""Markdown parsing and transformation to a typed node tree."""

from markview.markdown.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from markview.markdown.inline import build_inline, plain_text
from markview.markdown.lists import build_list
from markview.markdown.models import (
    BlockNode,
    BlockQuoteNode,
    CodeBlockNode,
    HeadingNode,
    ImageNode,
    InlineCodeNode,
    InlineNode,
    ItalicNode,
    LinkNode,
    ListChild,
    ListItemNode,
    ListNode,
    ListType,
    MarkdownNode,
    NodeKind,
    ParagraphNode,
    RootNode,
    StrikethroughNode,
    StrongNode,
    TableNode,
    TextNode,
)
from markview.markdown.options import CodeTrimMode, SublistPlacement, TransformConfig
from markview.markdown.parser import create_parser, parse_markdown
from markview.markdown.tables import build_table
from markview.markdown.transformer import (
    DocumentTransformer,
    MarkdownDocument,
    build_blocks,
    transform_to_document,
    trim_code,
)
from markview.markdown.tree_view import build_rich_tree

__all__ = [
    # Parser
    "create_parser",
    "parse_markdown",
    # Transformer
    "DocumentTransformer",
    "MarkdownDocument",
    "transform_to_document",
    "TransformConfig",
    "CodeTrimMode",
    "SublistPlacement",
    # Builders
    "build_blocks",
    "build_inline",
    "build_list",
    "build_table",
    "plain_text",
    "trim_code",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    # Models
    "NodeKind",
    "ListType",
    "MarkdownNode",
    "BlockNode",
    "InlineNode",
    "ListChild",
    "RootNode",
    "HeadingNode",
    "ParagraphNode",
    "CodeBlockNode",
    "ListNode",
    "ListItemNode",
    "TableNode",
    "BlockQuoteNode",
    "TextNode",
    "StrongNode",
    "ItalicNode",
    "InlineCodeNode",
    "StrikethroughNode",
    "LinkNode",
    "ImageNode",
    # Debugging
    "build_rich_tree",
]
