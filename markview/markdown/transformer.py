"""Transform markdown AST to a typed node tree.

Walks the markdown-it-py SyntaxTreeNode block by block and delegates paragraphs,
lists and tables to the inline, list and table builders. Every builder returns
the subtree it built; nothing is mutated after construction.
"""

from typing import Literal, cast

from loguru import logger
from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, Field

from markview.markdown.diagnostics import Diagnostic, DiagnosticLog
from markview.markdown.inline import build_inline, inline_children, plain_text
from markview.markdown.lists import build_list
from markview.markdown.models import (
    BlockNode,
    BlockQuoteNode,
    CodeBlockNode,
    HeadingNode,
    ParagraphNode,
    RootNode,
)
from markview.markdown.options import CodeTrimMode, TransformConfig
from markview.markdown.tables import build_table


class MarkdownDocument(BaseModel):
    """The typed tree of one markdown document plus what it could not represent."""

    root: RootNode
    diagnostics: list[Diagnostic] = Field(default_factory=list)


def trim_code(code: str, mode: CodeTrimMode = CodeTrimMode.REFERENCE) -> str:
    """Trim the end of a code block's raw content.

    REFERENCE counts the trailing spaces and removes them plus one more
    character. For parser output that character is the final newline; for
    content that ends in spaces it is the last non-space character.
    """
    if mode == CodeTrimMode.TRAILING_WHITESPACE:
        return code.rstrip()

    count = 0
    while count < len(code) and code[len(code) - count - 1] == " ":
        count += 1
    return code[: max(0, len(code) - count - 1)]


def build_blocks(
    nodes: list[SyntaxTreeNode],
    diagnostics: DiagnosticLog,
    config: TransformConfig | None = None,
) -> list[BlockNode]:
    """Transform a sequence of block-level nodes, in order.

    Block kinds without a handler are transparent: their children are transformed
    in place and nothing marks the container's own boundary.
    """
    config = config or TransformConfig()
    blocks: list[BlockNode] = []
    for node in nodes:
        block = _build_block(node, diagnostics, config)
        if block is None:
            diagnostics.block_fallthrough(node)
            blocks.extend(build_blocks(node.children, diagnostics, config))
            continue
        blocks.append(block)
    return blocks


def _build_block(node: SyntaxTreeNode, diagnostics: DiagnosticLog, config: TransformConfig) -> BlockNode | None:
    if node.type == "heading":
        return _build_heading(node)
    elif node.type == "paragraph":
        return ParagraphNode(children=build_inline(inline_children(node), diagnostics))
    elif node.type == "table":
        return build_table(node, diagnostics)
    elif node.type in ("fence", "code_block"):
        return _build_code(node, config.code_trim)
    elif node.type in ("bullet_list", "ordered_list"):
        return build_list(node, diagnostics, depth=0, placement=config.sublist_placement)
    elif node.type == "blockquote":
        return BlockQuoteNode(children=build_blocks(node.children, diagnostics, config))
    return None


def _build_heading(node: SyntaxTreeNode) -> HeadingNode:
    """Heading text is flattened; inline formatting is discarded."""
    level = cast(Literal[1, 2, 3, 4, 5, 6], int(node.tag[1]))  # h1 -> 1, h2 -> 2, etc.
    return HeadingNode(level=level, text=plain_text(node))


def _build_code(node: SyntaxTreeNode, mode: CodeTrimMode) -> CodeBlockNode:
    """Transform fenced or indented code block."""
    language = node.info if node.info else None
    return CodeBlockNode(language=language, code=trim_code(node.content or "", mode))


class DocumentTransformer:
    """Transforms markdown AST to a MarkdownDocument.

    Holds configuration only, so one instance can transform any number of trees.
    """

    def __init__(self, config: TransformConfig | None = None):
        self.config = config or TransformConfig()

    def transform(self, ast: SyntaxTreeNode) -> MarkdownDocument:
        """Transform AST root to MarkdownDocument."""
        diagnostics = DiagnosticLog(strict=self.config.strict)
        blocks = build_blocks(ast.children, diagnostics, self.config)
        if diagnostics.entries:
            logger.info(f"Transformed {len(blocks)} blocks, {len(diagnostics.entries)} nodes not representable")
        return MarkdownDocument(root=RootNode(children=blocks), diagnostics=diagnostics.entries)


def transform_to_document(ast: SyntaxTreeNode, config: TransformConfig | None = None) -> MarkdownDocument:
    """Transform markdown AST to MarkdownDocument."""
    return DocumentTransformer(config).transform(ast)
