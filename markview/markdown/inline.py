"""Inline builder: markdown-it inline nodes to typed inline nodes.

Only seven inline kinds are representable. Anything else is dropped and
recorded as an InlineDrop diagnostic. No nested formatting survives: a link
inside a strong span collapses into the strong node's plain text.
"""

from collections.abc import Sequence

from markdown_it.tree import SyntaxTreeNode

from markview.markdown.diagnostics import DiagnosticLog
from markview.markdown.models import (
    ImageNode,
    InlineCodeNode,
    InlineNode,
    ItalicNode,
    LinkNode,
    StrikethroughNode,
    StrongNode,
    TextNode,
)

STRIKETHROUGH_DELIMITER = "~"


def plain_text(node: SyntaxTreeNode) -> str:
    """Flattened, un-styled text content of a node."""
    if node.type in ("text", "code_inline", "html_inline"):
        return node.content or ""
    if node.type == "softbreak":
        return " "
    if node.type == "hardbreak":
        return "\n"
    if node.children:
        return "".join(plain_text(child) for child in node.children)
    return node.content or ""


def inline_children(block: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Inline nodes of a paragraph, heading or table cell.

    markdown-it wraps them in a single ``inline`` child.
    """
    inline = block.children[0] if block.children else None
    if inline is None or inline.type != "inline":
        return []
    return inline.children


def strip_strikethrough(text: str) -> str:
    """Remove one leading and one trailing delimiter left in the raw text."""
    if text.startswith(STRIKETHROUGH_DELIMITER):
        return text[1:-1]
    return text


def build_inline(nodes: Sequence[SyntaxTreeNode], diagnostics: DiagnosticLog) -> list[InlineNode]:
    """Transform a sequence of inline parse nodes, in order.

    Empty text nodes are skipped without a diagnostic.
    """
    result: list[InlineNode] = []
    for node in nodes:
        if node.type == "text" and not node.content:
            # delimiter leftover around emphasis at a block edge
            continue
        converted = _build_inline_node(node)
        if converted is None:
            diagnostics.inline_drop(node)
            continue
        result.append(converted)
    return result


def _build_inline_node(node: SyntaxTreeNode) -> InlineNode | None:
    if node.type == "text":
        return TextNode(text=plain_text(node))
    elif node.type == "strong":
        return StrongNode(text=plain_text(node))
    elif node.type == "em":
        return ItalicNode(text=plain_text(node))
    elif node.type == "code_inline":
        return InlineCodeNode(text=node.content or "")
    elif node.type == "s":
        return StrikethroughNode(text=strip_strikethrough(plain_text(node)))
    elif node.type == "link":
        href = node.attrs.get("href")
        return LinkNode(
            text=plain_text(node),
            destination=None if href is None else str(href),
        )
    elif node.type == "image":
        title = node.attrs.get("title")
        src = node.attrs.get("src")
        return ImageNode(
            text=str(title) if title is not None else plain_text(node),
            source=None if src is None else str(src),
        )
    return None
