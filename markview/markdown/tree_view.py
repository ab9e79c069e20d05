"""Rich console view of a typed node tree, for development and debugging."""

from rich.markup import escape
from rich.tree import Tree

from markview.markdown.models import (
    BlockQuoteNode,
    CodeBlockNode,
    HeadingNode,
    ImageNode,
    InlineCodeNode,
    ItalicNode,
    LinkNode,
    ListItemNode,
    ListNode,
    MarkdownNode,
    ParagraphNode,
    RootNode,
    StrikethroughNode,
    StrongNode,
    TableNode,
    TextNode,
)

# Color coding by node type
COLORS = {
    "root": "white",
    "heading": "blue",
    "paragraph": "green",
    "list": "dark_orange",
    "list_item": "orange3",
    "block_quote": "magenta",
    "code_block": "grey62",
    "table": "grey62",
}

PREVIEW_CHARS = 60


def _preview(text: str) -> str:
    if len(text) > PREVIEW_CHARS:
        text = text[:PREVIEW_CHARS] + "..."
    return escape(repr(text))


def describe(node: MarkdownNode) -> str:
    """One-line label for a node: kind tag plus its payload."""
    color = COLORS.get(node.type, "cyan")
    label = f"[bold {color}]{node.type}[/bold {color}]"

    match node:
        case HeadingNode():
            detail = f"h{node.level} {_preview(node.text)}"
        case CodeBlockNode():
            detail = f"{node.language or 'plain'} {_preview(node.code)}"
        case ListNode():
            detail = f"{node.list_type} depth={node.depth}"
        case TableNode():
            detail = f"{len(node.headers)} cols, {len(node.body)} rows"
        case LinkNode():
            detail = f"{_preview(node.text)} -> {escape(node.destination or '')}"
        case ImageNode():
            detail = f"{_preview(node.text)} src={escape(node.source or '')}"
        case RootNode() | ParagraphNode() | ListItemNode() | BlockQuoteNode():
            detail = ""
        case TextNode() | StrongNode() | ItalicNode() | InlineCodeNode() | StrikethroughNode():
            detail = _preview(node.text)
        case _:
            detail = ""

    return f"{label} {detail}".rstrip()


def _label(node: MarkdownNode, show_ids: bool) -> str:
    label = describe(node)
    if show_ids:
        label = f"{label} [dim]#{node.id}[/dim]"
    return label


def build_rich_tree(node: MarkdownNode, show_ids: bool = False) -> Tree:
    """Build a rich Tree mirroring the node tree.

    Table headers and list item paragraphs are shown as extra branches since
    they live outside ``children``.
    """
    tree = Tree(_label(node, show_ids))
    _add_children(tree, node, show_ids)
    return tree


def _add_node(parent: Tree, node: MarkdownNode, show_ids: bool) -> None:
    branch = parent.add(_label(node, show_ids))
    _add_children(branch, node, show_ids)


def _add_children(tree: Tree, node: MarkdownNode, show_ids: bool) -> None:
    if isinstance(node, ListItemNode):
        _add_node(tree, node.paragraph, show_ids)
    if isinstance(node, TableNode) and node.headers:
        headers = tree.add("[dim]headers[/dim]")
        for header in node.headers:
            _add_node(headers, header, show_ids)
    for child in node.children:
        _add_node(tree, child, show_ids)
