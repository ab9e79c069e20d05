"""List builder: bullet/ordered list nodes to typed List nodes.

Each paragraph of a list item becomes its own ListItem. A nested list is not
attached to the item it follows: it is built at ``depth + 1`` and placed as the
next sibling in the enclosing list's children, right after that item. Renderers
must not assume a sublist lives under its preceding item. With
``SublistPlacement.NESTED`` the sublist goes into that item's ``children``
instead.

List-item children that are neither paragraphs nor lists lose their own content
(recorded as ListContentDrop); lists found anywhere below them are still built.
"""

from collections.abc import Iterator

from markdown_it.tree import SyntaxTreeNode

from markview.markdown.diagnostics import DiagnosticLog
from markview.markdown.inline import build_inline, inline_children
from markview.markdown.models import ListChild, ListItemNode, ListNode, ListType, ParagraphNode
from markview.markdown.options import SublistPlacement

LIST_TYPES = ("bullet_list", "ordered_list")


def list_type_of(node: SyntaxTreeNode) -> ListType:
    return ListType.ORDERED if node.type == "ordered_list" else ListType.UNORDERED


def build_list(
    node: SyntaxTreeNode,
    diagnostics: DiagnosticLog,
    depth: int = 0,
    placement: SublistPlacement = SublistPlacement.SIBLING,
) -> ListNode:
    """Transform a list node into a List of the given depth (0 for document level)."""
    children: list[ListChild] = []
    for list_item in node.children:
        children.extend(_build_item(list_item, diagnostics, depth, placement))

    return ListNode(list_type=list_type_of(node), depth=depth, children=children)


def _build_item(
    list_item: SyntaxTreeNode,
    diagnostics: DiagnosticLog,
    depth: int,
    placement: SublistPlacement,
) -> list[ListChild]:
    entries: list[ListChild] = []
    lead: ParagraphNode | None = None  # paragraph whose ListItem is not emitted yet
    sublists: list[ListNode] = []

    for child in _item_blocks(list_item, diagnostics):
        if child.type == "paragraph":
            if lead is not None:
                entries.append(ListItemNode(paragraph=lead, children=sublists))
                sublists = []
            lead = ParagraphNode(children=build_inline(inline_children(child), diagnostics))
            continue

        sublist = build_list(child, diagnostics, depth + 1, placement)
        if placement == SublistPlacement.NESTED and lead is not None:
            sublists.append(sublist)
            continue
        if lead is not None:
            entries.append(ListItemNode(paragraph=lead, children=sublists))
            lead, sublists = None, []
        entries.append(sublist)

    if lead is not None:
        entries.append(ListItemNode(paragraph=lead, children=sublists))
    return entries


def _item_blocks(list_item: SyntaxTreeNode, diagnostics: DiagnosticLog) -> Iterator[SyntaxTreeNode]:
    """Paragraphs and lists of a list item, in document order."""
    for child in list_item.children:
        if child.type == "paragraph" or child.type in LIST_TYPES:
            yield child
        else:
            diagnostics.list_content_drop(child)
            yield from _nested_lists(child)


def _nested_lists(node: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    for child in node.children:
        if child.type in LIST_TYPES:
            yield child
        else:
            yield from _nested_lists(child)
