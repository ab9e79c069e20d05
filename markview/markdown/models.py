"""Typed node tree built from a markdown parse tree.

Every node carries an opaque ``id`` (for keying in renderers), an immutable kind
tag in ``type`` and an ordered ``children`` list. Models are frozen, so ids, kinds
and payloads cannot be reassigned; only the child lists are mutated in place, and
only by consumers once the tree has been built.
"""

import uuid
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(StrEnum):
    ROOT = "root"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    STRONG = "strong"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"
    INLINE_CODE = "inline_code"
    TABLE = "table"
    CODE_BLOCK = "code_block"
    LIST = "list"
    LIST_ITEM = "list_item"
    BLOCK_QUOTE = "block_quote"


class ListType(StrEnum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


def _new_node_id() -> str:
    return uuid.uuid4().hex[:12]


def _strip_ids(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: _strip_ids(value) for key, value in data.items() if key != "id"}
    if isinstance(data, list):
        return [_strip_ids(value) for value in data]
    return data


class MarkdownNode(BaseModel):
    """Base for all output nodes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_node_id)
    type: str
    children: list[Any] = Field(default_factory=list)

    def get_first(self, kind: str) -> Any | None:
        """Return the first child of the given kind, or None."""
        return next((child for child in self.children if child.type == kind), None)

    def get_all(self, kind: str) -> list[Any]:
        """Return all children of the given kind, in order."""
        return [child for child in self.children if child.type == kind]

    def remove_first(self, kind: str) -> None:
        """Remove the first child of the given kind, if any."""
        for index, child in enumerate(self.children):
            if child.type == kind:
                del self.children[index]
                return

    def remove_all(self, kind: str) -> None:
        """Remove every child of the given kind."""
        self.children[:] = [child for child in self.children if child.type != kind]

    def clear(self) -> None:
        """Remove all children."""
        self.children.clear()

    def content_dump(self) -> dict[str, Any]:
        """Dump the subtree to JSON-compatible data with every ``id`` removed.

        Two trees built from the same input compare equal on this dump.
        """
        return _strip_ids(self.model_dump(mode="json"))


# === INLINE NODES ===


class TextNode(MarkdownNode):
    type: Literal["text"] = "text"
    text: str


class StrongNode(MarkdownNode):
    type: Literal["strong"] = "strong"
    text: str


class ItalicNode(MarkdownNode):
    type: Literal["italic"] = "italic"
    text: str


class InlineCodeNode(MarkdownNode):
    type: Literal["inline_code"] = "inline_code"
    text: str


class StrikethroughNode(MarkdownNode):
    type: Literal["strikethrough"] = "strikethrough"
    text: str  # delimiter remnants already stripped


class LinkNode(MarkdownNode):
    type: Literal["link"] = "link"
    text: str
    destination: str | None = None


class ImageNode(MarkdownNode):
    type: Literal["image"] = "image"
    text: str  # title, falling back to alt text
    source: str | None = None


InlineNode = Annotated[
    TextNode | StrongNode | ItalicNode | InlineCodeNode | StrikethroughNode | LinkNode | ImageNode,
    Field(discriminator="type"),
]


# === BLOCK NODES ===


class ParagraphNode(MarkdownNode):
    type: Literal["paragraph"] = "paragraph"
    children: list[InlineNode] = Field(default_factory=list)


class HeadingNode(MarkdownNode):
    type: Literal["heading"] = "heading"
    level: Literal[1, 2, 3, 4, 5, 6]
    text: str


class CodeBlockNode(MarkdownNode):
    type: Literal["code_block"] = "code_block"
    language: str | None = None
    code: str


class ListItemNode(MarkdownNode):
    """One paragraph of a list item.

    ``children`` stays empty unless sublists are configured to nest under their
    preceding item.
    """

    type: Literal["list_item"] = "list_item"
    paragraph: ParagraphNode
    children: list["ListNode"] = Field(default_factory=list)


class ListNode(MarkdownNode):
    type: Literal["list"] = "list"
    list_type: ListType
    depth: int = Field(ge=0)
    children: list["ListChild"] = Field(default_factory=list)


ListChild = Annotated[ListItemNode | ListNode, Field(discriminator="type")]


class TableNode(MarkdownNode):
    """Table with three views of the same cells.

    ``body[r][c]`` and ``children[r * columns + c]`` are the same object.
    """

    type: Literal["table"] = "table"
    headers: list[ParagraphNode] = Field(default_factory=list)
    body: list[list[ParagraphNode]] = Field(default_factory=list)
    children: list[ParagraphNode] = Field(default_factory=list)


class BlockQuoteNode(MarkdownNode):
    type: Literal["block_quote"] = "block_quote"
    children: list["BlockNode"] = Field(default_factory=list)


BlockNode = Annotated[
    HeadingNode | ParagraphNode | CodeBlockNode | ListNode | TableNode | BlockQuoteNode,
    Field(discriminator="type"),
]


class RootNode(MarkdownNode):
    type: Literal["root"] = "root"
    children: list[BlockNode] = Field(default_factory=list)


# Update forward references
ListItemNode.model_rebuild()
ListNode.model_rebuild()
BlockQuoteNode.model_rebuild()
RootNode.model_rebuild()
