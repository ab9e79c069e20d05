"""Observable record of parse nodes the typed tree cannot represent.

Unknown block kinds are traversed in place (BlockFallthrough), unknown inline
kinds are dropped (InlineDrop), and list-item children other than paragraphs and
sublists lose their own content (ListContentDrop). Each event becomes a
Diagnostic instead of disappearing silently.
"""

from enum import StrEnum

from loguru import logger
from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel

from markview.exceptions import UnrepresentableNodeError


class DiagnosticKind(StrEnum):
    BLOCK_FALLTHROUGH = "block_fallthrough"
    INLINE_DROP = "inline_drop"
    LIST_CONTENT_DROP = "list_content_drop"


class Diagnostic(BaseModel):
    kind: DiagnosticKind
    node_type: str
    line: int | None = None  # 0-based, block nodes only


class DiagnosticLog:
    """Collects diagnostics for a single transform.

    In strict mode the first event raises UnrepresentableNodeError instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.entries: list[Diagnostic] = []

    def record(self, kind: DiagnosticKind, node: SyntaxTreeNode) -> None:
        diagnostic = Diagnostic(kind=kind, node_type=node.type, line=node.map[0] if node.map else None)
        if self.strict:
            raise UnrepresentableNodeError(diagnostic)
        logger.debug(f"{kind}: {node.type} (line {diagnostic.line})")
        self.entries.append(diagnostic)

    def block_fallthrough(self, node: SyntaxTreeNode) -> None:
        self.record(DiagnosticKind.BLOCK_FALLTHROUGH, node)

    def inline_drop(self, node: SyntaxTreeNode) -> None:
        self.record(DiagnosticKind.INLINE_DROP, node)

    def list_content_drop(self, node: SyntaxTreeNode) -> None:
        self.record(DiagnosticKind.LIST_CONTENT_DROP, node)
