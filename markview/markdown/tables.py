"""Table builder: markdown-it table nodes to typed Table nodes.

Each body cell becomes one Paragraph that is shared by two views: the
row-major ``body`` matrix and the flat ``children`` sequence. Header cells only
appear in ``headers``.
"""

from markdown_it.tree import SyntaxTreeNode

from markview.markdown.diagnostics import DiagnosticLog
from markview.markdown.inline import build_inline, inline_children
from markview.markdown.models import ParagraphNode, TableNode


def build_table(node: SyntaxTreeNode, diagnostics: DiagnosticLog) -> TableNode:
    """Transform table node."""
    headers: list[ParagraphNode] = []
    body: list[list[ParagraphNode]] = []
    cells: list[ParagraphNode] = []

    for child in node.children:
        if child.type == "thead":
            for tr in child.children:
                headers.extend(_build_cell(th, diagnostics) for th in tr.children)
        elif child.type == "tbody":
            for tr in child.children:
                row = [_build_cell(td, diagnostics) for td in tr.children]
                body.append(row)
                cells.extend(row)

    return TableNode(headers=headers, body=body, children=cells)


def _build_cell(cell: SyntaxTreeNode, diagnostics: DiagnosticLog) -> ParagraphNode:
    return ParagraphNode(children=build_inline(inline_children(cell), diagnostics))
