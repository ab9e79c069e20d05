"""Tests for inline node transformation."""

from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from markview.markdown import parse_markdown, transform_to_document
from markview.markdown.diagnostics import DiagnosticKind, DiagnosticLog
from markview.markdown.inline import build_inline, inline_children, plain_text, strip_strikethrough
from markview.markdown.models import (
    ImageNode,
    InlineCodeNode,
    ItalicNode,
    LinkNode,
    StrikethroughNode,
    StrongNode,
    TextNode,
)


def inlines(md: str):
    """Transform a single-paragraph document and return its inline nodes."""
    doc = transform_to_document(parse_markdown(md))
    return doc.root.children[0].children


def paragraph_tree(*inline_tokens: Token) -> SyntaxTreeNode:
    return SyntaxTreeNode(
        [
            Token("paragraph_open", "p", 1, block=True),
            Token("inline", "", 0, children=list(inline_tokens)),
            Token("paragraph_close", "p", -1, block=True),
        ]
    )


class TestStringKinds:
    def test_text(self):
        nodes = inlines("just text")
        assert isinstance(nodes[0], TextNode)
        assert nodes[0].text == "just text"

    def test_strong_italic_code(self):
        nodes = inlines("**bold** *em* `x = 1`")
        assert isinstance(nodes[0], StrongNode) and nodes[0].text == "bold"
        assert isinstance(nodes[2], ItalicNode) and nodes[2].text == "em"
        assert isinstance(nodes[4], InlineCodeNode) and nodes[4].text == "x = 1"

    def test_nested_formatting_collapses(self):
        """A link inside strong becomes part of the strong node's plain text."""
        nodes = inlines("**see [docs](http://example.com) now**")
        assert len(nodes) == 1
        assert isinstance(nodes[0], StrongNode)
        assert nodes[0].text == "see docs now"


class TestEmphasisAtBlockEdges:
    """Emphasis opening or closing a block leaves no empty Text nodes."""

    def test_strong_alone(self):
        nodes = inlines("**bold**")
        assert [(node.type, node.text) for node in nodes] == [("strong", "bold")]

    def test_strong_at_start(self):
        nodes = inlines("**bold** tail")
        assert [(node.type, node.text) for node in nodes] == [("strong", "bold"), ("text", " tail")]

    def test_strong_at_end(self):
        nodes = inlines("head *em*")
        assert [(node.type, node.text) for node in nodes] == [("text", "head "), ("italic", "em")]

    def test_list_item(self):
        doc = transform_to_document(parse_markdown("- **first**\n- last **word**"))
        items = doc.root.children[0].children
        assert [node.type for node in items[0].paragraph.children] == ["strong"]
        assert [node.type for node in items[1].paragraph.children] == ["text", "strong"]

    def test_table_cell(self):
        doc = transform_to_document(parse_markdown("| **h** |\n|---|\n| **v** |"))
        table = doc.root.children[0]
        assert [node.type for node in table.headers[0].children] == ["strong"]
        assert [node.type for node in table.body[0][0].children] == ["strong"]

    def test_empty_text_not_a_diagnostic(self):
        diagnostics = DiagnosticLog()
        tree = paragraph_tree(
            Token("text", "", 0, content=""),
            Token("strong_open", "strong", 1, markup="**"),
            Token("text", "", 0, content="bold"),
            Token("strong_close", "strong", -1, markup="**"),
            Token("text", "", 0, content=""),
        )
        nodes = build_inline(inline_children(tree.children[0]), diagnostics)
        assert [(node.type, node.text) for node in nodes] == [("strong", "bold")]
        assert diagnostics.entries == []


class TestStrikethrough:
    def test_parser_strikethrough(self):
        """markdown-it already removes the ~~ markers."""
        nodes = inlines("~~deleted~~")
        assert isinstance(nodes[0], StrikethroughNode)
        assert nodes[0].text == "deleted"

    def test_raw_delimiter_remnants_stripped(self):
        """Raw text `~deleted~` loses exactly one delimiter at each end."""
        tree = paragraph_tree(
            Token("s_open", "s", 1, markup="~~"),
            Token("text", "", 0, content="~deleted~"),
            Token("s_close", "s", -1, markup="~~"),
        )
        doc = transform_to_document(tree)
        node = doc.root.children[0].children[0]
        assert isinstance(node, StrikethroughNode)
        assert node.text == "deleted"

    def test_strip_only_when_leading_delimiter(self):
        assert strip_strikethrough("~~x~~") == "~x~"
        assert strip_strikethrough("plain~") == "plain~"
        assert strip_strikethrough("") == ""


class TestLinksAndImages:
    def test_link(self):
        nodes = inlines("[the docs](http://example.com)")
        assert isinstance(nodes[0], LinkNode)
        assert nodes[0].text == "the docs"
        assert nodes[0].destination == "http://example.com"

    def test_link_without_destination_attr(self):
        tree = paragraph_tree(
            Token("link_open", "a", 1),
            Token("text", "", 0, content="orphan"),
            Token("link_close", "a", -1),
        )
        node = transform_to_document(tree).root.children[0].children[0]
        assert isinstance(node, LinkNode)
        assert node.destination is None

    def test_image_prefers_title(self):
        nodes = inlines('![alt text](cat.png "A cat")')
        assert isinstance(nodes[0], ImageNode)
        assert nodes[0].text == "A cat"
        assert nodes[0].source == "cat.png"

    def test_image_falls_back_to_alt(self):
        nodes = inlines("![alt text](cat.png)")
        assert nodes[0].text == "alt text"
        assert nodes[0].source == "cat.png"


class TestInlineDrop:
    def test_softbreak_dropped(self):
        """Line breaks are not representable and leave no node behind."""
        doc = transform_to_document(parse_markdown("line one\nline two"))
        nodes = doc.root.children[0].children
        assert [node.text for node in nodes] == ["line one", "line two"]
        assert [(d.kind, d.node_type) for d in doc.diagnostics] == [(DiagnosticKind.INLINE_DROP, "softbreak")]

    def test_html_inline_dropped(self):
        doc = transform_to_document(parse_markdown("a <span>b</span> c"))
        nodes = doc.root.children[0].children
        assert all(isinstance(node, TextNode) for node in nodes)
        assert "".join(node.text for node in nodes) == "a b c"
        assert {d.node_type for d in doc.diagnostics} == {"html_inline"}

    def test_drop_has_no_line(self):
        diagnostics = DiagnosticLog()
        tree = paragraph_tree(Token("hardbreak", "br", 0))
        assert build_inline(inline_children(tree.children[0]), diagnostics) == []
        assert diagnostics.entries[0].line is None


class TestPlainText:
    def test_projection_of_nested_nodes(self):
        ast = parse_markdown("a **b *c*** `d`")
        inline = ast.children[0].children[0]
        assert plain_text(inline) == "a b c d"

    def test_breaks(self):
        ast = parse_markdown("a\nb  \nc")
        inline = ast.children[0].children[0]
        assert plain_text(inline) == "a b\nc"

    def test_inline_children_of_empty_cell(self):
        ast = parse_markdown("| A |\n|---|\n|   |")
        td = ast.children[0].children[1].children[0].children[0]
        assert inline_children(td) == []
