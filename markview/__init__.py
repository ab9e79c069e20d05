"""Typed, presentation-oriented node trees for markdown documents."""

from markview.config import Settings
from markview.document import markdown_to_document
from markview.exceptions import MarkviewError, UnrepresentableNodeError
from markview.markdown import MarkdownDocument, parse_markdown, transform_to_document

__all__ = [
    "MarkdownDocument",
    "MarkviewError",
    "Settings",
    "UnrepresentableNodeError",
    "markdown_to_document",
    "parse_markdown",
    "transform_to_document",
]
