from markview.config import Settings
from markview.markdown.parser import DEFAULT_PRESET, create_parser, parse_markdown
from markview.markdown.transformer import MarkdownDocument, transform_to_document


def markdown_to_document(text: str, settings: Settings | None = None) -> MarkdownDocument:
    """Parse markdown text and build its typed tree in one step."""
    settings = settings or Settings()
    parser = None if settings.parser_preset == DEFAULT_PRESET else create_parser(settings.parser_preset)
    return transform_to_document(parse_markdown(text, parser), settings.transform)
