# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    BlockElement,
    Divider,
    DocumentParser,
    Header,
    ListBlock,
    ListItem,
    MarkdownParser,
    Paragraph,
    ParserConfig,
    TextSpan,
    TextStyle,
    create_parser,
    dump_document,
    load_document,
    parse,
    parse_inline,
    plain_text,
)

# Renderers
from .renderers import HeaderWeight, Renderer, TextRenderer, header_weight

__all__ = [
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "BlockElement",
    "Divider",
    "DocumentParser",
    "Header",
    "ListBlock",
    "ListItem",
    "MarkdownParser",
    "Paragraph",
    "ParserConfig",
    "TextSpan",
    "TextStyle",
    "create_parser",
    "dump_document",
    "load_document",
    "parse",
    "parse_inline",
    "plain_text",
    # Renderers
    "HeaderWeight",
    "Renderer",
    "TextRenderer",
    "header_weight",
]
