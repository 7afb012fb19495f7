# src/mdtree/parsers/__init__.py

"""Markdown parsing layer for mdtree.

Turns plain text in a small Markdown dialect into an immutable tree of
block elements with styled inline spans.

Design principles:
- Total: every string parses, malformed markup degrades to a paragraph
- Stateless: parser objects hold configuration only
- Indentation drives list nesting

Example:
    >>> from mdtree.parsers import parse
    >>>
    >>> blocks = parse("# Title\\n- one\\n- two")
    >>> [block.type for block in blocks]
    ['header', 'list']
"""

from .base import DocumentParser
from .config import ParserConfig
from .factory import create_parser
from .inline import parse_inline
from .markdown_parser import MarkdownParser, parse
from .models import (
    BlockElement,
    Divider,
    Header,
    ListBlock,
    ListItem,
    Paragraph,
    TextSpan,
    TextStyle,
    dump_document,
    load_document,
    plain_text,
)

__all__ = [
    # Entry points
    "parse",
    "parse_inline",
    "create_parser",
    # Protocol
    "DocumentParser",
    # Implementation
    "MarkdownParser",
    # Config
    "ParserConfig",
    # Types
    "BlockElement",
    "Divider",
    "Header",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "TextSpan",
    "TextStyle",
    # Export
    "dump_document",
    "load_document",
    "plain_text",
]
