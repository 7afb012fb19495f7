# src/mdtree/parsers/markdown_parser.py

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from time import monotonic

from mdtree.observability import names
from mdtree.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .inline import parse_inline
from .models import BlockElement, Divider, Header, ListBlock, ListItem, Paragraph

logger = logging.getLogger(__name__)

MAX_HEADER_LEVEL = 6
UNORDERED_MARKERS = ("- ", "* ", "+ ")
DIVIDERS = frozenset({"---", "***", "___"})

_ORDERED_MARKER = re.compile(r"[0-9]+\. ")


class ListType(str, Enum):
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass
class _ListRun:
    """Sibling items collected so far for the list open in a scope."""

    indentation: int
    list_type: ListType
    items: list[ListItem] = field(default_factory=list)

    def close(self) -> ListBlock:
        return ListBlock(items=self.items, ordered=self.list_type is ListType.ORDERED)


@dataclass
class _Scope:
    """Contiguous line range parsed at one minimum indentation.

    The root scope is the whole document; every other scope holds the content
    of one list item and becomes that item when its range is exhausted.
    """

    end: int
    min_indentation: int
    blocks: list[BlockElement] = field(default_factory=list)
    open_list: _ListRun | None = None

    def close_list(self) -> None:
        if self.open_list is not None:
            self.blocks.append(self.open_list.close())
            self.open_list = None


class MarkdownParser(DocumentParser):
    """
    Line-based parser for a small Markdown dialect.
    - Headers, paragraphs, dividers, ordered and unordered lists
    - List nesting is inferred from leading spaces only
    - Every non-blank text line becomes its own paragraph
    - Never raises: unrecognised markup falls back to a paragraph
    - Nesting depth is bounded by memory, not the interpreter stack
    """

    def __init__(
        self,
        nested_indent: int = 2,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._nested_indent = nested_indent
        self.metrics_hook = metrics_hook
        logger.info("Initialized MarkdownParser with nested_indent=%s", nested_indent)

    def parse(self, markdown: str) -> list[BlockElement]:
        start = monotonic()
        lines = markdown.split("\n")
        blocks = self._parse_blocks(lines)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.MARKDOWN_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.MARKDOWN_PARSE_TOTAL)
        self.metrics_hook.increment(names.MARKDOWN_LINES_PROCESSED, len(lines))
        self.metrics_hook.record_gauge(names.MARKDOWN_BLOCKS_CREATED, len(blocks))
        logger.debug("Parsed %d lines into %d blocks", len(lines), len(blocks))
        return blocks

    def _parse_blocks(self, lines: list[str]) -> list[BlockElement]:
        """Parse all lines, keeping open list items on an explicit scope stack."""
        indents = [_indentation(line) for line in lines]
        root = _Scope(end=len(lines), min_indentation=0)
        scopes = [root]
        i = 0

        while True:
            scope = scopes[-1]

            if i >= scope.end:
                scope.close_list()
                if scope is root:
                    return root.blocks
                scopes.pop()
                parent = scopes[-1]
                # Only list items open nested scopes
                assert parent.open_list is not None
                parent.open_list.items.append(ListItem(content=scope.blocks))
                continue

            indentation = indents[i]
            trimmed = lines[i][indentation:].strip()

            run = scope.open_list
            if run is not None:
                if indentation == run.indentation and _list_type(trimmed) is run.list_type:
                    i = self._open_item(scopes, indents, i, indentation, trimmed)
                    continue
                scope.close_list()

            # Nested ranges only hold lines at or beyond their minimum
            if indentation < scope.min_indentation:
                i = scope.end
                continue

            if not trimmed:
                i += 1
                continue

            header = _parse_header(trimmed)
            if header is not None:
                level, text = header
                scope.blocks.append(Header(level=level, text=parse_inline(text)))
                i += 1
                continue

            list_type = _list_type(trimmed)
            if list_type is not None:
                scope.open_list = _ListRun(indentation=indentation, list_type=list_type)
                i = self._open_item(scopes, indents, i, indentation, trimmed)
                continue

            if trimmed in DIVIDERS:
                scope.blocks.append(Divider())
                i += 1
                continue

            scope.blocks.append(Paragraph(text=parse_inline(trimmed)))
            i += 1

    def _open_item(
        self,
        scopes: list[_Scope],
        indents: list[int],
        i: int,
        indentation: int,
        trimmed: str,
    ) -> int:
        """Push a scope for the item whose marker is on line ``i``; return the next cursor."""
        marker_length = len(trimmed.split(maxsplit=1)[0]) + 1
        initial_content = trimmed[marker_length:].strip()

        content: list[BlockElement] = []
        if initial_content:
            content.append(Paragraph(text=parse_inline(initial_content)))

        nested_min = indentation + self._nested_indent
        end = i + 1
        bound = scopes[-1].end
        while end < bound and indents[end] >= nested_min:
            end += 1

        scopes.append(_Scope(end=end, min_indentation=nested_min, blocks=content))
        return i + 1


def _indentation(line: str) -> int:
    # Spaces only; tabs are content
    return len(line) - len(line.lstrip(" "))


def _parse_header(trimmed: str) -> tuple[int, str] | None:
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if not 1 <= level <= MAX_HEADER_LEVEL:
        return None
    if trimmed[level : level + 1] != " ":
        return None
    return level, trimmed[level + 1 :].strip()


def _list_type(trimmed: str) -> ListType | None:
    if trimmed.startswith(UNORDERED_MARKERS):
        return ListType.UNORDERED
    if _ORDERED_MARKER.match(trimmed):
        return ListType.ORDERED
    return None


@lru_cache(maxsize=1)
def _default_parser() -> MarkdownParser:
    return MarkdownParser()


def parse(markdown: str) -> list[BlockElement]:
    """Parse ``markdown`` with the default configuration."""
    return _default_parser().parse(markdown)
