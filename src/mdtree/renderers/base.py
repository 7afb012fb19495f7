# src/mdtree/renderers/base.py

from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from mdtree.observability.base import MetricsHook
from mdtree.parsers.models import BlockElement


class HeaderWeight(str, Enum):
    """Visual weight of a header, from heaviest to the body-text fallback."""

    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    CAPTION = "caption"
    BODY = "body"


_LEVEL_WEIGHTS = {
    1: HeaderWeight.TITLE,
    2: HeaderWeight.TITLE2,
    3: HeaderWeight.TITLE3,
    4: HeaderWeight.HEADLINE,
    5: HeaderWeight.SUBHEADLINE,
    6: HeaderWeight.CAPTION,
}


def header_weight(level: int) -> HeaderWeight:
    return _LEVEL_WEIGHTS.get(level, HeaderWeight.BODY)


class Renderer(Protocol):
    """Protocol for document renderers.

    Renderers traverse the tree read-only. They never change what the parser
    decided a block is; they only decide how it looks.
    """

    metrics_hook: MetricsHook

    def render(self, blocks: Sequence[BlockElement]) -> str: ...
