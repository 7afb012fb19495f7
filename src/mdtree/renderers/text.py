# src/mdtree/renderers/text.py

import logging
from collections.abc import Sequence
from time import monotonic

from mdtree.observability import names
from mdtree.observability.base import MetricsHook, NoOpMetricsHook
from mdtree.parsers.models import (
    BlockElement,
    Divider,
    Header,
    ListBlock,
    Paragraph,
    TextSpan,
    TextStyle,
    plain_text,
)

from .base import HeaderWeight, Renderer, header_weight

logger = logging.getLogger(__name__)

RULE_CHAR = "─"
BULLET = " •"

_STYLE_SGR: dict[TextStyle, tuple[str, ...]] = {
    TextStyle.PLAIN: (),
    TextStyle.BOLD: ("1",),
    TextStyle.ITALIC: ("3",),
    TextStyle.BOLD_ITALIC: ("1", "3"),
}

_WEIGHT_SGR: dict[HeaderWeight, tuple[str, ...]] = {
    HeaderWeight.TITLE: ("1", "4"),
    HeaderWeight.TITLE2: ("1",),
    HeaderWeight.TITLE3: ("1",),
    HeaderWeight.HEADLINE: ("1",),
    HeaderWeight.SUBHEADLINE: (),
    HeaderWeight.CAPTION: ("2",),
    HeaderWeight.BODY: (),
}

_UNDERLINES = {
    HeaderWeight.TITLE: "=",
    HeaderWeight.TITLE2: "-",
}


class TextRenderer(Renderer):
    """
    Renders a document tree as terminal text.
    - Plain mode marks heavy headers with an underline row
    - ANSI mode uses SGR bold/italic/underline instead
    - List prefixes are padded to a fixed indent width
    """

    def __init__(
        self,
        indent_width: int = 4,
        rule_width: int = 40,
        ansi: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if indent_width <= 0:
            raise ValueError("indent_width must be > 0")
        if rule_width <= 0:
            raise ValueError("rule_width must be > 0")

        self._indent_width = indent_width
        self._rule_width = rule_width
        self._ansi = ansi
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized TextRenderer with indent_width=%s, rule_width=%s, ansi=%s",
            indent_width,
            rule_width,
            ansi,
        )

    def render(self, blocks: Sequence[BlockElement]) -> str:
        start = monotonic()
        output = "\n\n".join(self._render_block(block) for block in blocks)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.RENDER_TOTAL, labels={"renderer": "text"})
        logger.debug("Rendered %d blocks into %d characters", len(blocks), len(output))
        return output

    def _render_block(self, block: BlockElement) -> str:
        if isinstance(block, ListBlock):
            return self._render_list(block)
        return self._render_leaf(block)

    def _render_leaf(self, block: BlockElement) -> str:
        if isinstance(block, Header):
            return self._render_header(block)
        if isinstance(block, Paragraph):
            return self._render_spans(block.text)
        if isinstance(block, Divider):
            return RULE_CHAR * self._rule_width
        raise TypeError(f"Unsupported block type: {type(block).__name__}")

    def _render_header(self, header: Header) -> str:
        weight = header_weight(header.level)
        if self._ansi:
            return self._render_spans(header.text, _WEIGHT_SGR[weight])

        text = plain_text(header.text)
        underline = _UNDERLINES.get(weight)
        if underline and text:
            return f"{text}\n{underline * len(text)}"
        return text

    def _render_spans(
        self, spans: Sequence[TextSpan], base_codes: tuple[str, ...] = ()
    ) -> str:
        if not self._ansi:
            return plain_text(spans)

        parts = []
        for span in spans:
            # dict.fromkeys keeps order and drops repeated codes
            codes = list(dict.fromkeys(base_codes + _STYLE_SGR[span.style]))
            if codes:
                parts.append(f"\x1b[{';'.join(codes)}m{span.text}\x1b[0m")
            else:
                parts.append(span.text)
        return "".join(parts)

    def _render_list(self, block: ListBlock) -> str:
        """Lay out a list and everything nested in it without recursing.

        Work entries carry the prefix for an element's first line and the one
        for its remaining lines; nested lists expand into entries for their
        items in place.
        """
        indent = " " * self._indent_width
        lines: list[str] = []
        work: list[tuple[BlockElement | None, str, str]] = [(block, "", "")]

        while work:
            element, first_prefix, rest_prefix = work.pop()

            if element is None:
                lines.append(first_prefix.rstrip())
                continue

            if not isinstance(element, ListBlock):
                first, *rest = self._render_leaf(element).split("\n")
                lines.append(_prefixed(first_prefix, first))
                lines.extend(_prefixed(rest_prefix, line) for line in rest)
                continue

            nested_prefix = rest_prefix + indent
            expanded: list[tuple[BlockElement | None, str, str]] = []
            for index, item in enumerate(element.items, start=1):
                marker = f"{index}. " if element.ordered else BULLET
                outer = first_prefix if index == 1 else rest_prefix
                lead = outer + marker.ljust(self._indent_width)

                if not item.content:
                    expanded.append((None, lead, nested_prefix))
                    continue

                first_element, *rest_elements = item.content
                expanded.append((first_element, lead, nested_prefix))
                expanded.extend(
                    (child, nested_prefix, nested_prefix) for child in rest_elements
                )
            work.extend(reversed(expanded))

        return "\n".join(lines)


def _prefixed(prefix: str, line: str) -> str:
    # Blank lines stay blank apart from a list marker
    if not line:
        return prefix.rstrip()
    return prefix + line
