# src/mdtree/parsers/factory.py

from mdtree.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .markdown_parser import MarkdownParser


def create_parser(
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> MarkdownParser:
    """Create a Markdown parser from config.

    Args:
        config: Parser configuration.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured MarkdownParser.

    Raises:
        ValueError: If ``nested_indent`` is not positive.

    Example:
        >>> parser = create_parser(ParserConfig(nested_indent=4))
        >>> blocks = parser.parse("- item")
    """
    if config.nested_indent <= 0:
        raise ValueError("nested_indent must be > 0")

    return MarkdownParser(
        nested_indent=config.nested_indent,
        metrics_hook=metrics_hook,
    )
