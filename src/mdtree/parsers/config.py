# src/mdtree/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for Markdown parsers.

    Immutable. Explicit. Nothing is read from the environment.
    """

    # Extra leading spaces a line needs to nest under a list item.
    nested_indent: int = 2
