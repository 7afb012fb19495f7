# src/mdtree/parsers/base.py

from typing import Protocol

from mdtree.observability.base import MetricsHook

from .models import BlockElement


class DocumentParser(Protocol):
    metrics_hook: MetricsHook

    def parse(self, markdown: str) -> list[BlockElement]:
        """
        Parse text into a list of top-level block elements.

        Requirements:
        - Total: every string is valid input, nothing is raised
        - Deterministic output for same input
        - No state kept between calls
        """
        ...
